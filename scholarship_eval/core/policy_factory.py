from typing import Optional

from scholarship_eval.core.errors import UnknownProgramError
from scholarship_eval.core.models import MERIT, NEED_BASED, RESEARCH
from scholarship_eval.programs.merit.policy import MeritPolicy
from scholarship_eval.programs.need_based.policy import NeedBasedPolicy
from scholarship_eval.programs.research.policy import ResearchPolicy


class PolicyFactory:
    """
    Hands out the program policy for a classified case.
    The engine calls: factory.for_program(program)
    """

    def __init__(
        self,
        merit_policy: Optional[MeritPolicy] = None,
        need_based_policy: Optional[NeedBasedPolicy] = None,
        research_policy: Optional[ResearchPolicy] = None,
    ) -> None:
        self.merit_policy = merit_policy or MeritPolicy()
        self.need_based_policy = need_based_policy or NeedBasedPolicy()
        self.research_policy = research_policy or ResearchPolicy()

    def for_program(self, program: str):
        if program == MERIT:
            return self.merit_policy
        if program == NEED_BASED:
            return self.need_based_policy
        if program == RESEARCH:
            return self.research_policy
        raise UnknownProgramError(program)
