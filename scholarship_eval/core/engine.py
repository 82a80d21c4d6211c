from typing import Iterable, List, Optional

from scholarship_eval.core.classifier import classify
from scholarship_eval.core.models import CaseFile, Result, RuleResult, reject
from scholarship_eval.core.policy_factory import PolicyFactory
from scholarship_eval.core.rules import AndRule, general_eligibility_rule


class EligibilityEngine:
    def __init__(self, factory: Optional[PolicyFactory] = None, gate: Optional[AndRule] = None):
        self.factory = factory or PolicyFactory()
        self.gate = gate or general_eligibility_rule()

    def check_general_eligibility(self, case: CaseFile) -> RuleResult:
        return self.gate.evaluate(case)

    def evaluate(self, case: CaseFile) -> Result:
        # classification comes first so a rejected result still names its program
        program = classify(case.applicant_id)
        gate = self.check_general_eligibility(case)
        if not gate.passed:
            return reject(case, program, gate.explanation)
        return self.factory.for_program(program).evaluate(case)

    def evaluate_all(self, cases: Iterable[CaseFile]) -> List[Result]:
        return [self.evaluate(c) for c in cases]
