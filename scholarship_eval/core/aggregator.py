import logging
from typing import Dict, Iterable, List

from scholarship_eval.core.decoder import Fact
from scholarship_eval.core.models import (
    ApplicantProfile,
    CaseFile,
    Document,
    FamilyInfo,
    Publication,
    TranscriptFact,
)

logger = logging.getLogger(__name__)


class ApplicantAggregator:
    """
    Collects decoded facts in any order and builds one CaseFile per applicant.

    Facts are buffered per applicant id and only joined in build(), so a
    document may arrive before its applicant's profile. Facts whose id never
    gets a profile are dropped.

    Repeated profile or family facts must agree; identical repeats collapse
    to one, conflicting ones count as absent.
    """

    def __init__(self) -> None:
        self.profiles: Dict[str, List[ApplicantProfile]] = {}
        self.transcripts: Dict[str, List[bool]] = {}
        self.families: Dict[str, List[FamilyInfo]] = {}
        self.documents: Dict[str, List[Document]] = {}
        self.publications: Dict[str, List[Publication]] = {}

    def add(self, fact: Fact) -> None:
        aid = fact.applicant_id
        if isinstance(fact, ApplicantProfile):
            self.profiles.setdefault(aid, []).append(fact)
        elif isinstance(fact, TranscriptFact):
            self.transcripts.setdefault(aid, []).append(fact.valid)
        elif isinstance(fact, FamilyInfo):
            self.families.setdefault(aid, []).append(fact)
        elif isinstance(fact, Document):
            self.documents.setdefault(aid, []).append(fact)
        elif isinstance(fact, Publication):
            self.publications.setdefault(aid, []).append(fact)
        else:
            raise TypeError(f"Unsupported fact: {fact!r}")

    def add_all(self, facts: Iterable[Fact]) -> None:
        for fact in facts:
            self.add(fact)

    def _log_orphans(self) -> None:
        referenced = set(self.transcripts) | set(self.families) | set(self.documents) | set(self.publications)
        for aid in sorted(referenced - set(self.profiles)):
            logger.debug("Discarding facts for %s: no applicant profile", aid)

    def build(self) -> List[CaseFile]:
        self._log_orphans()
        cases: List[CaseFile] = []
        for aid, candidates in self.profiles.items():
            profile = _single(candidates)
            if profile is None:
                logger.warning("Conflicting applicant profiles for %s, applicant discarded", aid)
                continue
            family = _single(self.families.get(aid, []))
            if family is None and aid in self.families:
                logger.warning("Conflicting family info for %s ignored", aid)
            marks = self.transcripts.get(aid, [])
            cases.append(CaseFile(
                applicant_id=aid,
                name=profile.name,
                gpa=profile.gpa,
                income=profile.income,
                # every transcript fact must say valid; none at all means invalid
                transcript_valid=bool(marks) and all(marks),
                family=family,
                documents=list(self.documents.get(aid, [])),
                publications=list(self.publications.get(aid, [])),
            ))
        return cases


def _single(facts):
    # the one distinct fact, or None when there are none or they disagree
    distinct = []
    for f in facts:
        if f not in distinct:
            distinct.append(f)
    return distinct[0] if len(distinct) == 1 else None


def aggregate(facts: Iterable[Fact]) -> List[CaseFile]:
    aggregator = ApplicantAggregator()
    aggregator.add_all(facts)
    return aggregator.build()
