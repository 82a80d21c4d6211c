from dataclasses import dataclass, field
from typing import List, Optional

MERIT = "Merit"
NEED_BASED = "Need-Based"
RESEARCH = "Research"

ACCEPTED = "Accepted"
REJECTED = "Rejected"
PENDING = "Pending"

FULL = "Full"
HALF = "Half"

# Document type codes
ENR = "ENR"  # enrollment certificate
REC = "REC"  # recommendation letter
SAV = "SAV"  # savings document
RSV = "RSV"  # research supervisor approval
GRP = "GRP"  # grant proposal

DOCUMENT_TYPES = (ENR, REC, SAV, RSV, GRP)


@dataclass
class ApplicantProfile:
    applicant_id: str
    name: str
    gpa: float
    income: float


@dataclass
class TranscriptFact:
    applicant_id: str
    valid: bool


@dataclass
class FamilyInfo:
    applicant_id: str
    family_income: float
    dependents: int


@dataclass
class Document:
    applicant_id: str
    document_type: str
    duration_in_months: int


@dataclass
class Publication:
    applicant_id: str
    title: str
    impact_factor: Optional[float]


@dataclass
class CaseFile:
    """Everything known about one applicant, assembled before evaluation."""
    applicant_id: str
    name: str
    gpa: float
    income: float
    transcript_valid: bool = False
    family: Optional[FamilyInfo] = None
    documents: List[Document] = field(default_factory=list)
    publications: List[Publication] = field(default_factory=list)

    def has_document(self, document_type: str) -> bool:
        for d in self.documents:
            if d.document_type == document_type:
                return True
        return False

    @property
    def family_income(self) -> float:
        return self.family.family_income if self.family is not None else 0.0

    @property
    def dependents(self) -> int:
        return self.family.dependents if self.family is not None else 0


@dataclass
class RuleResult:
    passed: bool
    explanation: str


@dataclass(frozen=True)
class Result:
    applicant_id: str
    name: str
    program: str
    status: str
    award_tier: Optional[str] = None
    duration_years: Optional[float] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == ACCEPTED


def accept(case: CaseFile, program: str, tier: str, duration_years: float) -> Result:
    return Result(
        applicant_id=case.applicant_id,
        name=case.name,
        program=program,
        status=ACCEPTED,
        award_tier=tier,
        duration_years=duration_years,
    )


def reject(case: CaseFile, program: str, reason: str) -> Result:
    return Result(
        applicant_id=case.applicant_id,
        name=case.name,
        program=program,
        status=REJECTED,
        reason=reason,
    )
