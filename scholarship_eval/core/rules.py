from typing import Protocol

from scholarship_eval.core.models import CaseFile, RuleResult, ENR


class EligibilityRule(Protocol):
    def evaluate(self, case: CaseFile) -> RuleResult: ...


class DocumentRequirementRule:
    def __init__(self, document_type: str, reason: str):
        self.document_type = document_type
        self.reason = reason

    def evaluate(self, case: CaseFile) -> RuleResult:
        if not case.has_document(self.document_type):
            return RuleResult(False, self.reason)
        return RuleResult(True, f"{self.document_type} present")


class TranscriptRule:
    def __init__(self, reason: str = "Missing Transcript"):
        self.reason = reason

    def evaluate(self, case: CaseFile) -> RuleResult:
        if not case.transcript_valid:
            return RuleResult(False, self.reason)
        return RuleResult(True, "transcript valid")


class MinimumGpaRule:
    def __init__(self, min_gpa: float, reason: str):
        self.min_gpa = float(min_gpa)
        self.reason = reason

    def evaluate(self, case: CaseFile) -> RuleResult:
        if case.gpa < self.min_gpa:
            return RuleResult(False, self.reason)
        return RuleResult(True, f"GPA {case.gpa:.2f} ≥ {self.min_gpa:.2f}")


class AndRule:
    """Runs rules in order; the first failure is the result."""

    def __init__(self, *rules):
        self.rules = list(rules)

    def evaluate(self, case: CaseFile) -> RuleResult:
        exps = []
        for r in self.rules:
            rr = r.evaluate(case)
            if not rr.passed:
                return rr
            exps.append(rr.explanation)
        return RuleResult(True, " | ".join(exps))


def general_eligibility_rule() -> AndRule:
    # Order matters: the first missing requirement is the reported reason
    return AndRule(
        DocumentRequirementRule(ENR, "Missing Enrollment Certificate"),
        TranscriptRule("Missing Transcript"),
        MinimumGpaRule(2.50, "GPA below 2.5"),
    )
