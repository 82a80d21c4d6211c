from scholarship_eval.core.models import CaseFile, Result, MERIT, FULL, HALF, REC, accept, reject


class MeritPolicy:
    """
    Merit scholarship (ids starting with 11).

      • GPA < 3.00          → rejected
      • 3.00 ≤ GPA < 3.20   → Half
      • GPA ≥ 3.20          → Full
      • duration: 2 years with a recommendation letter (REC), otherwise 1
    """

    program = MERIT

    MIN_GPA = 3.00
    FULL_GPA = 3.20

    def determine_tier(self, gpa: float) -> str:
        return FULL if gpa >= self.FULL_GPA else HALF

    def compute_duration(self, case: CaseFile) -> int:
        return 2 if case.has_document(REC) else 1

    def evaluate(self, case: CaseFile) -> Result:
        if case.gpa < self.MIN_GPA:
            return reject(case, self.program, "GPA below 3.0")
        return accept(case, self.program, self.determine_tier(case.gpa), self.compute_duration(case))
