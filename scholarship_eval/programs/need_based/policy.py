from typing import Tuple

from scholarship_eval.core.models import CaseFile, Result, NEED_BASED, FULL, HALF, SAV, accept, reject


class NeedBasedPolicy:
    """
    Need-based scholarship (ids starting with 22).

    Thresholds on family income, scaled by an additive multiplier:
      base:               Full ≤ 10000, Half ≤ 15000
      SAV document:       +0.20
      3 or more dependents: +0.10
    So SAV with 3 dependents gives ×1.30 (Full ≤ 13000, Half ≤ 19500).
    Income above the half threshold is rejected. Duration is always 1 year.
    A case without family info is rejected before any threshold is looked at.
    """

    program = NEED_BASED

    FULL_THRESHOLD = 10000.0
    HALF_THRESHOLD = 15000.0
    SAVINGS_BONUS = 0.20
    DEPENDENTS_BONUS = 0.10
    MIN_DEPENDENTS_FOR_BONUS = 3
    DURATION_YEARS = 1

    def adjustment(self, case: CaseFile) -> float:
        multiplier = 1.0
        if case.has_document(SAV):
            multiplier += self.SAVINGS_BONUS
        if case.dependents >= self.MIN_DEPENDENTS_FOR_BONUS:
            multiplier += self.DEPENDENTS_BONUS
        return multiplier

    def thresholds(self, case: CaseFile) -> Tuple[float, float]:
        m = self.adjustment(case)
        # rounded to cents so 10000 * 1.3 compares as 13000
        return round(self.FULL_THRESHOLD * m, 2), round(self.HALF_THRESHOLD * m, 2)

    def evaluate(self, case: CaseFile) -> Result:
        if case.family is None:
            return reject(case, self.program, "Family information not provided")
        full_threshold, half_threshold = self.thresholds(case)
        income = case.family_income
        if income > half_threshold:
            return reject(case, self.program, "Financial status unstable")
        tier = FULL if income <= full_threshold else HALF
        return accept(case, self.program, tier, self.DURATION_YEARS)
