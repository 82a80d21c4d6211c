from __future__ import annotations

import math
from typing import Optional

from scholarship_eval.core.errors import DataIntegrityError
from scholarship_eval.core.models import CaseFile, Result, RESEARCH, FULL, HALF, GRP, RSV, accept, reject


class ResearchPolicy:
    """
    Research grant (ids starting with 33).

      • needs at least one publication or a grant proposal (GRP)
      • mean impact factor < 1.00 → rejected; ≥ 1.50 → Full; otherwise Half
      • a GRP without publications is accepted as Half
      • base duration Full 1.0 / Half 0.5 year, +1.0 with supervisor approval (RSV),
        rounded up to whole years
    """

    program = RESEARCH

    MIN_IMPACT = 1.00
    FULL_IMPACT = 1.50
    FULL_BASE_YEARS = 1.0
    HALF_BASE_YEARS = 0.5
    SUPERVISOR_BONUS_YEARS = 1.0

    def mean_impact(self, case: CaseFile) -> Optional[float]:
        values = [p.impact_factor for p in case.publications if p.impact_factor is not None]
        for v in values:
            if v < 0:
                raise DataIntegrityError(
                    f"Negative impact factor {v} for applicant {case.applicant_id}"
                )
        if not values:
            return None
        return sum(values) / len(values)

    def determine_tier(self, mean: Optional[float]) -> str:
        if mean is None:
            return HALF
        return FULL if mean >= self.FULL_IMPACT else HALF

    def compute_duration(self, case: CaseFile, tier: str) -> int:
        years = self.FULL_BASE_YEARS if tier == FULL else self.HALF_BASE_YEARS
        if case.has_document(RSV):
            years += self.SUPERVISOR_BONUS_YEARS
        return math.ceil(years)

    def evaluate(self, case: CaseFile) -> Result:
        if not case.publications and not case.has_document(GRP):
            return reject(case, self.program, "Missing publication or proposal")
        mean = self.mean_impact(case)
        if mean is not None and mean < self.MIN_IMPACT:
            return reject(case, self.program, "Publication impact too low")
        tier = self.determine_tier(mean)
        return accept(case, self.program, tier, self.compute_duration(case, tier))
