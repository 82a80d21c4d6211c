from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from scholarship_eval.core.models import Result, ACCEPTED, REJECTED, FULL, HALF, MERIT, NEED_BASED, RESEARCH


def sort_key(result: Result):
    # numeric ids first, in numeric order; anything else falls back to text order
    if result.applicant_id.isdigit():
        return (0, int(result.applicant_id), result.applicant_id)
    return (1, 0, result.applicant_id)


def sort_results(results: Iterable[Result]) -> List[Result]:
    return sorted(results, key=sort_key)


def format_duration(years: float) -> str:
    if float(years) == int(years):
        n = int(years)
        return f"{n} year" if n == 1 else f"{n} years"
    return f"{years} years"


def format_result(result: Result) -> str:
    line = (
        f"Applicant ID: {result.applicant_id}, Name: {result.name}, "
        f"Scholarship: {result.program}, Status: {result.status}"
    )
    if result.status == ACCEPTED:
        return line + f", Type: {result.award_tier}, Duration: {format_duration(result.duration_years)}"
    return line + f", Reason: {result.reason}"


def render_report(results: Iterable[Result]) -> List[str]:
    return [format_result(r) for r in sort_results(results)]


def partition(results: Iterable[Result]) -> Tuple[List[Result], List[Result]]:
    accepted: List[Result] = []
    rejected: List[Result] = []
    for r in results:
        (accepted if r.status == ACCEPTED else rejected).append(r)
    return accepted, rejected


@dataclass
class Summary:
    total: int = 0
    accepted: int = 0
    rejected: int = 0
    full: int = 0
    half: int = 0
    by_program: Dict[str, int] = field(default_factory=lambda: {MERIT: 0, NEED_BASED: 0, RESEARCH: 0})

    @property
    def acceptance_rate(self) -> float:
        return self.accepted * 100.0 / self.total if self.total else 0.0

    @property
    def rejection_rate(self) -> float:
        return self.rejected * 100.0 / self.total if self.total else 0.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "total": self.total,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "full": self.full,
            "half": self.half,
            "acceptance_rate": round(self.acceptance_rate, 1),
            "rejection_rate": round(self.rejection_rate, 1),
            "by_program": dict(self.by_program),
        }


def summarize(results: Iterable[Result]) -> Summary:
    s = Summary()
    for r in results:
        s.total += 1
        s.by_program[r.program] = s.by_program.get(r.program, 0) + 1
        if r.status == ACCEPTED:
            s.accepted += 1
            if r.award_tier == FULL:
                s.full += 1
            elif r.award_tier == HALF:
                s.half += 1
        elif r.status == REJECTED:
            s.rejected += 1
    return s


def render_summary(summary: Summary) -> List[str]:
    return [
        "=== STATISTICS ===",
        f"Total Applications: {summary.total}",
        f"Accepted: {summary.accepted} ({summary.acceptance_rate:.1f}%)",
        f"Rejected: {summary.rejected} ({summary.rejection_rate:.1f}%)",
        "Scholarship Types:",
        f"  Full Scholarships: {summary.full}",
        f"  Half Scholarships: {summary.half}",
        "Application Distribution:",
        f"  Merit-Based: {summary.by_program.get(MERIT, 0)}",
        f"  Need-Based: {summary.by_program.get(NEED_BASED, 0)}",
        f"  Research Grant: {summary.by_program.get(RESEARCH, 0)}",
    ]
