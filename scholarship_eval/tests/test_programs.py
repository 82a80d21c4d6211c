import pytest

from scholarship_eval.core.engine import EligibilityEngine
from scholarship_eval.core.errors import DataIntegrityError
from scholarship_eval.core.models import ACCEPTED, REJECTED, FULL, HALF, ENR, REC, SAV, RSV, GRP
from scholarship_eval.programs.need_based.policy import NeedBasedPolicy


@pytest.fixture
def engine():
    return EligibilityEngine()


# ---------- Merit ----------

def test_merit_full_one_year(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="1101", gpa=3.45))
    assert (r.program, r.status, r.award_tier, r.duration_years) == ("Merit", ACCEPTED, FULL, 1)


def test_merit_half_with_recommendation(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="1102", gpa=3.10, docs=(ENR, REC)))
    assert (r.status, r.award_tier, r.duration_years) == (ACCEPTED, HALF, 2)


def test_merit_gpa_below_three(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="1103", gpa=2.90))
    assert r.status == REJECTED
    assert r.reason == "GPA below 3.0"


@pytest.mark.parametrize("gpa,tier", [(3.00, HALF), (3.19, HALF), (3.20, FULL), (4.0, FULL)])
def test_merit_tier_boundaries(engine, make_case, gpa, tier):
    assert engine.evaluate(make_case(applicant_id="1104", gpa=gpa)).award_tier == tier


# ---------- Need-Based ----------

def test_need_based_half_without_adjustment(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2201", family=(11000.0, 1)))
    assert (r.program, r.status, r.award_tier, r.duration_years) == ("Need-Based", ACCEPTED, HALF, 1)


def test_need_based_savings_and_dependents(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2202", family=(13500.0, 3), docs=(ENR, SAV)))
    assert (r.status, r.award_tier, r.duration_years) == (ACCEPTED, HALF, 1)


def test_need_based_adjustment_is_additive(make_case):
    policy = NeedBasedPolicy()
    case = make_case(applicant_id="2202", family=(0.0, 3), docs=(ENR, SAV))
    assert policy.thresholds(case) == (13000.0, 19500.0)
    assert policy.thresholds(make_case(applicant_id="2203", family=(0.0, 0), docs=(ENR, SAV))) == (12000.0, 18000.0)
    assert policy.thresholds(make_case(applicant_id="2204", family=(0.0, 4))) == (11000.0, 16500.0)


@pytest.mark.parametrize("income,status,tier", [
    (10000.0, ACCEPTED, FULL),
    (10000.01, ACCEPTED, HALF),
    (15000.0, ACCEPTED, HALF),
    (15000.01, REJECTED, None),
])
def test_need_based_boundaries(engine, make_case, income, status, tier):
    r = engine.evaluate(make_case(applicant_id="2205", family=(income, 0)))
    assert r.status == status
    assert r.award_tier == tier


def test_need_based_full_at_adjusted_threshold(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2206", family=(13000.0, 3), docs=(ENR, SAV)))
    assert r.award_tier == FULL


def test_need_based_rejects_unstable_finances(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2207", family=(16000.0, 1)))
    assert r.status == REJECTED
    assert r.reason == "Financial status unstable"


def test_need_based_without_family_info(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2208"))
    assert r.status == REJECTED
    assert r.reason == "Family information not provided"


def test_need_based_explicit_zero_income_is_full(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="2209", family=(0.0, 0)))
    assert (r.status, r.award_tier) == (ACCEPTED, FULL)


# ---------- Research ----------

def test_research_full_with_supervisor(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3301", impacts=(1.2, 1.8), docs=(ENR, RSV)))
    assert (r.program, r.status, r.award_tier, r.duration_years) == ("Research", ACCEPTED, FULL, 2)


def test_research_half_rounds_up_to_one_year(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3302", impacts=(1.0, 1.2)))
    assert (r.award_tier, r.duration_years) == (HALF, 1)


def test_research_half_with_supervisor_is_two_years(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3303", impacts=(1.4,), docs=(ENR, RSV)))
    assert (r.award_tier, r.duration_years) == (HALF, 2)


def test_research_grant_proposal_without_publications(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3304", docs=(ENR, GRP)))
    assert (r.status, r.award_tier, r.duration_years) == (ACCEPTED, HALF, 1)
    r = engine.evaluate(make_case(applicant_id="3305", docs=(ENR, GRP, RSV)))
    assert (r.status, r.award_tier, r.duration_years) == (ACCEPTED, HALF, 2)


def test_research_missing_publication_and_proposal(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3306"))
    assert r.status == REJECTED
    assert r.reason == "Missing publication or proposal"


def test_research_low_impact(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3307", impacts=(0.5, 1.2), docs=(ENR, GRP)))
    assert r.status == REJECTED
    assert r.reason == "Publication impact too low"


def test_research_ignores_missing_impact_values(engine, make_case):
    r = engine.evaluate(make_case(applicant_id="3308", impacts=(None, 1.6)))
    assert r.award_tier == FULL


def test_research_negative_impact_is_integrity_error(engine, make_case):
    with pytest.raises(DataIntegrityError):
        engine.evaluate(make_case(applicant_id="3309", impacts=(1.5, -0.1)))
