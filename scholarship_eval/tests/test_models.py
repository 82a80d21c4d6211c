import dataclasses

import pytest

from scholarship_eval.core.models import (
    CaseFile, Document, FamilyInfo, Result, ACCEPTED, REJECTED, ENR, REC, accept, reject,
)


def test_case_file_defaults():
    case = CaseFile(applicant_id="1101", name="Ayse", gpa=3.5, income=0.0)
    assert case.transcript_valid is False
    assert case.family is None
    assert case.documents == []
    assert case.publications == []
    assert case.family_income == 0.0
    assert case.dependents == 0


def test_has_document():
    case = CaseFile("1101", "Ayse", 3.5, 0.0, documents=[Document("1101", ENR, 12)])
    assert case.has_document(ENR)
    assert not case.has_document(REC)


def test_family_fields_come_from_family_info():
    case = CaseFile("2201", "Ali", 3.0, 0.0, family=FamilyInfo("2201", 12000.0, 2))
    assert case.family_income == 12000.0
    assert case.dependents == 2


def test_result_is_immutable():
    r = Result(applicant_id="1101", name="Ayse", program="Merit", status=ACCEPTED)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.status = REJECTED


def test_accept_and_reject_helpers():
    case = CaseFile("1101", "Ayse", 3.5, 0.0)
    a = accept(case, "Merit", "Full", 1)
    assert a.accepted and a.award_tier == "Full" and a.duration_years == 1 and a.reason is None
    r = reject(case, "Merit", "GPA below 3.0")
    assert not r.accepted and r.reason == "GPA below 3.0"
    assert r.award_tier is None and r.duration_years is None
