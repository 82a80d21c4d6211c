import pytest

from scholarship_eval.core.models import CaseFile, Document, FamilyInfo, Publication, ENR


@pytest.fixture
def make_case():
    """Build a case that passes the general gate unless told otherwise."""
    def _make(applicant_id="1101", gpa=3.5, docs=(ENR,), transcript=True,
              family=None, impacts=(), name="Test Applicant"):
        return CaseFile(
            applicant_id=applicant_id,
            name=name,
            gpa=gpa,
            income=0.0,
            transcript_valid=transcript,
            family=FamilyInfo(applicant_id, *family) if family is not None else None,
            documents=[Document(applicant_id, d, 12) for d in docs],
            publications=[Publication(applicant_id, f"Paper {i}", v) for i, v in enumerate(impacts)],
        )
    return _make
