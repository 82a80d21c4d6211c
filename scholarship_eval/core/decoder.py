"""
Turns one tagged field tuple from the reader into a typed fact.

Tags:
  A  applicant profile   (id, name, gpa, income)
  T  transcript          (id, status)
  I  family info         (id, family income, dependents)
  D  document            (id, type, duration in months)
  P  publication         (id, title, impact factor)

A malformed record raises RecordDecodeError; an unknown tag yields None.
"""
import math
from typing import Callable, Dict, Optional, Sequence, Union

from scholarship_eval.core.classifier import is_known_prefix
from scholarship_eval.core.errors import RecordDecodeError
from scholarship_eval.core.models import (
    DOCUMENT_TYPES,
    ApplicantProfile,
    Document,
    FamilyInfo,
    Publication,
    TranscriptFact,
)

Fact = Union[ApplicantProfile, TranscriptFact, FamilyInfo, Document, Publication]

TRUE_TOKENS = {"y", "yes", "true", "1"}
FALSE_TOKENS = {"n", "no", "false", "0"}

MIN_ID_LENGTH = 4


def _expect(tag: str, fields: Sequence[str], count: int) -> None:
    if len(fields) != count:
        raise RecordDecodeError(tag, fields, f"expected {count} fields, got {len(fields)}")


def _float(tag: str, fields: Sequence[str], value: str, what: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise RecordDecodeError(tag, fields, f"{what} is not a number: {value!r}")
    if not math.isfinite(number):
        raise RecordDecodeError(tag, fields, f"{what} is not a finite number: {value!r}")
    return number


def _int(tag: str, fields: Sequence[str], value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RecordDecodeError(tag, fields, f"{what} is not an integer: {value!r}")


def _applicant_id(tag: str, fields: Sequence[str]) -> str:
    applicant_id = fields[0]
    if not applicant_id:
        raise RecordDecodeError(tag, fields, "empty applicant id")
    return applicant_id


def decode_applicant(fields: Sequence[str]) -> ApplicantProfile:
    _expect("A", fields, 4)
    applicant_id = _applicant_id("A", fields)
    if not applicant_id.isdigit() or len(applicant_id) < MIN_ID_LENGTH:
        raise RecordDecodeError("A", fields, f"invalid applicant id {applicant_id!r}")
    if not is_known_prefix(applicant_id):
        raise RecordDecodeError("A", fields, f"unknown program prefix {applicant_id[:2]!r}")
    name = fields[1]
    if not name:
        raise RecordDecodeError("A", fields, "empty name")
    gpa = _float("A", fields, fields[2], "gpa")
    if not 0.0 <= gpa <= 4.0:
        raise RecordDecodeError("A", fields, f"gpa out of range: {gpa}")
    income = _float("A", fields, fields[3], "income")
    if income < 0:
        raise RecordDecodeError("A", fields, f"negative income: {income}")
    return ApplicantProfile(applicant_id, name, gpa, income)


def decode_transcript(fields: Sequence[str]) -> TranscriptFact:
    _expect("T", fields, 2)
    applicant_id = _applicant_id("T", fields)
    token = fields[1].lower()
    if token in TRUE_TOKENS:
        return TranscriptFact(applicant_id, True)
    if token in FALSE_TOKENS:
        return TranscriptFact(applicant_id, False)
    raise RecordDecodeError("T", fields, f"unknown transcript status {fields[1]!r}")


def decode_family(fields: Sequence[str]) -> FamilyInfo:
    _expect("I", fields, 3)
    applicant_id = _applicant_id("I", fields)
    family_income = _float("I", fields, fields[1], "family income")
    dependents = _int("I", fields, fields[2], "dependents")
    if family_income < 0 or dependents < 0:
        raise RecordDecodeError("I", fields, "negative family income or dependents")
    return FamilyInfo(applicant_id, family_income, dependents)


def decode_document(fields: Sequence[str]) -> Document:
    _expect("D", fields, 3)
    applicant_id = _applicant_id("D", fields)
    document_type = fields[1].upper()
    if document_type not in DOCUMENT_TYPES:
        raise RecordDecodeError("D", fields, f"unknown document type {fields[1]!r}")
    duration = _int("D", fields, fields[2], "duration")
    return Document(applicant_id, document_type, duration)


def decode_publication(fields: Sequence[str]) -> Publication:
    _expect("P", fields, 3)
    applicant_id = _applicant_id("P", fields)
    # Negative impact factors are let through; the research policy refuses them
    impact = _float("P", fields, fields[2], "impact factor") if fields[2] else None
    return Publication(applicant_id, fields[1], impact)


DECODERS: Dict[str, Callable[[Sequence[str]], Fact]] = {
    "A": decode_applicant,
    "T": decode_transcript,
    "I": decode_family,
    "D": decode_document,
    "P": decode_publication,
}


def decode_record(tag: str, fields: Sequence[str]) -> Optional[Fact]:
    decoder = DECODERS.get((tag or "").strip().upper())
    if decoder is None:
        return None
    return decoder([f.strip() for f in fields])
