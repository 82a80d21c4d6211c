class ScholarshipError(Exception):
    """Base class for every error raised by the evaluation pipeline."""


class RecordDecodeError(ScholarshipError):
    """A single input record is malformed; the record is dropped."""

    def __init__(self, tag: str, fields, message: str):
        super().__init__(f"{tag} record {list(fields)!r}: {message}")
        self.tag = tag
        self.fields = list(fields)
        self.message = message


class UnknownProgramError(ScholarshipError):
    def __init__(self, applicant_id: str):
        super().__init__(f"No scholarship program for applicant id {applicant_id!r}")
        self.applicant_id = applicant_id


class DataIntegrityError(ScholarshipError):
    """Input that passed decoding but breaks an invariant the rules rely on."""


class InputSourceError(ScholarshipError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read input {path!r}: {reason}")
        self.path = path
        self.reason = reason
