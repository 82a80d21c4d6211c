from typing import Dict

from scholarship_eval.core.errors import UnknownProgramError
from scholarship_eval.core.models import MERIT, NEED_BASED, RESEARCH

# The first two digits of an applicant id name the program
PROGRAM_PREFIXES: Dict[str, str] = {
    "11": MERIT,
    "22": NEED_BASED,
    "33": RESEARCH,
}


def classify(applicant_id: str) -> str:
    prefix = (applicant_id or "")[:2]
    program = PROGRAM_PREFIXES.get(prefix)
    if program is None:
        raise UnknownProgramError(applicant_id)
    return program


def is_known_prefix(applicant_id: str) -> bool:
    return (applicant_id or "")[:2] in PROGRAM_PREFIXES
