import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from scholarship_eval.core.aggregator import ApplicantAggregator
from scholarship_eval.core.decoder import decode_record
from scholarship_eval.core.engine import EligibilityEngine
from scholarship_eval.core.errors import RecordDecodeError, UnknownProgramError
from scholarship_eval.core.models import Result
from scholarship_eval.core.report import sort_results

logger = logging.getLogger(__name__)

Record = Tuple[str, Sequence[str]]


def run_pipeline(records: Iterable[Record], engine: Optional[EligibilityEngine] = None) -> List[Result]:
    """
    Decode, aggregate, evaluate and sort.

    Malformed records and applicants of an unknown program are skipped.
    DataIntegrityError is not caught: it aborts the whole run.
    """
    engine = engine or EligibilityEngine()
    aggregator = ApplicantAggregator()
    skipped = 0
    for tag, fields in records:
        try:
            fact = decode_record(tag, fields)
        except RecordDecodeError as e:
            skipped += 1
            logger.debug("Skipping malformed record: %s", e)
            continue
        if fact is None:
            logger.debug("Ignoring record with unknown tag %r", tag)
            continue
        aggregator.add(fact)

    results: List[Result] = []
    for case in aggregator.build():
        try:
            results.append(engine.evaluate(case))
        except UnknownProgramError as e:
            logger.warning("Skipping applicant %s: %s", case.applicant_id, e)
    logger.info("Evaluated %d applications (%d malformed records skipped)", len(results), skipped)
    return sort_results(results)
