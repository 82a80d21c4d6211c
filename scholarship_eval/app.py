import logging
import os
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from scholarship_eval import config
from scholarship_eval.core.classifier import PROGRAM_PREFIXES
from scholarship_eval.core.errors import DataIntegrityError, InputSourceError
from scholarship_eval.core.models import Result, ACCEPTED, REJECTED
from scholarship_eval.core.pipeline import run_pipeline
from scholarship_eval.core.report import format_result, summarize
from scholarship_eval.loaders import parse_lines, read_records
from scholarship_eval.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Scholarship Evaluator")


# --------- Request models ----------
class EvaluateRequest(BaseModel):
    lines: List[str]
    status: Optional[str] = None


def _result_item(r: Result) -> Dict[str, Any]:
    item: Dict[str, Any] = {
        "applicant_id": r.applicant_id,
        "name": r.name,
        "program": r.program,
        "status": r.status,
    }
    if r.status == ACCEPTED:
        item["award_tier"] = r.award_tier
        item["duration_years"] = r.duration_years
    else:
        item["reason"] = r.reason
    return item


def _respond(results: List[Result], status_filter: Optional[str]) -> Dict[str, Any]:
    if status_filter is not None and status_filter not in (ACCEPTED, REJECTED):
        raise HTTPException(status_code=400, detail=f"Unsupported status filter: {status_filter}")
    shown = [r for r in results if status_filter is None or r.status == status_filter]
    return {
        "results": [_result_item(r) for r in shown],
        "report": [format_result(r) for r in shown],
        "summary": summarize(results).to_dict(),
    }


def _evaluate(records) -> List[Result]:
    try:
        return run_pipeline(records)
    except DataIntegrityError as e:
        logger.error("Evaluation aborted: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# --------- Endpoints ----------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/programs")
def programs() -> List[Dict[str, str]]:
    return [{"prefix": prefix, "name": name} for prefix, name in PROGRAM_PREFIXES.items()]


@app.post("/evaluate")
def evaluate(req: EvaluateRequest) -> Dict[str, Any]:
    return _respond(_evaluate(parse_lines(req.lines)), req.status)


def _input_path(path: Optional[str]) -> str:
    # only files next to the default input may be evaluated
    default = os.path.realpath(config.DEFAULT_INPUT_PATH)
    if not path:
        return default
    allowed = os.path.dirname(default)
    candidate = os.path.realpath(os.path.join(allowed, path))
    if os.path.commonpath([candidate, allowed]) != allowed:
        raise HTTPException(status_code=400, detail=f"Path outside the input directory: {path}")
    return candidate


@app.post("/evaluate/file")
def evaluate_file(path: Optional[str] = Query(None), status: Optional[str] = Query(None)) -> Dict[str, Any]:
    source = _input_path(path)
    try:
        records = read_records(source)
    except InputSourceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _respond(_evaluate(records), status)


if __name__ == "__main__":
    setup_logging("scholarship_eval.app")
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    uvicorn.run("scholarship_eval.app:app", host=config.HOST, port=int(config.PORT),
                reload=bool(os.environ.get("SCHOLARSHIP_RELOAD")))
