import argparse
import sys
from typing import List, Optional

from scholarship_eval import config
from scholarship_eval.core.errors import DataIntegrityError, InputSourceError
from scholarship_eval.core.models import ACCEPTED, REJECTED
from scholarship_eval.core.pipeline import run_pipeline
from scholarship_eval.core.report import format_result, render_summary, summarize
from scholarship_eval.loaders import read_records
from scholarship_eval.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scholarship-eval",
        description="Evaluate scholarship applications and print the sorted report.",
    )
    parser.add_argument("path", nargs="?", default=config.DEFAULT_INPUT_PATH,
                        help="comma-delimited applications file")
    parser.add_argument("--stats", action="store_true", help="append the statistics block")
    parser.add_argument("--status", choices=["accepted", "rejected"],
                        help="print only accepted or only rejected applications")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging("scholarship_eval.cli", "DEBUG" if args.debug else None)

    try:
        results = run_pipeline(read_records(args.path))
    except InputSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except DataIntegrityError as e:
        logger.error("Aborting run: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not results:
        print("No applications found.")
        return 0

    wanted = {"accepted": ACCEPTED, "rejected": REJECTED}.get(args.status or "")
    for r in results:
        if wanted is None or r.status == wanted:
            print(format_result(r))

    if args.stats:
        print()
        for line in render_summary(summarize(results)):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
