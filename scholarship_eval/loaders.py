import csv
from typing import Iterable, List, Tuple

from scholarship_eval.core.errors import InputSourceError


def parse_lines(lines: Iterable[str]) -> List[Tuple[str, List[str]]]:
    records: List[Tuple[str, List[str]]] = []
    for row in csv.reader(lines, skipinitialspace=True):
        fields = [f.strip() for f in row]
        if not fields or not any(fields):
            continue
        records.append((fields[0].upper(), fields[1:]))
    return records


def read_records(path: str) -> List[Tuple[str, List[str]]]:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return parse_lines(f)
    except FileNotFoundError:
        raise InputSourceError(path, "file not found")
    except OSError as e:
        raise InputSourceError(path, str(e))
