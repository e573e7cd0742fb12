"""Reads the terminal telemetry record from a run's stream-json log."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from browser_bench.report.domain.record import RunRecord
from browser_bench.report.infrastructure.errors import RecordParseError

# Field names written by `claude --output-format stream-json` in its result event.
_DURATION_KEY = "duration_ms"
_COST_KEY = "total_cost_usd"
_TURNS_KEY = "num_turns"


def read_run_record(path: Path) -> RunRecord:
    """Parse the last line of a JSONL log into a RunRecord.

    The producing process guarantees that the last line is its summary event;
    that guarantee is not checked beyond the presence of the three fields.

    Raises:
        RecordParseError: if the file cannot be read as UTF-8, is empty, the
            last line is not a JSON object, or any required field is missing
            or not a number.
    """
    try:
        content = path.read_text(encoding="utf-8").rstrip()
    except UnicodeDecodeError as exc:
        raise RecordParseError(path=path, reason=f"invalid UTF-8: {exc}") from exc
    except OSError as exc:
        raise RecordParseError(path=path, reason=f"unreadable: {exc}") from exc

    if not content:
        raise RecordParseError(path=path, reason="file is empty")

    last_line = content.splitlines()[-1]
    try:
        data: Any = json.loads(last_line)
    except json.JSONDecodeError as exc:
        raise RecordParseError(path=path, reason=f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise RecordParseError(path=path, reason="last line is not a JSON object")

    missing = [k for k in (_DURATION_KEY, _COST_KEY, _TURNS_KEY) if k not in data]
    if missing:
        keys = ", ".join(f"'{k}'" for k in missing)
        raise RecordParseError(path=path, reason=f"missing field(s) {keys}")

    try:
        return RunRecord(
            duration_ms=data[_DURATION_KEY],
            cost_usd=data[_COST_KEY],
            turns=data[_TURNS_KEY],
        )
    except ValidationError as exc:
        raise RecordParseError(path=path, reason=f"invalid field: {exc}") from exc
