"""Helpers that write stream-json result logs the way `claude -p` does."""

import json
from pathlib import Path


def write_result_log(
    directory: Path,
    filename: str,
    duration_ms: int = 233000,
    total_cost_usd: float = 0.88,
    num_turns: int = 12,
) -> Path:
    """Write a small JSONL log whose last line is the terminal result event."""
    events = [
        {"type": "system", "subtype": "init", "session_id": "s-1"},
        {"type": "assistant", "message": {"content": [{"type": "text", "text": "ok"}]}},
        {
            "type": "result",
            "subtype": "success",
            "is_error": False,
            "duration_ms": duration_ms,
            "duration_api_ms": duration_ms - 1000,
            "num_turns": num_turns,
            "total_cost_usd": total_cost_usd,
        },
    ]
    path = directory / filename
    path.write_text("\n".join(json.dumps(e) for e in events) + "\n", encoding="utf-8")
    return path
