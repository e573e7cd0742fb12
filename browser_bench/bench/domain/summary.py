"""BenchmarkSummary — what a completed benchmark run produced."""

from pathlib import Path

from pydantic import BaseModel


class BenchmarkSummary(BaseModel, frozen=True):
    """Immutable summary returned when every requested run has completed."""

    config_name: str
    results_dir: Path
    result_paths: list[Path]
