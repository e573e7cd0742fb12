"""Error types raised by report infrastructure."""

from pathlib import Path

from browser_bench.core.errors import BenchError


class ResultsDirectoryNotFoundError(BenchError):
    """Raised when the results directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Failed to collect results: directory not found: {path}"
            " (run `browser-bench run` first)"
        )


class NoResultsFoundError(BenchError):
    """Raised when the results directory holds no recognisable result file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to collect results: no benchmark results in {path}")


class RecordParseError(BenchError):
    """Raised when the terminal telemetry record of one log cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse run record {path.name}: {reason}")


class ResultsParseError(BenchError):
    """Raised after collection when one or more result files failed to parse."""

    def __init__(self, failures: list[RecordParseError]) -> None:
        self.failures = failures
        detail = "; ".join(f"{f.path.name}: {f.reason}" for f in failures)
        super().__init__(f"Failed to parse benchmark results: {detail}")
