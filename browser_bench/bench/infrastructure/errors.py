"""Error types raised while running benchmarks."""

from pathlib import Path

from browser_bench.core.errors import BenchError


class UnknownEvaluationError(BenchError):
    """Raised when a requested evaluation is not defined in the config."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Failed to select evaluation: unknown evaluation '{name}'"
            f" (available: {', '.join(available)})"
        )


class EvaluationDirectoryNotFoundError(BenchError):
    """Raised when an evaluation's working directory does not exist."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(
            f"Failed to start benchmark: directory for evaluation '{name}'"
            f" not found at {path} (run ./setup.sh first)"
        )


class EnvironmentResetError(BenchError):
    """Raised when a reset step cannot be completed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to reset environment: {reason}")


class SessionLaunchError(BenchError):
    """Raised when the Claude Code session cannot be started or exits non-zero."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to run Claude Code session: {reason}")


class UnknownMethodError(BenchError):
    """Raised when a requested method has no configuration."""

    def __init__(self, method: str, available: list[str]) -> None:
        self.method = method
        super().__init__(
            f"Failed to select method: method '{method}' is not configured"
            f" (available: {', '.join(available)})"
        )
