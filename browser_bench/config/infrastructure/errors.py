"""Error types raised by config infrastructure."""

from pathlib import Path

from browser_bench.core.errors import BenchError


class MissingEnvVarsError(BenchError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(BenchError):
    """Raised when the loaded config fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(BenchError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
