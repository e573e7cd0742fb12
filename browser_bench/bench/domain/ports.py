"""Ports used by the BenchmarkRunner — structural interfaces for side effects."""

from pathlib import Path
from typing import Protocol

from browser_bench.config.domain.evaluation import ResetConfig
from browser_bench.config.domain.method import MethodConfig


class MethodConfigurator(Protocol):
    """Prepares a working directory so Claude Code runs with one method enabled."""

    def configure(self, method_config: MethodConfig, directory: Path) -> Path | None:
        """Return the MCP config file to pass to the session, if any."""
        ...


class EnvironmentResetter(Protocol):
    """Returns an evaluation's environment to a clean state before a run."""

    def reset(self, config: ResetConfig, directory: Path) -> None: ...


class SessionLauncher(Protocol):
    """Runs one agent session and records its event stream to output_path."""

    def launch(
        self,
        prompt: str,
        directory: Path,
        mcp_config_path: Path | None,
        output_path: Path,
    ) -> None: ...
