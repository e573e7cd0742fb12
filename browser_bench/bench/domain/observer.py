"""Observer port for the benchmark domain — defines events in domain language."""

from typing import Protocol


class BenchmarkObserver(Protocol):
    """Observer port emitting structured events during a benchmark run.

    Implementations may log to structlog, print console banners, or record
    for tests.
    """

    def benchmark_started(
        self, evaluations: list[str], methods: list[str], runs: int
    ) -> None: ...

    def benchmark_completed(self, total_runs: int, elapsed_seconds: float) -> None: ...

    def evaluation_started(self, evaluation: str) -> None: ...

    def method_configured(
        self, evaluation: str, method: str, mcp_config_path: str | None
    ) -> None: ...

    def run_started(
        self, evaluation: str, method: str, run_index: int, total_runs: int
    ) -> None: ...

    def run_completed(
        self, evaluation: str, method: str, run_index: int, output_path: str
    ) -> None: ...

    def run_failed(
        self, evaluation: str, method: str, run_index: int, reason: str
    ) -> None: ...

    def environment_port_cleared(self, port: int, pids: list[int]) -> None: ...

    def environment_path_removed(self, path: str) -> None: ...

    def environment_command_completed(self, command: list[str]) -> None: ...
