"""StructlogBenchmarkObserver — production observer that delegates to structlog."""

import structlog


class StructlogBenchmarkObserver:
    """Logs benchmark domain events to structlog.

    Does NOT inherit from BenchmarkObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def benchmark_started(
        self, evaluations: list[str], methods: list[str], runs: int
    ) -> None:
        self._log.info(
            "benchmark.started", evaluations=evaluations, methods=methods, runs=runs
        )

    def benchmark_completed(self, total_runs: int, elapsed_seconds: float) -> None:
        self._log.info(
            "benchmark.completed",
            total_runs=total_runs,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def evaluation_started(self, evaluation: str) -> None:
        self._log.info("benchmark.evaluation_started", evaluation=evaluation)

    def method_configured(
        self, evaluation: str, method: str, mcp_config_path: str | None
    ) -> None:
        self._log.info(
            "benchmark.method_configured",
            evaluation=evaluation,
            method=method,
            mcp_config_path=mcp_config_path,
        )

    def run_started(
        self, evaluation: str, method: str, run_index: int, total_runs: int
    ) -> None:
        self._log.info(
            "benchmark.run.started",
            evaluation=evaluation,
            method=method,
            run_index=run_index,
            total_runs=total_runs,
        )

    def run_completed(
        self, evaluation: str, method: str, run_index: int, output_path: str
    ) -> None:
        self._log.info(
            "benchmark.run.completed",
            evaluation=evaluation,
            method=method,
            run_index=run_index,
            output_path=output_path,
        )

    def run_failed(
        self, evaluation: str, method: str, run_index: int, reason: str
    ) -> None:
        self._log.error(
            "benchmark.run.failed",
            evaluation=evaluation,
            method=method,
            run_index=run_index,
            reason=reason,
        )

    def environment_port_cleared(self, port: int, pids: list[int]) -> None:
        self._log.info("environment.port_cleared", port=port, pids=pids)

    def environment_path_removed(self, path: str) -> None:
        self._log.info("environment.path_removed", path=path)

    def environment_command_completed(self, command: list[str]) -> None:
        self._log.info("environment.command_completed", command=command)
