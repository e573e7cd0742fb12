"""CompositeBenchmarkObserver — fans out all events to a list of observers."""

from browser_bench.bench.domain.observer import BenchmarkObserver


class CompositeBenchmarkObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from BenchmarkObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[BenchmarkObserver]) -> None:
        self._observers = observers

    def benchmark_started(
        self, evaluations: list[str], methods: list[str], runs: int
    ) -> None:
        for obs in self._observers:
            obs.benchmark_started(evaluations=evaluations, methods=methods, runs=runs)

    def benchmark_completed(self, total_runs: int, elapsed_seconds: float) -> None:
        for obs in self._observers:
            obs.benchmark_completed(
                total_runs=total_runs, elapsed_seconds=elapsed_seconds
            )

    def evaluation_started(self, evaluation: str) -> None:
        for obs in self._observers:
            obs.evaluation_started(evaluation=evaluation)

    def method_configured(
        self, evaluation: str, method: str, mcp_config_path: str | None
    ) -> None:
        for obs in self._observers:
            obs.method_configured(
                evaluation=evaluation,
                method=method,
                mcp_config_path=mcp_config_path,
            )

    def run_started(
        self, evaluation: str, method: str, run_index: int, total_runs: int
    ) -> None:
        for obs in self._observers:
            obs.run_started(
                evaluation=evaluation,
                method=method,
                run_index=run_index,
                total_runs=total_runs,
            )

    def run_completed(
        self, evaluation: str, method: str, run_index: int, output_path: str
    ) -> None:
        for obs in self._observers:
            obs.run_completed(
                evaluation=evaluation,
                method=method,
                run_index=run_index,
                output_path=output_path,
            )

    def run_failed(
        self, evaluation: str, method: str, run_index: int, reason: str
    ) -> None:
        for obs in self._observers:
            obs.run_failed(
                evaluation=evaluation,
                method=method,
                run_index=run_index,
                reason=reason,
            )

    def environment_port_cleared(self, port: int, pids: list[int]) -> None:
        for obs in self._observers:
            obs.environment_port_cleared(port=port, pids=pids)

    def environment_path_removed(self, path: str) -> None:
        for obs in self._observers:
            obs.environment_path_removed(path=path)

    def environment_command_completed(self, command: list[str]) -> None:
        for obs in self._observers:
            obs.environment_command_completed(command=command)
