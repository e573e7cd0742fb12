"""ConsoleBenchmarkObserver — prints Rich section banners around each run on stderr."""

from rich.console import Console

# Rich markup colors per nesting level of the benchmark loop.
_EVALUATION_STYLE = "bold cyan"
_METHOD_STYLE = "bold blue"
_RUN_STYLE = "dim"


class ConsoleBenchmarkObserver:
    """Marks where each evaluation, method and run begins in the streamed output.

    The agent's own event stream is echoed to stdout between these banners, so
    banners go to stderr to keep the two apart. Environment events are no-ops.

    Pass ``console`` to capture output in tests.

    Does NOT inherit from BenchmarkObserver (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def benchmark_started(
        self, evaluations: list[str], methods: list[str], runs: int
    ) -> None:
        self._console.print(
            f"Benchmarking [bold]{', '.join(methods)}[/bold]"
            f" on [bold]{', '.join(evaluations)}[/bold], {runs} run(s) each"
        )

    def benchmark_completed(self, total_runs: int, elapsed_seconds: float) -> None:
        minutes, seconds = divmod(elapsed_seconds, 60)
        self._console.rule("[bold green]All benchmarks complete[/bold green]")
        self._console.print(
            f"{total_runs} run(s) in {int(minutes)}m {seconds:.1f}s."
            " Run [bold]browser-bench report[/bold] to generate the comparison."
        )

    def evaluation_started(self, evaluation: str) -> None:
        self._console.rule(
            f"[{_EVALUATION_STYLE}]Evaluation: {evaluation}[/{_EVALUATION_STYLE}]"
        )

    def method_configured(
        self, evaluation: str, method: str, mcp_config_path: str | None
    ) -> None:
        self._console.print(
            f"[{_METHOD_STYLE}]=== Running benchmark for: {method} ===[/{_METHOD_STYLE}]"
        )

    def run_started(
        self, evaluation: str, method: str, run_index: int, total_runs: int
    ) -> None:
        self._console.print(
            f"[{_RUN_STYLE}]--- Run {run_index} of {total_runs}"
            f" for {evaluation}/{method} ---[/{_RUN_STYLE}]"
        )

    def run_completed(
        self, evaluation: str, method: str, run_index: int, output_path: str
    ) -> None:
        self._console.print(f"Saved: {output_path}")

    def run_failed(
        self, evaluation: str, method: str, run_index: int, reason: str
    ) -> None:
        self._console.print(f"[bold red]Run {run_index} failed:[/bold red] {reason}")

    def environment_port_cleared(self, port: int, pids: list[int]) -> None:
        pass

    def environment_path_removed(self, path: str) -> None:
        pass

    def environment_command_completed(self, command: list[str]) -> None:
        pass
