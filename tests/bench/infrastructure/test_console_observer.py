"""Tests for ConsoleBenchmarkObserver."""

import io

from rich.console import Console

from browser_bench.bench.infrastructure.console_observer import (
    ConsoleBenchmarkObserver,
)


def _make_observer() -> tuple[ConsoleBenchmarkObserver, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, no_color=True, highlight=False)
    return ConsoleBenchmarkObserver(console=console), buffer


class TestBanners:
    def test_method_banner(self) -> None:
        observer, buffer = _make_observer()

        observer.method_configured(
            evaluation="signup", method="dev-browser", mcp_config_path=None
        )

        assert "=== Running benchmark for: dev-browser ===" in buffer.getvalue()

    def test_run_banner(self) -> None:
        observer, buffer = _make_observer()

        observer.run_started(
            evaluation="signup", method="vanilla", run_index=2, total_runs=3
        )

        assert "--- Run 2 of 3 for signup/vanilla ---" in buffer.getvalue()

    def test_evaluation_rule(self) -> None:
        observer, buffer = _make_observer()

        observer.evaluation_started(evaluation="signup")

        assert "Evaluation: signup" in buffer.getvalue()

    def test_completion_points_at_report(self) -> None:
        observer, buffer = _make_observer()

        observer.benchmark_completed(total_runs=6, elapsed_seconds=125.0)

        output = buffer.getvalue()
        assert "All benchmarks complete" in output
        assert "6 run(s) in 2m 5.0s" in output
        assert "browser-bench report" in output

    def test_run_failed(self) -> None:
        observer, buffer = _make_observer()

        observer.run_failed(
            evaluation="signup", method="vanilla", run_index=1, reason="boom"
        )

        assert "Run 1 failed: boom" in buffer.getvalue()

    def test_environment_events_print_nothing(self) -> None:
        observer, buffer = _make_observer()

        observer.environment_port_cleared(port=5173, pids=[1])
        observer.environment_path_removed(path="/tmp/x")
        observer.environment_command_completed(command=["npm", "run", "seed"])

        assert buffer.getvalue() == ""
