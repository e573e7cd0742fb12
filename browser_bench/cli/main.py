"""CLI entrypoint for browser-bench — typer app with `run` and `report` commands."""

import sys
from pathlib import Path

import structlog
import typer

from browser_bench.bench.application.runner import BenchmarkRunner
from browser_bench.bench.domain.observer import BenchmarkObserver
from browser_bench.bench.infrastructure.claude_cli import ClaudeCliSessionLauncher
from browser_bench.bench.infrastructure.composite_observer import (
    CompositeBenchmarkObserver,
)
from browser_bench.bench.infrastructure.console_observer import (
    ConsoleBenchmarkObserver,
)
from browser_bench.bench.infrastructure.observer import StructlogBenchmarkObserver
from browser_bench.bench.infrastructure.resetter import ProcessEnvironmentResetter
from browser_bench.bench.infrastructure.settings_writer import ClaudeSettingsWriter
from browser_bench.config.infrastructure.observer import StructlogConfigObserver
from browser_bench.config.infrastructure.yaml_loader import YamlConfigLoader
from browser_bench.core.errors import BenchError
from browser_bench.method.domain.method import Method
from browser_bench.report.application.generator import ReportGenerator
from browser_bench.report.infrastructure.collector import ResultsCollector
from browser_bench.report.infrastructure.observer import StructlogReportObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _configure_structlog(log_format: str, log_level: str = "info") -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr: stdout carries the agent's event stream during `run`
    and the rendered report during `report`.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    if log_level not in _LOG_LEVELS:
        typer.echo(
            f"Invalid log level: {log_level!r}."
            f" Must be one of {', '.join(_LOG_LEVELS)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS[log_level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to benchmark config YAML"),
    evaluation: list[str] | None = typer.Option(
        None,
        "--evaluation",
        "-e",
        help="Run only this evaluation (repeatable; default: all)",
    ),
    method: list[Method] | None = typer.Option(
        None,
        "--method",
        "-m",
        help="Run only this method (repeatable; default: all configured)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Run every configured method against the configured evaluations."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)

        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )

        observers: list[BenchmarkObserver] = [StructlogBenchmarkObserver()]
        if log_format != "json":
            observers.append(ConsoleBenchmarkObserver())
        observer = CompositeBenchmarkObserver(observers=observers)

        runner = BenchmarkRunner(
            config=config,
            configurator=ClaudeSettingsWriter(),
            resetter=ProcessEnvironmentResetter(observer=observer),
            launcher=ClaudeCliSessionLauncher(claude_path=config.claude_path),
            observer=observer,
        )
        runner.run(evaluations=evaluation or None, methods=method or None)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Benchmark interrupted.", err=True)
        sys.exit(1)
    except BenchError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


@app.command()
def report(
    results_dir: Path = typer.Option(
        Path("./benchmark-results"),
        "--results-dir",
        "-r",
        help="Directory holding <eval>-<method>-run<N>.jsonl files",
    ),
    output: Path = typer.Option(
        Path("./benchmark-comparison.md"),
        "--output",
        "-o",
        help="Report file to write (overwritten)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Generate the markdown comparison report from benchmark results."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)

        observer = StructlogReportObserver()
        generator = ReportGenerator(
            collector=ResultsCollector(observer=observer),
            observer=observer,
        )
        markdown = generator.generate(results_dir=results_dir, output_path=output)

        typer.echo(f"Generated {output}")
        typer.echo(markdown)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Report generation interrupted.", err=True)
        sys.exit(1)
    except BenchError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
