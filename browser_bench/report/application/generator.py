"""ReportGenerator — collects results, renders the report, and writes it."""

from pathlib import Path
from typing import Protocol

from browser_bench.method.domain.method import Method
from browser_bench.report.application.builder import build_evaluations
from browser_bench.report.application.markdown import render_report
from browser_bench.report.domain.observer import ReportObserver
from browser_bench.report.domain.record import RunRecord


class RunCollector(Protocol):
    """Reads a results directory into an evaluation -> method -> runs mapping."""

    def collect(
        self, results_dir: Path
    ) -> dict[str, dict[Method, list[RunRecord]]]: ...


class ReportGenerator:
    """Runs the offline report pipeline: collect, build, render, write.

    Nothing is written unless collection and rendering both succeed, so a
    failed invocation leaves any previous report untouched.
    """

    def __init__(self, collector: RunCollector, observer: ReportObserver) -> None:
        self._collector = collector
        self._observer = observer

    def generate(self, results_dir: Path, output_path: Path) -> str:
        """Write the comparison report for results_dir to output_path and return it.

        Raises:
            BenchError: propagated from the collector when the directory is
                missing, holds no results, or holds unreadable results.
        """
        grouped = self._collector.collect(results_dir=results_dir)
        evaluations = build_evaluations(grouped=grouped)
        report = render_report(evaluations)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report, encoding="utf-8")
        self._observer.report_written(
            path=str(output_path), total_evaluations=len(evaluations)
        )
        return report
