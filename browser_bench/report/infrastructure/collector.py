"""ResultsCollector — scans a results directory and groups run records."""

from pathlib import Path
from typing import TypeAlias

from browser_bench.method.domain.method import Method
from browser_bench.report.domain.filename import RESULT_SUFFIX, parse_result_filename
from browser_bench.report.domain.observer import ReportObserver
from browser_bench.report.domain.record import RunRecord
from browser_bench.report.infrastructure.errors import (
    NoResultsFoundError,
    RecordParseError,
    ResultsDirectoryNotFoundError,
    ResultsParseError,
)
from browser_bench.report.infrastructure.jsonl_reader import read_run_record

GroupedRuns: TypeAlias = dict[str, dict[Method, list[RunRecord]]]


class ResultsCollector:
    """Builds the evaluation -> method -> runs mapping from a flat directory."""

    def __init__(self, observer: ReportObserver) -> None:
        self._observer = observer

    def collect(self, results_dir: Path) -> GroupedRuns:
        """
        Read every recognisable result file directly inside results_dir.

        Files are visited in sorted name order. Files that are not result files
        are skipped. Every result file is attempted before failing so that all
        unreadable files are reported together.

        Raises:
            ResultsDirectoryNotFoundError: if results_dir is not a directory.
            ResultsParseError: if any result file's record could not be read.
            NoResultsFoundError: if no result file was recognised.
        """
        if not results_dir.is_dir():
            raise ResultsDirectoryNotFoundError(path=results_dir)

        self._observer.report_collection_started(results_dir=str(results_dir))

        grouped: GroupedRuns = {}
        failures: list[RecordParseError] = []
        total_runs = 0

        for path in self._result_files(results_dir=results_dir):
            parsed = parse_result_filename(path.name)
            if parsed is None:
                self._observer.report_file_skipped(filename=path.name)
                continue

            try:
                record = read_run_record(path=path)
            except RecordParseError as exc:
                self._observer.report_run_failed(filename=path.name, reason=exc.reason)
                failures.append(exc)
                continue

            grouped.setdefault(parsed.evaluation, {}).setdefault(
                parsed.method, []
            ).append(record)
            total_runs += 1
            self._observer.report_run_loaded(
                filename=path.name,
                evaluation=parsed.evaluation,
                method=parsed.method.value,
            )

        if failures:
            raise ResultsParseError(failures=failures)

        if not grouped:
            raise NoResultsFoundError(path=results_dir)

        self._observer.report_collection_completed(
            total_runs=total_runs,
            evaluation_names=sorted(grouped),
        )
        return grouped

    def _result_files(self, results_dir: Path) -> list[Path]:
        return sorted(
            p
            for p in results_dir.iterdir()
            if p.is_file() and p.name.endswith(RESULT_SUFFIX)
        )
