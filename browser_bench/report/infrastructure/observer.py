"""Structlog implementation of the ReportObserver port."""

import structlog


class StructlogReportObserver:
    """Delegates report domain events to structlog.

    Satisfies the ReportObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def report_collection_started(self, results_dir: str) -> None:
        self._log.info("report.collection_started", results_dir=results_dir)

    def report_file_skipped(self, filename: str) -> None:
        self._log.debug("report.file_skipped", filename=filename)

    def report_run_loaded(self, filename: str, evaluation: str, method: str) -> None:
        self._log.debug(
            "report.run_loaded",
            filename=filename,
            evaluation=evaluation,
            method=method,
        )

    def report_run_failed(self, filename: str, reason: str) -> None:
        self._log.error("report.run_failed", filename=filename, reason=reason)

    def report_collection_completed(
        self, total_runs: int, evaluation_names: list[str]
    ) -> None:
        self._log.info(
            "report.collection_completed",
            total_runs=total_runs,
            evaluation_names=evaluation_names,
        )

    def report_written(self, path: str, total_evaluations: int) -> None:
        self._log.info(
            "report.written", path=path, total_evaluations=total_evaluations
        )
