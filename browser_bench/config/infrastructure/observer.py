"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, runs: int) -> None:
        self._log.info("config.loaded", name=name, runs=runs)

    def config_prompt_placeholder_warning(self, evaluation: str) -> None:
        self._log.warning(
            "config.prompt_placeholder_warning",
            evaluation=evaluation,
            message="Prompt has no {instruction} placeholder; every method gets the same prompt",
        )
