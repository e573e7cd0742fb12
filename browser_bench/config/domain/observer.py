"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, runs: int) -> None: ...

    def config_prompt_placeholder_warning(self, evaluation: str) -> None: ...
