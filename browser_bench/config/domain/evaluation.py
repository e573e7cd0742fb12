"""Evaluation configuration models — the task each method is benchmarked on."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field

INSTRUCTION_PLACEHOLDER = "{instruction}"


class ResetConfig(BaseModel, frozen=True):
    """Steps that return the evaluation's environment to a clean state."""

    kill_ports: list[int] = Field(default_factory=list)
    remove_paths: list[str] = Field(default_factory=list)
    commands: list[Annotated[list[str], Field(min_length=1)]] = Field(
        default_factory=list
    )


class EvaluationConfig(BaseModel, frozen=True):
    """A named task: where it runs, what the agent is asked, how to reset it."""

    directory: Path | None = None
    prompt: str = Field(min_length=1)
    reset: ResetConfig | None = None

    def render_prompt(self, instruction: str) -> str:
        """Substitute the method's instruction into the prompt template."""
        return self.prompt.replace(INSTRUCTION_PLACEHOLDER, instruction)
