"""RunRecord value object — telemetry for one completed benchmark run."""

from pydantic import BaseModel, Field


class RunRecord(BaseModel, frozen=True):
    """Immutable telemetry extracted from the terminal event of one run's log.

    Fields are strict: numeric strings and booleans are rejected rather than
    coerced. A JSON integer is still accepted for cost_usd.
    """

    duration_ms: int = Field(ge=0, strict=True)
    cost_usd: float = Field(ge=0.0, strict=True)
    turns: int = Field(ge=0, strict=True)
