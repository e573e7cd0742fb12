"""Number rounding and display formatting shared by analysis and rendering."""

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_duration(duration_ms: float) -> str:
    """Format milliseconds as '3m 53s', rounding to whole seconds first."""
    total_seconds = round_half_up(duration_ms / 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}m {seconds:02d}s"


def format_cost(cost_usd: float) -> str:
    """Format a USD amount as '$0.88', rounding half-up on the decimal repr."""
    cents = Decimal(repr(cost_usd)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"${cents}"
