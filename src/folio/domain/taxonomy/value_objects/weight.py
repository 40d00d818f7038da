"""Fixed-point weights used by classifications and assignments.

Weights are plain integers scaled by ``100 * WEIGHT_FACTOR`` so that
``ONE_HUNDRED_PERCENT`` means a full allocation. Keeping them integral avoids
rounding drift when weights are summed or redistributed repeatedly.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# Two decimal places of precision for percentages (12.34%)
WEIGHT_FACTOR = 100

ONE_HUNDRED_PERCENT = 100 * WEIGHT_FACTOR


def weight_to_percent(weight: int) -> Decimal:
    """Return the weight as a percentage, e.g. ``2550 -> Decimal("25.50")``."""
    return Decimal(weight) / Decimal(WEIGHT_FACTOR)


def percent_to_weight(percent: Decimal | float | str) -> int:
    """Return the fixed-point weight for a percentage, rounding half up."""
    scaled = Decimal(str(percent)) * WEIGHT_FACTOR
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_weight(weight: int) -> str:
    """Format a weight as a grouped percentage string without the sign."""
    return f"{weight_to_percent(weight):,.2f}"
