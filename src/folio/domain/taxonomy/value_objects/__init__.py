"""Value objects for the taxonomy bounded context."""

from folio.domain.taxonomy.value_objects.weight import (
    ONE_HUNDRED_PERCENT,
    WEIGHT_FACTOR,
    format_weight,
    percent_to_weight,
    weight_to_percent,
)

__all__ = [
    "ONE_HUNDRED_PERCENT",
    "WEIGHT_FACTOR",
    "format_weight",
    "percent_to_weight",
    "weight_to_percent",
]
