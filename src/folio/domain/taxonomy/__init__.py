"""Taxonomy domain layer exports."""

# Aggregates
from folio.domain.taxonomy.aggregates.taxonomy import Taxonomy

# Entities
from folio.domain.taxonomy.entities.assignment import Assignment
from folio.domain.taxonomy.entities.classification import (
    UNASSIGNED_ID,
    Classification,
    by_rank,
)

# Ports
from folio.domain.taxonomy.ports.investment_vehicle import InvestmentVehicle

# Value Objects
from folio.domain.taxonomy.value_objects.weight import (
    ONE_HUNDRED_PERCENT,
    WEIGHT_FACTOR,
)

# Visitors
from folio.domain.taxonomy.visitor import CallbackVisitor, TaxonomyVisitor

__all__ = [
    # Aggregates
    "Taxonomy",
    # Entities
    "Assignment",
    "Classification",
    "UNASSIGNED_ID",
    "by_rank",
    # Ports
    "InvestmentVehicle",
    # Value Objects
    "ONE_HUNDRED_PERCENT",
    "WEIGHT_FACTOR",
    # Visitors
    "CallbackVisitor",
    "TaxonomyVisitor",
]
