"""Domain entities for the taxonomy bounded context."""

from folio.domain.taxonomy.entities.assignment import Assignment
from folio.domain.taxonomy.entities.classification import (
    UNASSIGNED_ID,
    Classification,
    by_rank,
)

__all__ = ["Assignment", "Classification", "UNASSIGNED_ID", "by_rank"]
