"""Aggregates for the taxonomy bounded context."""

from folio.domain.taxonomy.aggregates.taxonomy import Taxonomy

__all__ = ["Taxonomy"]
