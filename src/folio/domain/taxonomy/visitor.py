"""Visitors for walking a classification tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from folio.domain.taxonomy.entities import Assignment, Classification


class TaxonomyVisitor:
    """Receives classifications and their assignments in pre-order.

    Subclasses override the hooks they care about; both default to no-ops.
    """

    def visit_classification(self, classification: Classification) -> None:
        pass

    def visit_assignment(
        self,
        classification: Classification,
        assignment: Assignment,
    ) -> None:
        pass


class CallbackVisitor(TaxonomyVisitor):
    """Visitor that forwards to plain callables.

    Usage:
        >>> names = []
        >>> root.accept(CallbackVisitor(on_classification=lambda c: names.append(c.name)))
    """

    def __init__(
        self,
        on_classification: Optional[Callable[[Classification], None]] = None,
        on_assignment: Optional[Callable[[Classification, Assignment], None]] = None,
    ):
        self._on_classification = on_classification
        self._on_assignment = on_assignment

    def visit_classification(self, classification: Classification) -> None:
        if self._on_classification is not None:
            self._on_classification(classification)

    def visit_assignment(
        self,
        classification: Classification,
        assignment: Assignment,
    ) -> None:
        if self._on_assignment is not None:
            self._on_assignment(classification, assignment)
