"""Taxonomy aggregate root."""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import uuid4

from folio.domain.taxonomy.entities import Assignment, Classification
from folio.domain.taxonomy.ports import InvestmentVehicle
from folio.domain.taxonomy.visitor import CallbackVisitor, TaxonomyVisitor


class Taxonomy:
    """
    A named classification tree, e.g. "Asset Classes" or "Regions".

    The taxonomy owns the root classification and is the only place where
    classification ids are created for copies.
    """

    def __init__(
        self,
        id: str,
        name: str,
        root: Optional[Classification] = None,
    ):
        self._id = id
        self._name = name
        self._root = root if root is not None else Classification(id, name)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> Classification:
        return self._root

    def rename(self, name: str) -> None:
        self._name = name

    def get_all_classifications(self) -> List[Classification]:
        """Return the root followed by all descendants in pre-order."""
        return [self._root, *self._root.get_tree_elements()]

    def get_classification_by_id(self, id: str) -> Optional[Classification]:
        for classification in self.get_all_classifications():
            if classification.id == id:
                return classification
        return None

    def get_classifications_for(
        self,
        vehicle: InvestmentVehicle,
    ) -> List[Classification]:
        """Return every classification holding an assignment of ``vehicle``.

        Vehicles are matched by equality, the same rule the weight queries use.
        """
        found: List[Classification] = []

        def collect(classification: Classification, assignment: Assignment) -> None:
            if assignment.investment_vehicle == vehicle:
                found.append(classification)

        self.accept(CallbackVisitor(on_assignment=collect))
        return found

    def get_weight_by_vehicle(self) -> Dict[InvestmentVehicle, int]:
        """Sum the assignment weights per vehicle across the whole tree.

        The totals are informational and may exceed ``ONE_HUNDRED_PERCENT``.
        """
        weights: Dict[InvestmentVehicle, int] = {}

        def add(_: Classification, assignment: Assignment) -> None:
            vehicle = assignment.investment_vehicle
            weights[vehicle] = weights.get(vehicle, 0) + assignment.weight

        self.accept(CallbackVisitor(on_assignment=add))
        return weights

    def get_weight(self, vehicle: InvestmentVehicle) -> int:
        return self.get_weight_by_vehicle().get(vehicle, 0)

    def accept(self, visitor: TaxonomyVisitor) -> None:
        self._root.accept(visitor)

    def copy(self) -> Taxonomy:
        """Deep copy the tree, giving the taxonomy and every node a fresh id.

        Assignments are copied but keep referencing the same vehicles.
        """
        return Taxonomy(
            id=str(uuid4()),
            name=self._name,
            root=_copy_subtree(self._root, parent=None),
        )

    def __repr__(self) -> str:
        return f"Taxonomy(id={self._id!r}, name={self._name!r})"


def _copy_subtree(
    source: Classification,
    parent: Optional[Classification],
) -> Classification:
    copy = Classification(
        id=str(uuid4()),
        name=source.name,
        parent=parent,
        color=source.color,
        description=source.description,
    )
    copy.set_weight(source.weight)
    copy.set_rank(source.rank)

    for assignment in source.assignments:
        copy.add_assignment(
            Assignment(
                assignment.investment_vehicle,
                weight=assignment.weight,
                rank=assignment.rank,
            ),
        )

    for child in source.children:
        copy.add_child(_copy_subtree(child, parent=copy))

    return copy
