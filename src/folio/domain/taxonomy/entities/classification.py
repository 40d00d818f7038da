"""Classification entity."""

from __future__ import annotations

import logging
import random
import weakref
from collections import deque
from typing import TYPE_CHECKING, List, Optional

from folio.domain.shared.color import random_pastel_color, to_hex, to_hsb
from folio.domain.taxonomy.entities.assignment import Assignment
from folio.domain.taxonomy.value_objects import ONE_HUNDRED_PERCENT

if TYPE_CHECKING:
    from folio.domain.taxonomy.visitor import TaxonomyVisitor

logger = logging.getLogger(__name__)

UNASSIGNED_ID = "$unassigned$"

PATH_SEPARATOR = " » "
TRUNCATION_MARKER = " ... "

# Lightening applied per tree level when cascading a color down
CASCADE_SATURATION_STEP = 0.1
CASCADE_BRIGHTNESS_STEP = 0.1

_default_rng = random.Random()


def by_rank(classification: Classification) -> int:
    """Sort key ordering classifications by descending rank.

    Python's sort is stable, so siblings with equal rank keep their order.
    """
    return -classification.rank


class Classification:
    """
    A category node in a taxonomy tree.

    A classification owns its children and a list of weighted assignments of
    investment vehicles. The parent is held as a weak reference only, so the
    owning direction is always parent -> children.

    Weights are informational: neither the children's weights nor the
    assignment weights are required to add up to the parent's weight.
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: str,
        name: str,
        parent: Optional[Classification] = None,
        color: Optional[str] = None,
        description: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a new classification.

        Parameters
        ----------
        id
            Identifier, unique within the owning taxonomy
        name
            Display name
        parent
            Parent node (None for the root). The node is not added to the
            parent's children; use ``parent.add_child``.
        color
            ``#rrggbb`` color; a random pastel color is generated if omitted
        description
            Optional free-text description
        rng
            Random source for the generated color (seed it for reproducible
            colors)
        """
        self._id = id
        self._name = name
        self._description = description
        self._parent: Optional[weakref.ReferenceType[Classification]] = (
            weakref.ref(parent) if parent is not None else None
        )
        self._color = (
            color if color is not None else random_pastel_color(rng or _default_rng)
        )
        self._children: List[Classification] = []
        self._assignments: List[Assignment] = []
        self._weight = ONE_HUNDRED_PERCENT
        self._rank = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def color(self) -> str:
        return self._color

    @property
    def parent(self) -> Optional[Classification]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> List[Classification]:
        return self._children

    @property
    def assignments(self) -> List[Assignment]:
        return self._assignments

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def children_weight(self) -> int:
        """Sum of the children's weights (not checked against ``weight``)."""
        return sum(child.weight for child in self._children)

    def rename(self, name: str) -> None:
        self._name = name

    def set_description(self, description: Optional[str]) -> None:
        self._description = description

    def set_color(self, color: str) -> None:
        self._color = color

    def set_weight(self, weight: int) -> None:
        self._weight = weight

    def set_rank(self, rank: int) -> None:
        self._rank = rank

    def set_parent(self, parent: Optional[Classification]) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def add_child(self, child: Classification) -> None:
        self._children.append(child)

    def remove_child(self, child: Classification) -> None:
        self._children.remove(child)

    def add_assignment(self, assignment: Assignment) -> None:
        self._assignments.append(assignment)

    def remove_assignment(self, assignment: Assignment) -> None:
        """Remove the given assignment object (matched by identity)."""
        for index, existing in enumerate(self._assignments):
            if existing is assignment:
                del self._assignments[index]
                return

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def get_path_to_root(self) -> List[Classification]:
        """Return the nodes from the root down to this node."""
        path: deque[Classification] = deque()
        node: Optional[Classification] = self
        while node is not None:
            path.appendleft(node)
            node = node.parent
        return list(path)

    def get_path_name(self, include_parent: bool, limit: Optional[int] = None) -> str:
        """Render the path from the root to this node.

        With ``limit``, names are taken alternately from the right end (this
        node) and the left end (the root) for as long as their combined length
        fits the budget. If names had to be left out, the two halves are joined
        with ``" ... "`` instead of the regular separator.
        """
        path = self.get_path_to_root()
        if not include_parent and len(path) > 1:
            path = path[1:]

        if limit is None:
            return PATH_SEPARATOR.join(node.name for node in path)

        if len(path) == 1:
            return path[0].name

        return _truncated_path_name([node.name for node in path], limit)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def get_tree_elements(self) -> List[Classification]:
        """Return all descendants in pre-order, excluding this node."""
        elements: List[Classification] = []

        stack: deque[Classification] = deque(self._children)
        while stack:
            node = stack.popleft()
            elements.append(node)
            stack.extendleft(reversed(node.children))

        return elements

    def accept(self, visitor: TaxonomyVisitor) -> None:
        """Visit this node, its subtree, then this node's assignments.

        Children and assignments are copied before iterating so the visitor
        may add or remove them while the traversal runs.
        """
        visitor.visit_classification(self)

        for child in list(self._children):
            child.accept(visitor)

        for assignment in list(self._assignments):
            visitor.visit_assignment(self, assignment)

    # ------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------

    def assign_random_colors(self, rng: Optional[random.Random] = None) -> None:
        """Spread random, evenly spaced hues over the children and cascade them."""
        rng = rng or _default_rng

        hue = rng.random() * 360.0
        saturation = rng.random() * 0.5 + 0.3
        brightness = rng.random() * 0.4 + 0.5

        self.spread_colors(hue, saturation, brightness)

    def spread_colors(self, hue: float, saturation: float, brightness: float) -> None:
        """Give the children hues evenly distributed around the color wheel.

        Children are sorted by rank first; the i-th child gets
        ``hue + i * 360 / n``. Each child's color is then cascaded to its
        own descendants.
        """
        if not self._children:
            return

        self._children.sort(key=by_rank)

        step = 360.0 / len(self._children)
        logger.debug(
            "Spreading colors over %d children of '%s' (hue=%.1f, step=%.1f)",
            len(self._children),
            self._id,
            hue,
            step,
        )

        for index, child in enumerate(self._children):
            child_hue = (hue + step * index) % 360.0
            child.set_color(to_hex(child_hue, saturation, brightness))
            child._cascade_color_down(child_hue, saturation, brightness)

    def cascade_color_down(self) -> None:
        """Derive the descendants' colors from this node's color.

        Raises
        ------
        ValueError
            If this node's color is not a ``#rrggbb`` string.
        """
        if not self._children:
            return

        hue, saturation, brightness = to_hsb(self._color)
        self._cascade_color_down(hue, saturation, brightness)

    def _cascade_color_down(
        self,
        hue: float,
        saturation: float,
        brightness: float,
    ) -> None:
        if not self._children:
            return

        child_saturation = max(0.0, saturation - CASCADE_SATURATION_STEP)
        child_brightness = min(1.0, brightness + CASCADE_BRIGHTNESS_STEP)

        for child in self._children:
            child.set_color(to_hex(hue, child_saturation, child_brightness))
            child._cascade_color_down(hue, child_saturation, child_brightness)

    def __repr__(self) -> str:
        return f"Classification(id={self._id!r}, name={self._name!r})"

    def __str__(self) -> str:
        return self._name


def _truncated_path_name(names: List[str], limit: int) -> str:
    available = limit

    left_names: List[str] = []
    right_names: deque[str] = deque()

    left = 0
    right = 0
    while left + right < len(names):
        take_right = (left + right) % 2 == 0
        name = names[len(names) - 1 - right] if take_right else names[left]

        available -= len(name)
        if available < 0:
            break

        if take_right:
            right_names.appendleft(name)
            right += 1
        else:
            left_names.append(name)
            left += 1

    separator = PATH_SEPARATOR if left + right == len(names) else TRUNCATION_MARKER
    return PATH_SEPARATOR.join(left_names) + separator + PATH_SEPARATOR.join(right_names)
