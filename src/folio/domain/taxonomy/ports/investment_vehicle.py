"""Port for anything that can be assigned to a classification."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class InvestmentVehicle(Protocol):
    """An account or security that can be classified.

    The taxonomy never calls into a vehicle; it only stores references.
    """

    @property
    def name(self) -> str: ...
