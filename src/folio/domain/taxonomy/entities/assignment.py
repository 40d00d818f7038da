"""Assignment entity."""

from folio.domain.taxonomy.ports import InvestmentVehicle
from folio.domain.taxonomy.value_objects import ONE_HUNDRED_PERCENT


class Assignment:
    """Weighted link between a classification and an investment vehicle.

    Assignments have no identity beyond the object itself: the same vehicle
    may be assigned to several classifications, each with its own weight.
    """

    def __init__(
        self,
        investment_vehicle: InvestmentVehicle,
        weight: int = ONE_HUNDRED_PERCENT,
        rank: int = 0,
    ):
        self._investment_vehicle = investment_vehicle
        self._weight = weight
        self._rank = rank

    @property
    def investment_vehicle(self) -> InvestmentVehicle:
        return self._investment_vehicle

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def rank(self) -> int:
        return self._rank

    def set_weight(self, weight: int) -> None:
        self._weight = weight

    def set_rank(self, rank: int) -> None:
        self._rank = rank

    def __repr__(self) -> str:
        return (
            f"Assignment(investment_vehicle={self._investment_vehicle.name!r}, "
            f"weight={self._weight}, rank={self._rank})"
        )
