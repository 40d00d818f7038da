"""Security entity."""

from typing import Optional
from uuid import UUID, uuid4

from folio.domain.shared.exceptions import ValidationError


class Security:
    """A tradable instrument (share, fund, bond) that can be classified."""

    def __init__(
        self,
        name: str,
        isin: Optional[str] = None,
        ticker_symbol: Optional[str] = None,
        id: Optional[UUID] = None,
    ):
        if not name or not name.strip():
            msg = "Security name cannot be empty"
            raise ValidationError(msg)

        self._id = id if id is not None else uuid4()
        self._name = name.strip()
        self._isin = isin.replace(" ", "").upper() if isin else None
        self._ticker_symbol = ticker_symbol

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def isin(self) -> Optional[str]:
        return self._isin

    @property
    def ticker_symbol(self) -> Optional[str]:
        return self._ticker_symbol

    def __eq__(self, other) -> bool:
        if not isinstance(other, Security):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._name
