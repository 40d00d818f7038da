"""Ports (interfaces) required by the taxonomy domain."""

from folio.domain.taxonomy.ports.investment_vehicle import InvestmentVehicle

__all__ = ["InvestmentVehicle"]
