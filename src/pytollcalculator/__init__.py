"""pyTollCalculator package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import TollCalculator
from .exceptions import PolicyError, PyTollCalculatorError, ValidationError
from .models import ExemptionCalendar, FeeBand, PolicyInfo, TollPolicy
from .policy.loader import get_policy, list_policies
from .vehicle import (
    Car,
    Diplomat,
    Emergency,
    Foreign,
    Military,
    Motorbike,
    Tractor,
    Vehicle,
    get_vehicle_class,
)

try:
    __version__ = version("pytollcalculator")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "Car",
    "Diplomat",
    "Emergency",
    "ExemptionCalendar",
    "FeeBand",
    "Foreign",
    "Military",
    "Motorbike",
    "PolicyError",
    "PolicyInfo",
    "PyTollCalculatorError",
    "TollCalculator",
    "TollPolicy",
    "Tractor",
    "ValidationError",
    "Vehicle",
    "__version__",
    "get_policy",
    "get_vehicle_class",
    "list_policies",
]
