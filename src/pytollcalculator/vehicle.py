"""Vehicle categories and their toll exemption."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from .exceptions import ValidationError
from .util import normalize_license_plate


@dataclass(frozen=True, slots=True)
class Vehicle(ABC):
    """Base class for vehicle categories."""

    vehicle_type: ClassVar[str] = "Vehicle"

    license_plate: str | None = None

    def __post_init__(self) -> None:
        if self.license_plate is not None:
            object.__setattr__(
                self, "license_plate", normalize_license_plate(self.license_plate)
            )

    @abstractmethod
    def is_toll_exempt(self) -> bool:
        """Return whether this category is excluded from all toll charges."""


@dataclass(frozen=True, slots=True)
class _TollExemptVehicle(Vehicle):
    def is_toll_exempt(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Car(Vehicle):
    vehicle_type: ClassVar[str] = "Car"

    def is_toll_exempt(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Motorbike(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Motorbike"


@dataclass(frozen=True, slots=True)
class Tractor(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Tractor"


@dataclass(frozen=True, slots=True)
class Emergency(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Emergency"


@dataclass(frozen=True, slots=True)
class Diplomat(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Diplomat"


@dataclass(frozen=True, slots=True)
class Foreign(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Foreign"


@dataclass(frozen=True, slots=True)
class Military(_TollExemptVehicle):
    vehicle_type: ClassVar[str] = "Military"


VEHICLE_CLASSES: tuple[type[Vehicle], ...] = (
    Car,
    Motorbike,
    Tractor,
    Emergency,
    Diplomat,
    Foreign,
    Military,
)
_VEHICLES_BY_TYPE = {cls.vehicle_type.lower(): cls for cls in VEHICLE_CLASSES}


def get_vehicle_class(vehicle_type: str) -> type[Vehicle]:
    if not isinstance(vehicle_type, str) or not vehicle_type.strip():
        raise ValidationError("Vehicle type must be a non-empty string.")
    vehicle_cls = _VEHICLES_BY_TYPE.get(vehicle_type.strip().lower())
    if vehicle_cls is None:
        raise ValidationError(f"Unknown vehicle type: {vehicle_type}.")
    return vehicle_cls
