"""VehicleKind — the closed set of vehicle kinds."""

from __future__ import annotations

from enum import Enum


class VehicleKind(str, Enum):
    """Vehicle kinds shared by factories, parts, builders and directors."""

    CAR = "Car"
    TRUCK = "Truck"
    VAN = "Van"

    def __str__(self) -> str:
        return self.value
