"""CarBuilder — builds every car feature."""

from __future__ import annotations

from vehicle_studies.builders.base import VehicleBuilder
from vehicle_studies.models.kinds import VehicleKind


class CarBuilder(VehicleBuilder):
    """Builder for cars."""

    @property
    def kind(self) -> VehicleKind:
        return VehicleKind.CAR

    def build_body(self) -> str:
        return "Car Body Built"

    def build_chassis(self) -> str:
        return "Car Chassis Built"

    def build_boot(self) -> str:
        return "Car Boot Built"

    def build_passenger_area(self) -> str:
        return "Car Passenger Area Built"

    def build_windows(self) -> str:
        return "Car Windows Built"

    def build_reinforced_storage(self) -> str:
        return "Car Reinforced Storage Built"
