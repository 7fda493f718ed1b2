"""VanBuilder — vans have no boot or passenger area."""

from __future__ import annotations

from vehicle_studies.builders.base import VehicleBuilder
from vehicle_studies.models.kinds import VehicleKind


class VanBuilder(VehicleBuilder):
    """Builder for vans."""

    @property
    def kind(self) -> VehicleKind:
        return VehicleKind.VAN

    def build_body(self) -> str:
        return "Van Body Built"

    def build_chassis(self) -> str:
        return "Van Chassis Built"

    def build_windows(self) -> str:
        return "Van Windows Built"

    def build_reinforced_storage(self) -> str:
        return "Van Reinforced Storage Built"
