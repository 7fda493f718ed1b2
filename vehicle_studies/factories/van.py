"""VanFactory — produces Van parts."""

from __future__ import annotations

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.parts import VanBody, VanChassis, VanGlassWare


class VanFactory(AbstractVehicleFactory):
    """Factory for van parts."""

    @property
    def kind(self) -> VehicleKind:
        return VehicleKind.VAN

    def create_body(self) -> VanBody:
        return VanBody()

    def create_chassis(self) -> VanChassis:
        return VanChassis()

    def create_glassware(self) -> VanGlassWare:
        return VanGlassWare()
