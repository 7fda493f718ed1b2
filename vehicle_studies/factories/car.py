"""CarFactory — produces Car parts."""

from __future__ import annotations

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.parts import CarBody, CarChassis, CarGlassWare


class CarFactory(AbstractVehicleFactory):
    """Factory for car parts."""

    @property
    def kind(self) -> VehicleKind:
        return VehicleKind.CAR

    def create_body(self) -> CarBody:
        return CarBody()

    def create_chassis(self) -> CarChassis:
        return CarChassis()

    def create_glassware(self) -> CarGlassWare:
        return CarGlassWare()
