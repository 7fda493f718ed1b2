"""TruckFactory — produces Truck parts."""

from __future__ import annotations

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.parts import TruckBody, TruckChassis, TruckGlassWare


class TruckFactory(AbstractVehicleFactory):
    """Factory for truck parts."""

    @property
    def kind(self) -> VehicleKind:
        return VehicleKind.TRUCK

    def create_body(self) -> TruckBody:
        return TruckBody()

    def create_chassis(self) -> TruckChassis:
        return TruckChassis()

    def create_glassware(self) -> TruckGlassWare:
        return TruckGlassWare()
