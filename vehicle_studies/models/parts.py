"""Part descriptors produced by the vehicle factories.

Every part is an immutable value carrying its kind tag and one descriptive
string.  ``Body``, ``Chassis`` and ``GlassWare`` are the part contracts; the
concrete per-kind parts only fix the defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vehicle_studies.models.kinds import VehicleKind


class Part(BaseModel):
    """Common base: a frozen value tagged with its vehicle kind."""

    model_config = ConfigDict(frozen=True)

    kind: VehicleKind


class Body(Part):
    """A vehicle body component."""

    body_parts: str

    @property
    def description(self) -> str:
        return self.body_parts


class Chassis(Part):
    """A vehicle chassis component."""

    chassis_parts: str

    @property
    def description(self) -> str:
        return self.chassis_parts


class GlassWare(Part):
    """A vehicle glassware component."""

    glassware_parts: str

    @property
    def description(self) -> str:
        return self.glassware_parts


# Car

class CarBody(Body):
    kind: VehicleKind = VehicleKind.CAR
    body_parts: str = "Car Body Parts"


class CarChassis(Chassis):
    kind: VehicleKind = VehicleKind.CAR
    chassis_parts: str = "Car Chassis Parts"


class CarGlassWare(GlassWare):
    kind: VehicleKind = VehicleKind.CAR
    glassware_parts: str = "Car Glass Parts"


# Truck

class TruckBody(Body):
    kind: VehicleKind = VehicleKind.TRUCK
    body_parts: str = "Truck Body Parts"


class TruckChassis(Chassis):
    kind: VehicleKind = VehicleKind.TRUCK
    chassis_parts: str = "Truck Chassis Parts"


class TruckGlassWare(GlassWare):
    kind: VehicleKind = VehicleKind.TRUCK
    glassware_parts: str = "Truck Glass Parts"


# Van

class VanBody(Body):
    kind: VehicleKind = VehicleKind.VAN
    body_parts: str = "Van Body Parts"


class VanChassis(Chassis):
    kind: VehicleKind = VehicleKind.VAN
    chassis_parts: str = "Van Chassis Parts"


class VanGlassWare(GlassWare):
    kind: VehicleKind = VehicleKind.VAN
    glassware_parts: str = "Van Glass Parts"
