"""Value types for the vehicle studies: kinds, parts and assembled vehicles."""

from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.parts import (
    Body,
    CarBody,
    CarChassis,
    CarGlassWare,
    Chassis,
    GlassWare,
    Part,
    TruckBody,
    TruckChassis,
    TruckGlassWare,
    VanBody,
    VanChassis,
    VanGlassWare,
)
from vehicle_studies.models.vehicle import EmptyFeatureListError, Vehicle, VehicleParts

__all__ = [
    "VehicleKind",
    "Part",
    "Body",
    "Chassis",
    "GlassWare",
    "CarBody",
    "CarChassis",
    "CarGlassWare",
    "TruckBody",
    "TruckChassis",
    "TruckGlassWare",
    "VanBody",
    "VanChassis",
    "VanGlassWare",
    "VehicleParts",
    "Vehicle",
    "EmptyFeatureListError",
]
