"""Abstract Factory — one part factory per vehicle kind."""

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.factories.car import CarFactory
from vehicle_studies.factories.truck import TruckFactory
from vehicle_studies.factories.van import VanFactory
from vehicle_studies.factories.registry import (
    UnknownKindError,
    VehicleFactoryRegistry,
    default_registry,
    get_factory,
)
from vehicle_studies.factories.helper import NullArgumentError, collect_parts, get_vehicle_parts

__all__ = [
    "AbstractVehicleFactory",
    "CarFactory",
    "TruckFactory",
    "VanFactory",
    "VehicleFactoryRegistry",
    "UnknownKindError",
    "default_registry",
    "get_factory",
    "NullArgumentError",
    "get_vehicle_parts",
    "collect_parts",
]
