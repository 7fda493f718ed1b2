"""Builder / Director — stepwise vehicle assembly."""

from vehicle_studies.builders.base import VehicleBuilder
from vehicle_studies.builders.car import CarBuilder
from vehicle_studies.builders.van import VanBuilder
from vehicle_studies.builders.director import (
    DIRECTOR_REGISTRY,
    CarDirector,
    TypeMismatchError,
    VanDirector,
    VehicleDirector,
    build_vehicle,
)
from vehicle_studies.factories.registry import UnknownKindError, normalize_kind
from vehicle_studies.models.kinds import VehicleKind

BUILDER_REGISTRY: dict[VehicleKind, type[VehicleBuilder]] = {
    VehicleKind.CAR: CarBuilder,
    VehicleKind.VAN: VanBuilder,
}


def get_builder(kind: VehicleKind | str) -> VehicleBuilder:
    """Return a new builder instance for *kind*."""
    builder_cls = BUILDER_REGISTRY.get(normalize_kind(kind))
    if builder_cls is None:
        raise UnknownKindError(kind)
    return builder_cls()


__all__ = [
    "VehicleBuilder",
    "CarBuilder",
    "VanBuilder",
    "VehicleDirector",
    "CarDirector",
    "VanDirector",
    "TypeMismatchError",
    "DIRECTOR_REGISTRY",
    "BUILDER_REGISTRY",
    "build_vehicle",
    "get_builder",
]
