"""Directors — drive a builder through a fixed, kind-specific sequence of steps.

Usage::

    from vehicle_studies.builders import CarBuilder, CarDirector

    car = CarDirector(CarBuilder()).build()
    print(car)  # Car with features: Car Body Built, ...
"""

from __future__ import annotations

import abc
import logging
from typing import ClassVar

from vehicle_studies.builders.base import VehicleBuilder
from vehicle_studies.builders.car import CarBuilder
from vehicle_studies.builders.van import VanBuilder
from vehicle_studies.factories.helper import NullArgumentError
from vehicle_studies.factories.registry import UnknownKindError, normalize_kind
from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


class TypeMismatchError(TypeError):
    """Raised when a director is given a builder for another vehicle kind."""


class VehicleDirector(abc.ABC):
    """Base class for directors.

    Subclasses set ``builder_type`` (the only builder they accept) and
    ``steps`` (builder method names, called in order by :meth:`build`).
    """

    builder_type: ClassVar[type[VehicleBuilder]]
    steps: ClassVar[tuple[str, ...]]

    def __init__(self, builder: VehicleBuilder | None) -> None:
        if builder is None:
            raise NullArgumentError("builder must not be None")
        if not isinstance(builder, self.builder_type):
            raise TypeMismatchError(
                f"{type(self).__name__} requires a {self.builder_type.__name__}, "
                f"got {type(builder).__name__}"
            )
        self._builder = builder

    @property
    def builder(self) -> VehicleBuilder:
        return self._builder

    def build(self) -> Vehicle:
        """Run every step in order and return the assembled vehicle."""
        features = [getattr(self._builder, step)() for step in self.steps]
        vehicle = Vehicle(kind=self._builder.kind, features=features)
        logger.debug(
            "%s built %s with %d features", type(self).__name__, vehicle.kind.value, len(features)
        )
        return vehicle


class CarDirector(VehicleDirector):
    builder_type = CarBuilder
    steps = (
        "build_body",
        "build_chassis",
        "build_boot",
        "build_passenger_area",
        "build_reinforced_storage",
        "build_windows",
    )


class VanDirector(VehicleDirector):
    builder_type = VanBuilder
    steps = (
        "build_body",
        "build_chassis",
        "build_reinforced_storage",
        "build_windows",
    )


DIRECTOR_REGISTRY: dict[VehicleKind, type[VehicleDirector]] = {
    VehicleKind.CAR: CarDirector,
    VehicleKind.VAN: VanDirector,
}


def build_vehicle(kind: VehicleKind | str) -> Vehicle:
    """Build a vehicle of *kind* with a fresh builder and its director."""
    director_cls = DIRECTOR_REGISTRY.get(normalize_kind(kind))
    if director_cls is None:
        raise UnknownKindError(kind)
    director = director_cls(director_cls.builder_type())
    return director.build()
