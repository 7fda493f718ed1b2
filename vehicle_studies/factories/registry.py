"""VehicleFactoryRegistry — map vehicle kinds to their part factories."""

from __future__ import annotations

import logging

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.models.kinds import VehicleKind

logger = logging.getLogger(__name__)


class UnknownKindError(KeyError):
    """Raised when a vehicle kind has no registered factory or builder."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown vehicle type: {kind}")
        self.kind = kind

    def __str__(self) -> str:
        return str(self.args[0])


def normalize_kind(kind: VehicleKind | str) -> VehicleKind:
    """Return *kind* as a :class:`VehicleKind`.

    Strings must match a kind's value exactly ("Car", "Truck", "Van").
    """
    if isinstance(kind, VehicleKind):
        return kind
    try:
        return VehicleKind(kind)
    except ValueError:
        raise UnknownKindError(kind) from None


class VehicleFactoryRegistry:
    """Central registry of vehicle factories.

    Populated once, then only read.  Every key maps to a factory whose
    parts are tagged with that same kind.
    """

    def __init__(self) -> None:
        self._factories: dict[VehicleKind, AbstractVehicleFactory] = {}

    def register(self, kind: VehicleKind | str, factory: AbstractVehicleFactory) -> None:
        """Add a factory for *kind*."""
        key = normalize_kind(kind)
        if key in self._factories:
            raise ValueError(f"Factory for '{key.value}' already registered.")
        if factory.kind is not key:
            raise ValueError(
                f"{type(factory).__name__} produces {factory.kind.value} parts, "
                f"cannot register it for {key.value}"
            )
        self._factories[key] = factory
        logger.info("Registered factory: %s -> %s", key.value, type(factory).__name__)

    def get(self, kind: VehicleKind | str) -> AbstractVehicleFactory:
        """Return the factory registered for *kind*.

        Raises
        ------
        UnknownKindError
            If no factory is registered for *kind*.
        """
        try:
            key = normalize_kind(kind)
            factory = self._factories[key]
        except KeyError:
            logger.warning("No factory registered for vehicle type %r", kind)
            raise UnknownKindError(kind) from None
        logger.debug("Resolved factory for %s: %s", key.value, type(factory).__name__)
        return factory

    def available_kinds(self) -> set[str]:
        """Return the names of all registered kinds."""
        return {kind.value for kind in self._factories}

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (VehicleKind, str)):
            return False
        try:
            return normalize_kind(kind) in self._factories
        except UnknownKindError:
            return False

    def __len__(self) -> int:
        return len(self._factories)


_default_registry: VehicleFactoryRegistry | None = None


def default_registry() -> VehicleFactoryRegistry:
    """Return the process-wide registry holding the Car, Truck and Van factories.

    Built on first use and never mutated afterwards.
    """
    global _default_registry
    if _default_registry is None:
        from vehicle_studies.factories.car import CarFactory
        from vehicle_studies.factories.truck import TruckFactory
        from vehicle_studies.factories.van import VanFactory

        registry = VehicleFactoryRegistry()
        for factory in (CarFactory(), TruckFactory(), VanFactory()):
            registry.register(factory.kind, factory)
        _default_registry = registry
    return _default_registry


def get_factory(kind: VehicleKind | str) -> AbstractVehicleFactory:
    """Look up *kind* in the default registry."""
    return default_registry().get(kind)
