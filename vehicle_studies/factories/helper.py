"""Helpers for reading part descriptions out of a vehicle factory."""

from __future__ import annotations

import logging
from typing import Iterable

from vehicle_studies.factories.base import AbstractVehicleFactory
from vehicle_studies.factories.registry import VehicleFactoryRegistry, default_registry
from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.vehicle import VehicleParts

logger = logging.getLogger(__name__)


class NullArgumentError(ValueError):
    """Raised when a required argument is ``None``."""


def get_vehicle_parts(factory: AbstractVehicleFactory | None) -> VehicleParts:
    """Return the body, chassis and glassware descriptions of *factory*.

    Parts are created fresh on every call, in body, chassis, glassware order.

    Raises
    ------
    NullArgumentError
        If *factory* is ``None``.
    """
    if factory is None:
        raise NullArgumentError("factory must not be None")

    body = factory.create_body()
    chassis = factory.create_chassis()
    glassware = factory.create_glassware()

    return VehicleParts(
        body_parts=body.body_parts,
        chassis_parts=chassis.chassis_parts,
        glassware_parts=glassware.glassware_parts,
    )


def collect_parts(
    kinds: Iterable[VehicleKind | str],
    registry: VehicleFactoryRegistry | None = None,
) -> dict[str, list[str]]:
    """Gather part descriptions for each of *kinds*, keeping their order.

    Returns a dict with ``body_parts``, ``chassis_parts`` and
    ``glassware_parts`` lists, one entry per kind.
    """
    registry = registry if registry is not None else default_registry()
    result: dict[str, list[str]] = {
        "body_parts": [],
        "chassis_parts": [],
        "glassware_parts": [],
    }

    for kind in kinds:
        parts = get_vehicle_parts(registry.get(kind))
        result["body_parts"].append(parts.body_parts)
        result["chassis_parts"].append(parts.chassis_parts)
        result["glassware_parts"].append(parts.glassware_parts)

    logger.debug("Collected parts for %d vehicle type(s)", len(result["body_parts"]))
    return result
