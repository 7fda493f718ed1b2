"""Abstract VehicleFactory interface.

Every factory produces one family of related parts (body, chassis and
glassware) for a single vehicle kind.
"""

from __future__ import annotations

import abc

from vehicle_studies.models.kinds import VehicleKind
from vehicle_studies.models.parts import Body, Chassis, GlassWare


class AbstractVehicleFactory(abc.ABC):
    """Base class for all vehicle part factories."""

    @property
    @abc.abstractmethod
    def kind(self) -> VehicleKind:
        """The vehicle kind whose parts this factory produces."""

    @abc.abstractmethod
    def create_body(self) -> Body:
        """Return a body part for this factory's kind."""

    @abc.abstractmethod
    def create_chassis(self) -> Chassis:
        """Return a chassis part for this factory's kind."""

    @abc.abstractmethod
    def create_glassware(self) -> GlassWare:
        """Return glassware for this factory's kind."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
