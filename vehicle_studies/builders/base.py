"""Abstract VehicleBuilder interface.

A builder exposes one step per feature a vehicle can have.  Each step
returns a confirmation string; steps a kind does not support return ``""``.
"""

from __future__ import annotations

import abc

from vehicle_studies.models.kinds import VehicleKind


class VehicleBuilder(abc.ABC):
    """Base class for all vehicle builders."""

    @property
    @abc.abstractmethod
    def kind(self) -> VehicleKind:
        """The vehicle kind this builder assembles."""

    def build_body(self) -> str:
        return ""

    def build_chassis(self) -> str:
        return ""

    def build_boot(self) -> str:
        return ""

    def build_passenger_area(self) -> str:
        return ""

    def build_windows(self) -> str:
        return ""

    def build_reinforced_storage(self) -> str:
        return ""
