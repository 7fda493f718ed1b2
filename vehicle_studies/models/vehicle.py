"""Value types returned to callers: VehicleParts and Vehicle."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from vehicle_studies.models.kinds import VehicleKind


class EmptyFeatureListError(ValueError):
    """Raised when a Vehicle is constructed without features or with a blank one."""


class VehicleParts(BaseModel):
    """Descriptions of the body, chassis and glassware of one vehicle kind."""

    model_config = ConfigDict(frozen=True)

    body_parts: str = Field(min_length=1)
    chassis_parts: str = Field(min_length=1)
    glassware_parts: str = Field(min_length=1)

    def as_tuple(self) -> tuple[str, str, str]:
        """Return the descriptions in (body, chassis, glass) order."""
        return (self.body_parts, self.chassis_parts, self.glassware_parts)


class Vehicle(BaseModel):
    """An assembled vehicle: its kind and the ordered features built for it.

    The feature list is checked before pydantic sees the data so that an
    empty list, or a blank feature, surfaces as :class:`EmptyFeatureListError`
    rather than a generic ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    kind: VehicleKind
    features: tuple[Annotated[str, Field(min_length=1)], ...] = Field(min_length=1)

    def __init__(self, **data: Any) -> None:
        kind = data.get("kind", "vehicle")
        features = data.get("features")
        if features is not None and not isinstance(features, (str, bytes)):
            features = data["features"] = tuple(features)
        if not features:
            raise EmptyFeatureListError(f"{kind} must have at least one feature")
        for position, feature in enumerate(features):
            if isinstance(feature, str) and not feature.strip():
                raise EmptyFeatureListError(f"{kind} feature {position} is blank")
        super().__init__(**data)

    def render(self) -> str:
        """Return ``"<kind> with features: f1, f2, ..."``."""
        return f"{self.kind.value} with features: {', '.join(self.features)}"

    def __str__(self) -> str:
        return self.render()
