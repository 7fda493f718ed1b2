"""Tests for the Builder / Director family and the Vehicle value."""

from __future__ import annotations

import pytest

from vehicle_studies.builders import (
    BUILDER_REGISTRY,
    DIRECTOR_REGISTRY,
    CarBuilder,
    CarDirector,
    TypeMismatchError,
    VanBuilder,
    VanDirector,
    VehicleBuilder,
    build_vehicle,
    get_builder,
)
from vehicle_studies.factories import NullArgumentError, UnknownKindError
from vehicle_studies.models import EmptyFeatureListError, Vehicle, VehicleKind


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


class TestBuilders:
    def test_car_builder_steps(self) -> None:
        builder = CarBuilder()
        assert builder.kind is VehicleKind.CAR
        assert builder.build_body() == "Car Body Built"
        assert builder.build_chassis() == "Car Chassis Built"
        assert builder.build_boot() == "Car Boot Built"
        assert builder.build_passenger_area() == "Car Passenger Area Built"
        assert builder.build_windows() == "Car Windows Built"
        assert builder.build_reinforced_storage() == "Car Reinforced Storage Built"

    def test_van_builder_skips_unsupported_steps(self) -> None:
        builder = VanBuilder()
        assert builder.kind is VehicleKind.VAN
        assert builder.build_body() == "Van Body Built"
        assert builder.build_boot() == ""
        assert builder.build_passenger_area() == ""

    def test_base_steps_default_to_empty(self) -> None:
        class BareBuilder(VehicleBuilder):
            @property
            def kind(self) -> VehicleKind:
                return VehicleKind.TRUCK

        builder = BareBuilder()
        for step in (
            builder.build_body,
            builder.build_chassis,
            builder.build_boot,
            builder.build_passenger_area,
            builder.build_windows,
            builder.build_reinforced_storage,
        ):
            assert step() == ""

    def test_get_builder(self) -> None:
        assert isinstance(get_builder("Car"), CarBuilder)
        assert isinstance(get_builder(VehicleKind.VAN), VanBuilder)
        assert set(BUILDER_REGISTRY) == {VehicleKind.CAR, VehicleKind.VAN}

    def test_get_builder_unknown(self) -> None:
        with pytest.raises(UnknownKindError):
            get_builder("Truck")
        with pytest.raises(UnknownKindError):
            get_builder("Bogus")


# ---------------------------------------------------------------------------
# Directors
# ---------------------------------------------------------------------------


class TestDirectors:
    def test_car_director(self) -> None:
        car = CarDirector(CarBuilder()).build()
        assert car.kind is VehicleKind.CAR
        assert car.features == (
            "Car Body Built",
            "Car Chassis Built",
            "Car Boot Built",
            "Car Passenger Area Built",
            "Car Reinforced Storage Built",
            "Car Windows Built",
        )

    def test_van_director(self) -> None:
        van = VanDirector(VanBuilder()).build()
        assert van.kind is VehicleKind.VAN
        assert van.features == (
            "Van Body Built",
            "Van Chassis Built",
            "Van Reinforced Storage Built",
            "Van Windows Built",
        )

    def test_features_are_never_empty(self) -> None:
        for director in (CarDirector(CarBuilder()), VanDirector(VanBuilder())):
            assert all(director.build().features)

    def test_car_director_rejects_van_builder(self) -> None:
        with pytest.raises(TypeMismatchError, match="CarBuilder"):
            CarDirector(VanBuilder())

    def test_van_director_rejects_car_builder(self) -> None:
        with pytest.raises(TypeError):
            VanDirector(CarBuilder())

    def test_none_builder(self) -> None:
        with pytest.raises(NullArgumentError):
            CarDirector(None)

    def test_build_is_repeatable(self) -> None:
        director = CarDirector(CarBuilder())
        assert director.build() == director.build()
        assert isinstance(director.builder, CarBuilder)

    def test_build_calls_steps_in_order(self) -> None:
        calls: list[str] = []

        class RecordingVanBuilder(VanBuilder):
            def __getattribute__(self, name: str):  # type: ignore[no-untyped-def]
                if name.startswith("build_"):
                    calls.append(name)
                return super().__getattribute__(name)

        VanDirector(RecordingVanBuilder()).build()
        assert calls == list(VanDirector.steps)

    @pytest.mark.parametrize("kind", ["Car", "Van"])
    def test_build_vehicle(self, kind: str) -> None:
        vehicle = build_vehicle(kind)
        assert vehicle.kind == VehicleKind(kind)
        assert len(vehicle.features) == len(DIRECTOR_REGISTRY[VehicleKind(kind)].steps)

    def test_build_vehicle_unknown(self) -> None:
        with pytest.raises(UnknownKindError):
            build_vehicle("Truck")


# ---------------------------------------------------------------------------
# Vehicle
# ---------------------------------------------------------------------------


class TestVehicle:
    def test_render(self) -> None:
        car = Vehicle(kind=VehicleKind.CAR, features=["Car Body Built", "Car Chassis Built"])
        assert str(car) == "Car with features: Car Body Built, Car Chassis Built"
        assert car.render() == str(car)

    def test_kind_from_string(self) -> None:
        van = Vehicle(kind="Van", features=["Van Body Built"])
        assert van.kind is VehicleKind.VAN
        assert str(van) == "Van with features: Van Body Built"

    def test_empty_features_rejected(self) -> None:
        with pytest.raises(EmptyFeatureListError):
            Vehicle(kind=VehicleKind.CAR, features=[])

    @pytest.mark.parametrize("features", [[""], ["Car Body Built", ""], ["Car Body Built", "   "]])
    def test_blank_feature_rejected(self, features: list[str]) -> None:
        with pytest.raises(EmptyFeatureListError, match="blank"):
            Vehicle(kind=VehicleKind.CAR, features=features)

    def test_blank_feature_rejected_on_validate(self) -> None:
        with pytest.raises(ValueError):
            Vehicle.model_validate({"kind": "Car", "features": [""]})

    def test_empty_iterator_rejected(self) -> None:
        with pytest.raises(EmptyFeatureListError):
            Vehicle(kind=VehicleKind.CAR, features=iter([]))

    def test_features_from_generator(self) -> None:
        features = (f"Van {step} Built" for step in ("Body", "Chassis"))
        van = Vehicle(kind=VehicleKind.VAN, features=features)
        assert van.features == ("Van Body Built", "Van Chassis Built")

    def test_missing_features_rejected(self) -> None:
        with pytest.raises(EmptyFeatureListError):
            Vehicle(kind=VehicleKind.CAR)

    def test_empty_features_rejected_on_validate(self) -> None:
        with pytest.raises(ValueError):
            Vehicle.model_validate({"kind": "Car", "features": []})

    def test_vehicle_is_frozen(self) -> None:
        car = build_vehicle("Car")
        with pytest.raises(Exception):
            car.features = ("Nothing",)  # type: ignore[misc]
