"""Vehicle studies — Abstract Factory and Builder patterns on a toy vehicle domain."""

__version__ = "1.0.0"

from vehicle_studies.builders import (
    CarBuilder,
    CarDirector,
    TypeMismatchError,
    VanBuilder,
    VanDirector,
    VehicleBuilder,
    VehicleDirector,
    build_vehicle,
)
from vehicle_studies.factories import (
    AbstractVehicleFactory,
    CarFactory,
    NullArgumentError,
    TruckFactory,
    UnknownKindError,
    VanFactory,
    VehicleFactoryRegistry,
    collect_parts,
    default_registry,
    get_factory,
    get_vehicle_parts,
)
from vehicle_studies.indexers import NoteBooks
from vehicle_studies.models import EmptyFeatureListError, Vehicle, VehicleKind, VehicleParts
