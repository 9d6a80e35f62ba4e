"""nearplants — Find the plant records closest to a GPS position."""

from nearplants.client import NearbyPlants
from nearplants.colors import SpeciesPalette
from nearplants.config import Settings
from nearplants.exceptions import (
    ConfigInvalid,
    NearPlantsError,
    SelectionInvalid,
    SourceUnavailable,
)
from nearplants.geo import haversine_m
from nearplants.models import (
    GeoPoint,
    Marker,
    MarkerDiff,
    PlantRecord,
    RankedRecord,
)
from nearplants.parser import parse
from nearplants.reconcile import Reconciler
from nearplants.selector import select
from nearplants.sink import MarkerSink, RecordingSink
from nearplants.throttle import RefreshThrottle, refresh_due

__all__ = [
    "NearbyPlants",
    "Settings",
    "GeoPoint",
    "PlantRecord",
    "RankedRecord",
    "Marker",
    "MarkerDiff",
    "parse",
    "select",
    "haversine_m",
    "refresh_due",
    "RefreshThrottle",
    "SpeciesPalette",
    "Reconciler",
    "MarkerSink",
    "RecordingSink",
    "NearPlantsError",
    "SourceUnavailable",
    "ConfigInvalid",
    "SelectionInvalid",
]
