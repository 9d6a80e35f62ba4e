"""Typed record models for nearplants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class PlantRecord:
    """One plant parsed from a row of the data file."""

    id: str
    common_name: str
    common_name_alt: str
    genus: str
    species: str
    longitude: float         # WGS84, 0.0 when missing
    latitude: float          # WGS84, 0.0 when missing
    height: float = 1.0      # metres

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @property
    def label(self) -> str:
        """Display name, secondary common name first when there is one."""
        if self.common_name_alt:
            return f"{self.common_name_alt}, {self.common_name}"
        return self.common_name

    @property
    def info(self) -> str:
        """Multi-line description shown when a marker is selected."""
        return (
            f"{self.label}\n"
            f"Genus: {self.genus or 'N/A'}\n"
            f"Species: {self.species or 'N/A'}"
        )

    @property
    def species_key(self) -> str:
        """Key used for color assignment: species, falling back to genus."""
        return self.species or self.genus

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "id": self.id,
            "common_name": self.common_name,
            "common_name_alt": self.common_name_alt,
            "genus": self.genus,
            "species": self.species,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "height": self.height,
        }


@dataclass(frozen=True)
class RankedRecord:
    """A PlantRecord paired with its distance from a reference point."""

    record: PlantRecord
    distance_m: float

    @property
    def id(self) -> str:
        return self.record.id

    def to_dict(self) -> dict:
        d = self.record.to_dict()
        d["distance_m"] = round(self.distance_m, 2)
        return d


@dataclass(frozen=True)
class Marker:
    """What a rendering sink needs to place or move one plant marker."""

    id: str
    latitude: float
    longitude: float
    label: str
    info: str
    color: str
    distance_m: float

    @classmethod
    def from_ranked(cls, ranked: RankedRecord, color: str) -> Marker:
        rec = ranked.record
        return cls(
            id=rec.id,
            latitude=rec.latitude,
            longitude=rec.longitude,
            label=rec.label,
            info=rec.info,
            color=color,
            distance_m=ranked.distance_m,
        )


@dataclass(frozen=True)
class MarkerDiff:
    """Changes needed to bring the displayed markers up to date."""

    added: tuple[Marker, ...] = ()
    updated: tuple[Marker, ...] = ()
    removed: tuple[str, ...] = ()
    shown: tuple[str, ...] = ()      # display ids in ranking order

    @property
    def ids(self) -> list[str]:
        """Ids displayed once the diff is applied, nearest first."""
        return list(self.shown)
