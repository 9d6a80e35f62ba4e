"""Shared test fixtures — a small plant data file with realistic rows."""

from pathlib import Path

import pytest

from nearplants.config import Settings
from nearplants.models import GeoPoint
from nearplants.sink import RecordingSink

# Reference point used throughout; offsets below are due north of it,
# so distances are R * dlat exactly: 50 m, 5000 m and 200 m.
HERE = GeoPoint(40.0, -75.0)
LAT_50M = 40.0 + 50 / 111_194.9266
LAT_200M = 40.0 + 200 / 111_194.9266
LAT_5000M = 40.0 + 5000 / 111_194.9266

HEADER = "s_id,cname1,cname2,family,genus,species,cultivar,lon,lat,accession,height"

SAMPLE_CSV = "\n".join(
    [
        HEADER,
        f"P1,Red Maple,Swamp Maple,Sapindaceae,Acer,rubrum,,-75.0,{LAT_50M},A1,12",
        f"P2,White Oak,,Fagaceae,Quercus,alba,,-75.0,{LAT_5000M},A2,20",
        f"P3,Sweetgum,,Altingiaceae,Liquidambar,styraciflua,,-75.0,{LAT_200M},A3,",
        # No id
        ",Nameless,,,Acer,,,-75.0,40.0,,",
        # No coordinates
        "P4,Lost Tree,,,Acer,,,,,,",
        # Short row
        "P5,Stub",
        "",
    ]
)


@pytest.fixture()
def here() -> GeoPoint:
    """Reference position the sample plants are measured from."""
    return HERE


@pytest.fixture()
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def csv_file(tmp_path: Path) -> Path:
    """Write the sample data to disk, CRLF line endings like a spreadsheet export."""
    path = tmp_path / "ABG.csv"
    path.write_bytes(SAMPLE_CSV.replace("\n", "\r\n").encode("utf-8"))
    return path


@pytest.fixture()
def settings(csv_file: Path) -> Settings:
    return Settings(source=str(csv_file), radius_m=1000, limit=10)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def client(settings: Settings, sink: RecordingSink):
    """Create a NearbyPlants session reading the sample file."""
    from nearplants import NearbyPlants

    c = NearbyPlants(settings, sink)
    yield c
    c.close()
