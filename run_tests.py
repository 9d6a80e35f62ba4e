"""
Minimal test runner using only the standard library.
Run: python3 run_tests.py

Needs the runtime dependencies (loguru, requests) but not pytest.
"""

import sys
import tempfile
import unittest
from pathlib import Path

# Add src to path so nearplants is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

# Due north of (40, -75): 50 m, 5000 m and 200 m away
_M_PER_DEG = 111_194.9266
SAMPLE_CSV = "\n".join(
    [
        "s_id,cname1,cname2,family,genus,species,cultivar,lon,lat,accession,height",
        f"P1,Red Maple,Swamp Maple,Sapindaceae,Acer,rubrum,,-75.0,{40 + 50 / _M_PER_DEG},,12",
        f"P2,White Oak,,Fagaceae,Quercus,alba,,-75.0,{40 + 5000 / _M_PER_DEG},,20",
        f"P3,Sweetgum,,Altingiaceae,Liquidambar,styraciflua,,-75.0,{40 + 200 / _M_PER_DEG},,",
        ",Nameless,,,Acer,,,-75.0,40.0,,",
        "P4,Lost Tree,,,Acer,,,,,,",
        "P5,Stub",
    ]
)


def make_csv(directory: str) -> Path:
    """Write the sample plant file into *directory*."""
    path = Path(directory) / "ABG.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


# ── Parser Tests ──────────────────────────────────────────────

class TestParser(unittest.TestCase):
    def test_keeps_locatable_rows(self):
        from nearplants.parser import parse
        self.assertEqual([r.id for r in parse(SAMPLE_CSV)], ["P1", "P2", "P3"])

    def test_header_skip(self):
        from nearplants.parser import parse
        records = parse("h1,h2\nA,Name,,,Genus,Species,,-75.0,40.0,,\n")
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].id, "A")

    def test_short_row_padded(self):
        from nearplants.parser import parse_row
        rec = parse_row("A,B,C")
        self.assertEqual(rec.genus, "Unknown")
        self.assertEqual(rec.latitude, 0.0)


# ── Distance Tests ────────────────────────────────────────────

class TestHaversine(unittest.TestCase):
    def test_zero_and_symmetry(self):
        from nearplants.geo import haversine_m
        from nearplants.models import GeoPoint
        a, b = GeoPoint(40.0, -75.0), GeoPoint(51.5, -0.12)
        self.assertEqual(haversine_m(a, a), 0.0)
        self.assertAlmostEqual(haversine_m(a, b), haversine_m(b, a), places=6)


# ── Selector Tests ────────────────────────────────────────────

class TestSelect(unittest.TestCase):
    def test_end_to_end(self):
        from nearplants.models import GeoPoint
        from nearplants.parser import parse
        from nearplants.selector import select
        result = select(GeoPoint(40.0, -75.0), parse(SAMPLE_CSV), 1000, 2)
        self.assertEqual([r.id for r in result], ["P1", "P3"])
        self.assertAlmostEqual(result[0].distance_m, 50, places=2)
        self.assertAlmostEqual(result[1].distance_m, 200, places=2)


# ── Throttle Tests ────────────────────────────────────────────

class TestThrottle(unittest.TestCase):
    def test_scenario(self):
        from nearplants.throttle import refresh_due
        self.assertTrue(refresh_due(0, None, 10_000))
        self.assertFalse(refresh_due(5000, 1000, 10_000))
        self.assertTrue(refresh_due(11_001, 1000, 10_000))


# ── Client Tests ──────────────────────────────────────────────

class TestClient(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._tmpdir = tempfile.mkdtemp()
        cls.csv = make_csv(cls._tmpdir)

    def _make_client(self, sink):
        from nearplants import NearbyPlants, Settings
        settings = Settings(source=str(self.csv), radius_m=1000, limit=10)
        return NearbyPlants(settings, sink)

    def test_refresh_and_throttle(self):
        from nearplants import RecordingSink
        sink = RecordingSink()
        with self._make_client(sink) as client:
            diff = client.on_position(40.0, -75.0, now_ms=1000)
            self.assertEqual(diff.ids, ["P1", "P3"])
            self.assertIsNone(client.on_position(40.0, -75.0, now_ms=5000))
        self.assertEqual(set(sink.markers), {"P1", "P3"})

    def test_missing_source(self):
        from nearplants import NearbyPlants, RecordingSink, Settings
        sink = RecordingSink()
        settings = Settings(source=str(Path(self._tmpdir) / "missing.csv"))
        with NearbyPlants(settings, sink) as client:
            self.assertIsNone(client.on_position(40.0, -75.0, now_ms=0))
        self.assertEqual(sink.markers, {})


if __name__ == "__main__":
    unittest.main(verbosity=2)
