"""NearbyPlants session: the main entry point for the library."""

from __future__ import annotations

import time
from typing import Callable, Optional

import requests
from loguru import logger

from nearplants import parser, selector
from nearplants.colors import SpeciesPalette
from nearplants.config import Settings
from nearplants.exceptions import SourceUnavailable
from nearplants.models import GeoPoint, MarkerDiff, PlantRecord, RankedRecord
from nearplants.reconcile import Reconciler
from nearplants.sink import MarkerSink
from nearplants.source import load_text
from nearplants.throttle import RefreshThrottle

SourceLoader = Callable[..., str]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class NearbyPlants:
    """
    Turns a stream of position updates into marker changes for a sink.

    Every update moves the user's own marker. At most once per refresh
    interval the plant data is fetched and parsed again, the nearest
    records are selected and the sink is told which markers to add,
    move or remove.
    """

    def __init__(
        self,
        settings: Settings,
        sink: MarkerSink,
        source_loader: SourceLoader = load_text,
        clock: Optional[Callable[[], float]] = None,
        palette: Optional[SpeciesPalette] = None,
    ):
        self.settings = settings
        self._sink = sink
        self._load = source_loader
        self._clock = clock or _monotonic_ms
        self._palette = palette or SpeciesPalette(seed=settings.palette_seed)
        self._throttle = RefreshThrottle(settings.refresh_interval_ms)
        self._reconciler = Reconciler()
        self._session: Optional[requests.Session] = requests.Session()

    # ── Public API ────────────────────────────────────────────────

    @property
    def palette(self) -> SpeciesPalette:
        return self._palette

    @property
    def displayed(self) -> list[str]:
        """Ids of the plant markers the sink is currently showing."""
        return self._reconciler.displayed

    def on_position(
        self, latitude: float, longitude: float, now_ms: Optional[float] = None
    ) -> Optional[MarkerDiff]:
        """
        Handle a position update.

        Returns the applied MarkerDiff, or None if the refresh was
        throttled or the plant data could not be loaded. Load failures
        are logged and leave the displayed markers untouched.
        """
        here = GeoPoint(latitude, longitude)
        self._sink.show_user(here)

        now = self._clock() if now_ms is None else now_ms
        if not self._throttle.due(now):
            return None
        self._throttle.mark(now)

        try:
            return self.refresh(here)
        except SourceUnavailable as exc:
            logger.error(f"Refresh skipped: {exc}")
            return None

    def refresh(self, reference: GeoPoint) -> MarkerDiff:
        """
        Reload the plant data and push the changes around *reference*.

        Raises SourceUnavailable if the data cannot be loaded; the sink
        is not touched in that case.
        """
        logger.info(
            f"Refreshing plants around "
            f"{reference.latitude:.6f}, {reference.longitude:.6f}"
        )
        ranked = self.nearest(reference)
        diff = self._reconciler.reconcile(ranked, self._palette)
        self._apply(diff)
        return diff

    def nearest(self, reference: GeoPoint) -> list[RankedRecord]:
        """Load, parse and select without touching the sink."""
        records = self._load_records()
        return selector.select(
            reference, records, self.settings.radius_m, self.settings.limit
        )

    def close(self) -> None:
        """Close the HTTP session, if one is open."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> NearbyPlants:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Private helpers ───────────────────────────────────────────

    def _load_records(self) -> list[PlantRecord]:
        raw = self._load(self.settings.source, session=self._session)
        return parser.parse(raw, self.settings.delimiter)

    def _apply(self, diff: MarkerDiff) -> None:
        for marker_id in diff.removed:
            self._sink.remove(marker_id)
        for marker in diff.added:
            self._sink.add(marker)
        for marker in diff.updated:
            self._sink.update(marker)
