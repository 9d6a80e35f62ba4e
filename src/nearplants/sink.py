"""The interface a rendering layer implements to receive markers."""

from __future__ import annotations

from typing import Protocol

from nearplants.models import GeoPoint, Marker


class MarkerSink(Protocol):
    """Receives marker changes; drawing them is entirely up to the sink."""

    def show_user(self, point: GeoPoint) -> None: ...

    def add(self, marker: Marker) -> None: ...

    def update(self, marker: Marker) -> None: ...

    def remove(self, marker_id: str) -> None: ...


class RecordingSink:
    """In-memory sink that keeps the current markers and a call log."""

    def __init__(self):
        self.user: GeoPoint | None = None
        self.markers: dict[str, Marker] = {}
        self.calls: list[tuple[str, str]] = []

    def show_user(self, point: GeoPoint) -> None:
        self.user = point
        self.calls.append(("user", f"{point.latitude},{point.longitude}"))

    def add(self, marker: Marker) -> None:
        self.markers[marker.id] = marker
        self.calls.append(("add", marker.id))

    def update(self, marker: Marker) -> None:
        self.markers[marker.id] = marker
        self.calls.append(("update", marker.id))

    def remove(self, marker_id: str) -> None:
        self.markers.pop(marker_id, None)
        self.calls.append(("remove", marker_id))
