"""Diffing a fresh ranking against the markers already on display."""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from nearplants.colors import SpeciesPalette
from nearplants.models import Marker, MarkerDiff, RankedRecord


class Reconciler:
    """
    Tracks which record ids are displayed and works out, for each new
    ranking, which markers to add, move or remove. Ids are the only
    key; a record that keeps its id is updated in place.
    """

    def __init__(self):
        self._displayed: list[str] = []

    @property
    def displayed(self) -> list[str]:
        return list(self._displayed)

    def reconcile(
        self, ranked: Iterable[RankedRecord], palette: SpeciesPalette
    ) -> MarkerDiff:
        previous = set(self._displayed)
        added: list[Marker] = []
        updated: list[Marker] = []
        current: list[str] = []
        seen: set[str] = set()

        for r in ranked:
            if r.id in seen:
                # Duplicate id in the data file, first (nearest) wins
                continue
            marker = Marker.from_ranked(
                r, palette.color_for(r.record.species_key)
            )
            if r.id in previous:
                updated.append(marker)
            else:
                added.append(marker)
            current.append(r.id)
            seen.add(r.id)

        removed = tuple(i for i in self._displayed if i not in seen)
        self._displayed = current

        logger.debug(
            f"Reconciled markers: +{len(added)} ~{len(updated)} -{len(removed)}"
        )
        return MarkerDiff(
            added=tuple(added),
            updated=tuple(updated),
            removed=removed,
            shown=tuple(current),
        )

    def clear(self) -> None:
        self._displayed = []
