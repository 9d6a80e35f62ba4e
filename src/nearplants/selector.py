"""Nearest-record selection around a reference point."""

from __future__ import annotations

import math
from typing import Iterable

from loguru import logger

from nearplants.exceptions import SelectionInvalid
from nearplants.geo import haversine_m
from nearplants.models import GeoPoint, PlantRecord, RankedRecord


def rank(
    reference: GeoPoint, records: Iterable[PlantRecord]
) -> list[RankedRecord]:
    """Pair every record with its distance from *reference*, input order kept."""
    return [
        RankedRecord(record=r, distance_m=haversine_m(reference, r.position))
        for r in records
    ]


def select(
    reference: GeoPoint,
    records: Iterable[PlantRecord],
    radius_m: float,
    limit: int,
) -> list[RankedRecord]:
    """
    Return the records within *radius_m* of *reference*, nearest first.

    At most *limit* records are returned. Equal distances keep their
    input order. Raises SelectionInvalid for a negative radius or limit.
    """
    if math.isnan(radius_m) or radius_m < 0:
        raise SelectionInvalid(f"radius must be a non-negative number: {radius_m}")
    if limit < 0:
        raise SelectionInvalid(f"limit must not be negative: {limit}")

    in_range = [r for r in rank(reference, records) if r.distance_m <= radius_m]
    # list.sort is stable
    in_range.sort(key=lambda r: r.distance_m)
    logger.debug(
        f"{len(in_range)} records within {radius_m} m, keeping {limit}"
    )
    return in_range[:limit]
