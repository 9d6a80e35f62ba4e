"""Runtime settings, read from the environment by the CLI."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from nearplants.exceptions import ConfigInvalid

T = TypeVar("T")

DEFAULT_RADIUS_M = 100.0
DEFAULT_LIMIT = 10
DEFAULT_REFRESH_INTERVAL_MS = 10_000


@dataclass(frozen=True)
class Settings:
    """Everything a NearbyPlants session needs to know up front."""

    source: str = "ABG.csv"
    radius_m: float = DEFAULT_RADIUS_M
    limit: int = DEFAULT_LIMIT
    refresh_interval_ms: float = DEFAULT_REFRESH_INTERVAL_MS
    delimiter: str = ","
    palette_seed: Optional[int] = None

    def __post_init__(self):
        # nan compares False against everything, so check it explicitly
        if math.isnan(self.radius_m) or self.radius_m < 0:
            raise ConfigInvalid("radius_m", self.radius_m)
        if (
            not isinstance(self.limit, int)
            or isinstance(self.limit, bool)
            or self.limit < 0
        ):
            raise ConfigInvalid("limit", self.limit)
        if (
            not math.isfinite(self.refresh_interval_ms)
            or self.refresh_interval_ms < 0
        ):
            raise ConfigInvalid("refresh_interval_ms", self.refresh_interval_ms)
        if not self.delimiter:
            raise ConfigInvalid("delimiter", self.delimiter)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from NEARPLANTS_* environment variables.

        Unset variables keep their defaults. Raises ConfigInvalid if a
        set variable cannot be converted.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            source=env.get("NEARPLANTS_SOURCE", defaults.source),
            radius_m=_get(env, "NEARPLANTS_RADIUS_M", float, defaults.radius_m),
            limit=_get(env, "NEARPLANTS_LIMIT", int, defaults.limit),
            refresh_interval_ms=_get(
                env,
                "NEARPLANTS_REFRESH_INTERVAL_MS",
                float,
                defaults.refresh_interval_ms,
            ),
            delimiter=env.get("NEARPLANTS_DELIMITER", defaults.delimiter),
            palette_seed=_get(env, "NEARPLANTS_PALETTE_SEED", int, None),
        )


def _get(
    env: Mapping[str, str],
    name: str,
    convert: Callable[[str], T],
    default: Optional[T],
) -> Optional[T]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ConfigInvalid(name, raw) from None
