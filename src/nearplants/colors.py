"""Species to display color assignment."""

from __future__ import annotations

import random
from typing import Optional, Sequence

PALETTE = [
    "#2A9D8F", "#E76F51", "#264653", "#F4A261", "#8AB17D",
    "#577590", "#FF9F1C", "#3D5A80", "#43AA8B", "#B56576",
]


class SpeciesPalette:
    """
    Explicit species -> color mapping, filled in as species are seen.

    Without a seed, colors come from a fixed palette in first-seen
    order and wrap around when it runs out. With a seed, each new
    species gets a pastel ``hsl()`` color whose hue is drawn from a
    generator seeded with it, so the same seed and order of species
    always yield the same colors.
    """

    def __init__(
        self,
        colors: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
    ):
        self._colors = list(colors) if colors else list(PALETTE)
        self._rng = random.Random(seed) if seed is not None else None
        self._assigned: dict[str, str] = {}

    def color_for(self, key: str) -> str:
        """Return the color for *key*, assigning a new one if needed."""
        color = self._assigned.get(key)
        if color is None:
            color = self._next_color()
            self._assigned[key] = color
        return color

    def assigned(self) -> dict[str, str]:
        """Copy of the mapping built so far."""
        return dict(self._assigned)

    def _next_color(self) -> str:
        if self._rng is not None:
            return f"hsl({self._rng.randrange(360)}, 70%, 60%)"
        return self._colors[len(self._assigned) % len(self._colors)]

    def __len__(self) -> int:
        return len(self._assigned)

    def __contains__(self, key: object) -> bool:
        return key in self._assigned
