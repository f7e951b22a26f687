from __future__ import annotations

import random
from typing import Dict, Optional

HEX_DIGITS = "0123456789ABCDEF"


def random_color(rng: Optional[random.Random] = None) -> str:
    """Return a uniformly random ``#RRGGBB`` color."""
    rng = rng or random.Random()
    return "#" + "".join(rng.choice(HEX_DIGITS) for _ in range(6))


class ColorAssigner:
    """Lookup-or-create store mapping series names to display colors.

    A color is generated on the first request for a name and returned
    unchanged afterwards. One instance is owned by each view (a Streamlit
    session or an API app) and passed down to the dataset builder.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._colors: Dict[str, str] = {}

    def color_for(self, name: str) -> str:
        color = self._colors.get(name)
        if color is None:
            color = random_color(self._rng)
            self._colors[name] = color
        return color

    def as_dict(self) -> Dict[str, str]:
        return dict(self._colors)

    def clear(self) -> None:
        self._colors.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __len__(self) -> int:
        return len(self._colors)
