from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vector = Tuple[int, int, int]


@dataclass(frozen=True)
class Brick:
    """One placed brick as read from a save.

    ``size`` is the half-extent on each axis, in world units.
    """

    asset: str
    position: Vector
    size: Vector = (5, 5, 6)
    direction: int = 4
    rotation: int = 0
    collision: bool = True
    components: int = 0

    @property
    def bottom(self) -> int:
        return self.position[2] - abs(self.size[2])

    @property
    def top(self) -> int:
        return self.position[2] + abs(self.size[2])
