"""Marker placement planning and bookkeeping.

A chunk is shown as eight glowing micro bricks at the corners of its
column, coloured by severity. The planner only decides where markers go
and remembers the ids the host hands back, so ``clear`` can remove
exactly what was placed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from .analyzer import COLLIDER_LIMIT, AnalysisResult, ChunkStats
from .geometry import ChunkCoord, Position, corners_of
from .settings import Settings

Color = Tuple[int, int, int, int]
MarkerId = Hashable

WHITE: Color = (255, 255, 255, 255)
GREEN: Color = (0, 255, 0, 255)
RED: Color = (255, 0, 0, 255)


class Severity(Enum):
    EMPTY = "empty"
    SAFE = "safe"
    OVERLOADED = "overloaded"

    @property
    def color(self) -> Color:
        return _COLORS[self]


_COLORS: Dict[Severity, Color] = {
    Severity.EMPTY: WHITE,
    Severity.SAFE: GREEN,
    Severity.OVERLOADED: RED,
}


def classify(stats: ChunkStats) -> Severity:
    if stats.brick_count == 0:
        return Severity.EMPTY
    if stats.collider_count >= COLLIDER_LIMIT:
        return Severity.OVERLOADED
    return Severity.SAFE


def z_bounds_for(stats: ChunkStats, settings: Settings) -> Tuple[int, int]:
    """Vertical span of a chunk's markers: the observed brick extent, or the world bounds when empty."""
    if stats.min_z is None or stats.max_z is None:
        return settings.world_min_z, settings.world_max_z
    return stats.min_z, stats.max_z


@dataclass(frozen=True)
class ChunkMarkerPlan:
    chunk: ChunkCoord
    severity: Severity
    markers: Tuple[Tuple[Position, Color], ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "chunk": list(self.chunk),
            "severity": self.severity.value,
            "markers": [{"position": list(pos), "color": list(color)} for pos, color in self.markers],
        }


def plan_markers_for(chunk: ChunkCoord, stats: ChunkStats, settings: Settings) -> ChunkMarkerPlan:
    severity = classify(stats)
    z_min, z_max = z_bounds_for(stats, settings)
    color = severity.color
    markers = tuple((corner, color) for corner in corners_of(chunk, z_min, z_max))
    return ChunkMarkerPlan(chunk=chunk, severity=severity, markers=markers)


def plan_all(result: AnalysisResult, settings: Settings) -> List[ChunkMarkerPlan]:
    return [
        plan_markers_for(chunk, stats, settings)
        for chunk, stats in sorted(result.chunks.items())
        if stats.brick_count > 0
    ]


class MarkerSet:
    def __init__(self) -> None:
        self._by_chunk: Dict[ChunkCoord, List[MarkerId]] = {}

    def track(self, chunk: ChunkCoord, ids: Iterable[MarkerId]) -> None:
        self._by_chunk.setdefault(chunk, []).extend(ids)

    def ids_for(self, chunk: ChunkCoord) -> List[MarkerId]:
        return list(self._by_chunk.get(chunk, ()))

    def chunks(self) -> List[ChunkCoord]:
        return list(self._by_chunk)

    def discard(self, chunk: ChunkCoord, marker_id: MarkerId) -> None:
        ids = self._by_chunk.get(chunk)
        if not ids:
            return
        if marker_id in ids:
            ids.remove(marker_id)
        if not ids:
            del self._by_chunk[chunk]

    def __len__(self) -> int:
        return sum(len(ids) for ids in self._by_chunk.values())


class MarkerPlanner:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.markers = MarkerSet()

    def plan_for(self, chunk: ChunkCoord, stats: ChunkStats) -> ChunkMarkerPlan:
        return plan_markers_for(chunk, stats, self.settings)

    def plan_all(self, result: AnalysisResult) -> List[ChunkMarkerPlan]:
        return plan_all(result, self.settings)

    def record(self, plan: ChunkMarkerPlan, ids: Iterable[MarkerId]) -> None:
        self.markers.track(plan.chunk, ids)

    def clear_all(self, despawn: Optional[Callable[[MarkerId], None]] = None) -> List[MarkerId]:
        """Forget every tracked marker and return the removed ids.

        Each id is passed to ``despawn`` first and forgotten only once that
        returns, so markers the host failed to remove stay tracked.
        """
        removed: List[MarkerId] = []
        for chunk in self.markers.chunks():
            for marker_id in self.markers.ids_for(chunk):
                if despawn is not None:
                    despawn(marker_id)
                self.markers.discard(chunk, marker_id)
                removed.append(marker_id)
        return removed

    @property
    def has_markers(self) -> bool:
        return len(self.markers) > 0
