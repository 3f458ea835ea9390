"""Single-pass aggregation of bricks into per-chunk collider counts."""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .bricks import Brick
from .colliders import collider_count, is_known_asset
from .geometry import ChunkCoord, chunk_of

LOG = logging.getLogger(__name__)

COLLIDER_LIMIT = 65_000
COMPONENT_LIMIT = 75


@dataclass
class ChunkStats:
    brick_count: int = 0
    collider_count: int = 0
    component_count: int = 0
    min_z: Optional[int] = None
    max_z: Optional[int] = None

    def add(self, brick: Brick, colliders: int) -> None:
        self.brick_count += 1
        self.collider_count += colliders
        self.component_count += brick.components
        bottom = brick.bottom
        top = brick.top
        if self.min_z is None or bottom < self.min_z:
            self.min_z = bottom
        if self.max_z is None or top > self.max_z:
            self.max_z = top

    @property
    def over_collider_limit(self) -> bool:
        return self.collider_count >= COLLIDER_LIMIT

    @property
    def over_component_limit(self) -> bool:
        return self.component_count > COMPONENT_LIMIT


@dataclass
class AnalysisResult:
    chunks: Dict[ChunkCoord, ChunkStats] = field(default_factory=dict)
    total_bricks: int = 0
    unknown_assets: Counter = field(default_factory=Counter)
    elapsed: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.total_bricks == 0

    @property
    def total_colliders(self) -> int:
        return sum(stats.collider_count for stats in self.chunks.values())

    @property
    def total_components(self) -> int:
        return sum(stats.component_count for stats in self.chunks.values())

    def stats_for(self, chunk: ChunkCoord) -> ChunkStats:
        stats = self.chunks.get(chunk)
        if stats is None:
            return ChunkStats()
        return stats

    def overloaded(self) -> List[Tuple[ChunkCoord, ChunkStats]]:
        items = [(chunk, stats) for chunk, stats in self.chunks.items() if stats.over_collider_limit]
        items.sort(key=lambda item: (-item[1].collider_count, item[0]))
        return items

    def busiest(self, limit: int) -> List[Tuple[ChunkCoord, ChunkStats]]:
        items = sorted(self.chunks.items(), key=lambda item: (-item[1].collider_count, item[0]))
        return items[: max(0, limit)]


def analyze(bricks: Iterable[Brick]) -> AnalysisResult:
    started = time.monotonic()
    chunks: Dict[ChunkCoord, ChunkStats] = {}
    unknown: Counter = Counter()
    total = 0

    for brick in bricks:
        chunk = chunk_of(brick.position)
        stats = chunks.get(chunk)
        if stats is None:
            stats = chunks[chunk] = ChunkStats()
        if not is_known_asset(brick.asset):
            if brick.asset not in unknown:
                LOG.warning("Unknown brick asset %r; counting it as 1 collider", brick.asset)
            unknown[brick.asset] += 1
        stats.add(brick, collider_count(brick))
        total += 1

    result = AnalysisResult(
        chunks=chunks,
        total_bricks=total,
        unknown_assets=unknown,
        elapsed=time.monotonic() - started,
    )
    LOG.info(
        "Analyzed %d brick(s) into %d chunk(s) in %.2fs (%d overloaded)",
        result.total_bricks,
        len(result.chunks),
        result.elapsed,
        len(result.overloaded()),
    )
    return result
