"""Mapping between world positions and the chunk grid.

Chunks are vertical columns: only X and Y (the horizontal axes, Z is up)
take part in the grid, so a chunk spans every height at its (cx, cy).
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

CHUNK_SIZE = 512
MARKER_INSET = 1

ChunkCoord = Tuple[int, int]
Position = Tuple[int, int, int]


def chunk_of(position: Sequence[float]) -> ChunkCoord:
    return math.floor(position[0] / CHUNK_SIZE), math.floor(position[1] / CHUNK_SIZE)


def chunk_bounds(chunk: ChunkCoord) -> Tuple[int, int, int, int]:
    """Return (min_x, min_y, max_x, max_y); the max edge belongs to the next chunk."""
    cx, cy = chunk
    return cx * CHUNK_SIZE, cy * CHUNK_SIZE, (cx + 1) * CHUNK_SIZE, (cy + 1) * CHUNK_SIZE


def chunk_center(chunk: ChunkCoord) -> Tuple[int, int]:
    cx, cy = chunk
    return cx * CHUNK_SIZE + CHUNK_SIZE // 2, cy * CHUNK_SIZE + CHUNK_SIZE // 2


def corners_of(chunk: ChunkCoord, z_min: int, z_max: int) -> List[Position]:
    """Eight corners of the column between z_min and z_max.

    Corners sit MARKER_INSET inside the chunk so markers of neighbouring
    chunks never share a position. Bottom four first, then the top four.
    """
    if z_max < z_min:
        z_min, z_max = z_max, z_min
    x1, y1, x2, y2 = chunk_bounds(chunk)
    x1 += MARKER_INSET
    y1 += MARKER_INSET
    x2 -= MARKER_INSET
    y2 -= MARKER_INSET
    corners: List[Position] = []
    for z in (z_min, z_max):
        corners.append((x1, y1, z))
        corners.append((x2, y1, z))
        corners.append((x1, y2, z))
        corners.append((x2, y2, z))
    return corners


def format_chunk(chunk: ChunkCoord) -> str:
    return f"({chunk[0]}, {chunk[1]})"
