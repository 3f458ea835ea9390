from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from brick_chunks.bricks import Brick  # noqa: E402
from brick_chunks.commands import ChunkSession  # noqa: E402
from brick_chunks.settings import Settings  # noqa: E402


class FakeHost:
    def __init__(self, bricks=None):
        self.bricks = list(bricks or [])
        self.positions = {}
        self.spawned = {}
        self.despawned = []
        self.whispers = []
        self._ids = itertools.count(1)

    def get_save_bricks(self):
        return list(self.bricks)

    def get_player_position(self, player):
        return self.positions.get(player)

    def spawn_marker(self, position, color):
        marker_id = f"marker-{next(self._ids)}"
        self.spawned[marker_id] = (position, color)
        return marker_id

    def despawn_marker(self, marker_id):
        self.despawned.append(marker_id)
        self.spawned.pop(marker_id, None)

    def whisper(self, player, message):
        self.whispers.append((player, message))


def make_brick(x=0, y=0, z=6, asset="PB_DefaultBrick", **kwargs) -> Brick:
    return Brick(asset=asset, position=(x, y, z), **kwargs)


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def session() -> ChunkSession:
    return ChunkSession(Settings())


@pytest.fixture()
def scenario_bricks() -> list[Brick]:
    return [
        make_brick(10, 10),
        make_brick(500, 20),
        make_brick(600, 100, asset="PB_DefaultWedge"),
    ]
