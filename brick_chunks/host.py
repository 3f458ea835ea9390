"""Interface of the game host the command layer talks to.

The host owns command dispatch, chat and the world itself. Anything it
needs to await (saving the world, looking up a player) happens before it
calls into ``commands.dispatch``; these methods are expected to return
already-resolved values.
"""

from __future__ import annotations

from typing import Hashable, Optional, Protocol, Sequence, Tuple

from .bricks import Brick

Color = Tuple[int, int, int, int]
Position = Tuple[float, float, float]


class Host(Protocol):
    def get_save_bricks(self) -> Sequence[Brick]: ...

    def get_player_position(self, player: str) -> Optional[Position]: ...

    def spawn_marker(self, position: Tuple[int, int, int], color: Color) -> Hashable: ...

    def despawn_marker(self, marker_id: Hashable) -> None: ...

    def whisper(self, player: str, message: str) -> None: ...
