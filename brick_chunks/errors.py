from __future__ import annotations


class ChunksError(RuntimeError):
    """Raised when a chunk command cannot be completed."""


class NotAnalyzed(ChunksError):
    def __init__(self) -> None:
        super().__init__("The save has not been analyzed! Analyze it first with /chunks analyze.")


class NoSuchPlayer(ChunksError):
    def __init__(self, player: str) -> None:
        super().__init__(f"Could not find a position for player {player}.")
        self.player = player


class NotAuthorized(ChunksError):
    def __init__(self, player: str) -> None:
        super().__init__("You are not authorized to use this command!")
        self.player = player


class SaveError(ChunksError):
    """Raised when a save dump cannot be read or validated."""
