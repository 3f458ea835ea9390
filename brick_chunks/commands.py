"""The ``/chunks`` command surface.

Handlers are plain request/response functions: they take inputs the host
has already fetched (a brick list, a player position) and return a
``CommandReply`` or raise ``ChunksError``. ``dispatch`` is the only place
that talks to the host and the only place errors turn into chat text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Hashable, List, Optional, Sequence

from .analyzer import COLLIDER_LIMIT, COMPONENT_LIMIT, AnalysisResult, analyze
from .bricks import Brick
from .cache import AnalysisCache
from .errors import ChunksError, NoSuchPlayer, NotAuthorized
from .geometry import chunk_of, format_chunk
from .host import Color, Host, Position
from .markers import ChunkMarkerPlan, MarkerPlanner
from .settings import Settings

LOG = logging.getLogger(__name__)

SpawnFn = Callable[[tuple, Color], Hashable]
DespawnFn = Callable[[Hashable], None]

SUBCOMMANDS = {
    "in": "Show the chunk you are standing in.",
    "analyze": "Save the world and count bricks and colliders per chunk.",
    "count": "Show bricks, colliders and components in your chunk.",
    "mark": "Mark the corners of your chunk.",
    "markall": "Mark every chunk that has bricks.",
    "clear": "Remove all chunk markers.",
    "help": "List the available subcommands.",
}

_OK = "0a0"
_ERR = "a00"


def ok_text(text: str) -> str:
    return f'<color="{_OK}">{text}</>'


def error_text(text: str) -> str:
    return f'<color="{_ERR}">{text}</>'


@dataclass
class CommandReply:
    lines: List[str] = field(default_factory=list)
    ok: bool = True

    @classmethod
    def error(cls, message: str) -> "CommandReply":
        return cls(lines=[error_text(message)], ok=False)


class ChunkSession:
    """Process-wide state of the plugin: the last analysis and the placed markers."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.cache = AnalysisCache()
        self.planner = MarkerPlanner(self.settings)


def report_lines(result: AnalysisResult, limit: int = 5) -> List[str]:
    if result.is_empty:
        return ["The save has no bricks."]

    lines = [
        f"<b>{result.total_bricks} bricks</> in <b>{len(result.chunks)} chunks</>, "
        f"<b>{result.total_colliders} colliders</> total."
    ]
    overloaded = result.overloaded()
    if overloaded:
        lines.append(error_text(f"{len(overloaded)} chunk(s) are at or over the {COLLIDER_LIMIT} collider limit:"))
        for chunk, stats in overloaded[:limit]:
            lines.append(f"  {format_chunk(chunk)}: {stats.collider_count} colliders, {stats.brick_count} bricks")
    else:
        lines.append(ok_text(f"No chunk reaches the {COLLIDER_LIMIT} collider limit."))
        for chunk, stats in result.busiest(limit):
            lines.append(f"  {format_chunk(chunk)}: {stats.collider_count} colliders, {stats.brick_count} bricks")

    heavy = [chunk for chunk, stats in result.chunks.items() if stats.over_component_limit]
    if heavy:
        lines.append(f"{len(heavy)} chunk(s) have more than {COMPONENT_LIMIT} components.")

    if result.unknown_assets:
        names = ", ".join(sorted(result.unknown_assets))
        lines.append(f"Unknown brick assets counted as 1 collider: {names}")
    return lines


def cmd_in(position: Position) -> CommandReply:
    return CommandReply(lines=[f"You are in chunk {format_chunk(chunk_of(position))}."])


def cmd_analyze(session: ChunkSession, bricks: Sequence[Brick]) -> CommandReply:
    result = analyze(bricks)
    session.cache.set(result)
    if result.is_empty:
        return CommandReply(lines=[ok_text("The save has been analyzed, but it has no bricks.")])
    lines = [ok_text("The save has been analyzed. Any subsequent changes must be reanalyzed.")]
    lines.extend(report_lines(result, session.settings.report_limit))
    return CommandReply(lines=lines)


def cmd_count(session: ChunkSession, position: Position) -> CommandReply:
    result = session.cache.require()
    chunk = chunk_of(position)
    stats = result.stats_for(chunk)
    if stats.brick_count == 0:
        return CommandReply.error(f"The chunk {format_chunk(chunk)} has no bricks or colliders!")

    collider_color = _ERR if stats.over_collider_limit else _OK
    component_color = _ERR if stats.over_component_limit else _OK
    return CommandReply(
        lines=[
            f"There are <b>{stats.brick_count} bricks</>, "
            f'<b><color="{collider_color}">{stats.collider_count} colliders</></>, and '
            f'<b><color="{component_color}">{stats.component_count} components</></> '
            f"in the chunk {format_chunk(chunk)}."
        ]
    )


def _place(session: ChunkSession, plan: ChunkMarkerPlan, spawn: SpawnFn) -> int:
    placed = 0
    for position, color in plan.markers:
        session.planner.record(plan, [spawn(position, color)])
        placed += 1
    return placed


def cmd_mark(session: ChunkSession, position: Position, spawn: SpawnFn) -> CommandReply:
    result = session.cache.require()
    chunk = chunk_of(position)
    plan = session.planner.plan_for(chunk, result.stats_for(chunk))
    _place(session, plan, spawn)
    LOG.info("Marked chunk %s as %s", chunk, plan.severity.value)
    return CommandReply(lines=[ok_text(f"Your chunk {format_chunk(chunk)} has been marked ({plan.severity.value}).")])


def cmd_markall(session: ChunkSession, spawn: SpawnFn) -> CommandReply:
    result = session.cache.require()
    plans = session.planner.plan_all(result)
    placed = sum(_place(session, plan, spawn) for plan in plans)
    LOG.info("Marked %d chunk(s) with %d marker(s)", len(plans), placed)
    return CommandReply(lines=[ok_text(f"All {len(plans)} chunk(s) have been marked.")])


def cmd_clear(session: ChunkSession, despawn: DespawnFn) -> CommandReply:
    chunks = len(session.planner.markers.chunks())
    ids = session.planner.clear_all(despawn)
    LOG.info("Cleared %d marker(s) from %d chunk(s)", len(ids), chunks)
    if not ids:
        return CommandReply(lines=[ok_text("There are no chunk markers to clear.")])
    return CommandReply(lines=[ok_text(f"Cleared {len(ids)} marker(s) from {chunks} chunk(s).")])


def cmd_help() -> CommandReply:
    lines = ["Usage: /chunks <subcommand>"]
    lines.extend(f"  <b>{name}</> - {text}" for name, text in SUBCOMMANDS.items())
    return CommandReply(lines=lines)


def _player_position(host: Host, player: str) -> Position:
    position = host.get_player_position(player)
    if position is None:
        raise NoSuchPlayer(player)
    return position


def _route(session: ChunkSession, host: Host, player: str, command: str) -> CommandReply:
    if command == "in":
        return cmd_in(_player_position(host, player))
    if command == "analyze":
        return cmd_analyze(session, host.get_save_bricks())
    if command == "count":
        session.cache.require()
        return cmd_count(session, _player_position(host, player))
    if command == "mark":
        session.cache.require()
        return cmd_mark(session, _player_position(host, player), host.spawn_marker)
    if command == "markall":
        return cmd_markall(session, host.spawn_marker)
    if command == "clear":
        return cmd_clear(session, host.despawn_marker)
    if command == "help":
        return cmd_help()
    return CommandReply.error(f"Unknown subcommand {command}. Try /chunks help.")


def dispatch(session: ChunkSession, host: Host, player: str, args: Sequence[str]) -> CommandReply:
    command = args[0].strip().lower() if args else "help"
    try:
        if not session.settings.is_authorized(player):
            raise NotAuthorized(player)
        reply = _route(session, host, player, command)
    except ChunksError as exc:
        LOG.info("chunks %s by %s failed: %s", command, player, exc)
        reply = CommandReply.error(str(exc))
    except Exception as exc:  # noqa: BLE001
        LOG.exception("chunks %s by %s failed in the host", command, player)
        reply = CommandReply.error(f"The command failed: {exc}")

    for line in reply.lines:
        host.whisper(player, line)
    return reply
