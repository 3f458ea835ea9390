"""Read bricks from a JSON dump of a save.

The dump mirrors the save layout: a ``brick_assets`` table and a list of
``bricks`` that point into it by ``asset_name_index``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from pydantic import ValidationError

from .bricks import Brick
from .errors import SaveError
from .models import SaveDumpModel

LOG = logging.getLogger(__name__)


def parse_save(payload: Mapping[str, Any]) -> List[Brick]:
    try:
        dump = SaveDumpModel.model_validate(payload)
    except ValidationError as exc:
        raise SaveError(f"Invalid save data: {exc}") from exc

    assets = dump.brick_assets
    bricks: List[Brick] = []
    for index, entry in enumerate(dump.bricks):
        if entry.asset_name_index >= len(assets):
            raise SaveError(
                f"Brick {index} references asset index {entry.asset_name_index} "
                f"but the save only has {len(assets)} asset(s)"
            )
        bricks.append(
            Brick(
                asset=assets[entry.asset_name_index],
                position=entry.position,
                size=entry.size,
                direction=entry.direction,
                rotation=entry.rotation,
                collision=entry.collision,
                components=entry.component_count,
            )
        )
    return bricks


def load_save(path: Path) -> List[Brick]:
    if not path.exists():
        raise SaveError(f"Save file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SaveError(f"Failed to read save file {path}: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SaveError(f"Failed to parse save file: {exc}") from exc

    if not isinstance(payload, dict):
        raise SaveError("Save file must contain a JSON object")

    bricks = parse_save(payload)
    LOG.info("Loaded %d brick(s) from %s", len(bricks), path)
    return bricks
