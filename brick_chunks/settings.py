from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import ValidationError

from .errors import ChunksError
from .models import PluginConfig

LOG = logging.getLogger(__name__)

ENV_PREFIX = "BRICK_CHUNKS_"


def _parse_names(raw: str) -> frozenset[str]:
    names: set[str] = set()
    for part in (raw or "").replace(";", ",").split(","):
        part = part.strip()
        if part:
            names.add(part.casefold())
    return frozenset(names)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise SystemExit(f"Invalid {ENV_PREFIX}{name}: {raw}") from exc


@dataclass(frozen=True)
class Settings:
    authorized: frozenset[str] = field(default_factory=frozenset)
    world_min_z: int = 0
    world_max_z: int = 512
    report_limit: int = 5

    @classmethod
    def from_env(cls) -> "Settings":
        world_min_z = _env_int("WORLD_MIN_Z", 0)
        world_max_z = _env_int("WORLD_MAX_Z", 512)
        if world_max_z <= world_min_z:
            raise SystemExit(
                f"{ENV_PREFIX}WORLD_MAX_Z ({world_max_z}) must be greater than {ENV_PREFIX}WORLD_MIN_Z ({world_min_z})"
            )
        return cls(
            authorized=_parse_names(os.getenv(ENV_PREFIX + "AUTHORIZED", "")),
            world_min_z=world_min_z,
            world_max_z=world_max_z,
            report_limit=max(0, _env_int("REPORT_LIMIT", 5)),
        )

    @classmethod
    def from_plugin_config(cls, payload: Mapping[str, Any]) -> "Settings":
        try:
            config = PluginConfig.model_validate(payload or {})
        except ValidationError as exc:
            raise ChunksError(f"Invalid plugin config: {exc}") from exc
        LOG.info("Loaded plugin config with %d authorized user(s)", len(config.authorized))
        return cls(
            authorized=frozenset(user.name.casefold() for user in config.authorized),
            world_min_z=config.world_min_z,
            world_max_z=config.world_max_z,
            report_limit=config.report_limit,
        )

    def is_authorized(self, player: str) -> bool:
        if not self.authorized:
            return True
        return player.casefold() in self.authorized
