from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthUser(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    id: Optional[str] = None


class PluginConfig(BaseModel):
    """Configuration object handed over by the host when the plugin starts."""

    model_config = ConfigDict(extra="ignore")

    authorized: list[AuthUser] = Field(default_factory=list)
    world_min_z: int = 0
    world_max_z: int = 512
    report_limit: int = Field(default=5, ge=0)

    @field_validator("world_max_z")
    @classmethod
    def validate_world_height(cls, value: int, info) -> int:
        low = info.data.get("world_min_z", 0)
        if value <= low:
            raise ValueError("world_max_z must be greater than world_min_z")
        return value


class SaveBrickModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    asset_name_index: int = Field(default=0, ge=0)
    position: tuple[int, int, int]
    size: tuple[int, int, int] = (5, 5, 6)
    direction: int = 4
    rotation: int = 0
    collision: bool = True
    components: int | dict = 0

    @field_validator("collision", mode="before")
    @classmethod
    def validate_collision(cls, value):
        # Saves store per-channel flags; any enabled channel means the brick collides.
        if isinstance(value, dict):
            return any(bool(flag) for flag in value.values())
        return value

    @property
    def component_count(self) -> int:
        if isinstance(self.components, dict):
            return len(self.components)
        return max(0, int(self.components))


class SaveDumpModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    brick_assets: list[str] = Field(default_factory=lambda: ["PB_DefaultBrick"])
    bricks: list[SaveBrickModel] = Field(default_factory=list)
