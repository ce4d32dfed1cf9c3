"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups use a double underscore, e.g. ROULETTE_BOARD__DEAD_ZONE_RADIUS=120.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from roulette_disk.animation.spin import SpinPolicy


class BoardSettings(BaseModel):
    """Board and disk geometry."""

    size: int = Field(default=600, gt=0)

    # Used for the procedural wheel; a disk image brings its own size
    disk_diameter: int = Field(default=380, gt=0)

    # Releases closer than this to the centre are ignored
    dead_zone_radius: float = Field(default=90.0, ge=0.0)

    disk_image: Optional[Path] = None


class DisplaySettings(BaseModel):
    """Window and redraw settings."""

    title: str = "Roulette"
    tick_ms: float = Field(default=20.0, gt=0.0)

    # Colors
    bg_color: tuple[int, int, int] = (0, 0, 0)
    number_color: tuple[int, int, int] = (255, 200, 0)
    subtitle_color: tuple[int, int, int] = (255, 255, 255)
    marker_color: tuple[int, int, int] = (255, 200, 0)

    number_font_size: int = 60
    subtitle_font_size: int = 17


class SpinSettings(BaseModel):
    """Spin animation settings."""

    policy: SpinPolicy = SpinPolicy.REPLACE


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROULETTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Nested settings
    board: BoardSettings = Field(default_factory=BoardSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    spin: SpinSettings = Field(default_factory=SpinSettings)

    @property
    def fps(self) -> float:
        """Redraw rate implied by the tick interval."""
        return 1000.0 / self.display.tick_ms


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
