"""
Classic Pong display configuration with Pydantic validation
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


class GameConfig(BaseModel):
    """Surface, timing and appearance settings.

    Game rules (speeds, winning score) are fixed on the entities and the
    match module, they are not part of the configuration.
    """

    model_config = {"validate_assignment": True}

    # Drawing surface
    SURFACE_WIDTH: int = Field(default=800, gt=0, description="Surface width in pixels")
    SURFACE_HEIGHT: int = Field(default=800, gt=0, description="Surface height in pixels")
    WINDOW_TITLE: str = Field(default="Pong", description="Window caption")

    # Frame loop
    FPS: int = Field(default=60, gt=0, le=240, description="Frames per second")

    # Colors
    BACKGROUND_COLOR: RGB = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: RGB = Field(default=(255, 255, 255), description="RGB color")

    # Text
    SCORE_FONT_SIZE: int = Field(default=100, gt=0, description="Score font size")
    BANNER_FONT_SIZE: int = Field(default=80, gt=0, description="Winner banner font size")
    PROMPT_FONT_SIZE: int = Field(default=40, gt=0, description="Restart prompt font size")

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: RGB) -> RGB:
        """Validate that every channel is in 0..255"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be between 0 and 255, got {v}")
        return v

    @model_validator(mode="after")
    def validate_surface_dimensions(self) -> "GameConfig":
        """Validate the surface is large enough for the derived entity sizes"""
        # Ball radius is width / 32 and paddle height is height / 16
        min_size = 64
        if self.SURFACE_WIDTH < min_size:
            raise ValueError(f"SURFACE_WIDTH must be at least {min_size} pixels")
        if self.SURFACE_HEIGHT < min_size:
            raise ValueError(f"SURFACE_HEIGHT must be at least {min_size} pixels")
        return self

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "classic_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", filepath)
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # Validated as a whole above, so field-by-field assignment cannot fail
    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded config from %s", filepath)
    return True

