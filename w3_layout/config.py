"""
Configuration settings for the layout helpers.
Environment variables prefixed with W3_LAYOUT_ override defaults.
"""
import os
from dataclasses import dataclass

ENV_PREFIX = "W3_LAYOUT_"


@dataclass
class Settings:
    """Layout configuration"""

    # Stylesheet
    STYLESHEET_URL: str = "/css/w3.css"

    # Page
    PAGE_WIDTH: int = 980  # pixels

    # Grid
    COLUMN_SIZE_MODE: str = "framework"  # or "literal"
    STRICT_COLUMN_SIZES: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(ENV_PREFIX + key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                else:
                    setattr(self, key, env_value)
