import os

from pydantic import BaseModel, field_validator

__all__ = ["Settings", "settings"]

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels.

        Raises:
            ValueError: If the level is not a standard logging level name.
        """
        level = v.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LEVEL_NAMES)}, got '{v}'."
            )
        return level

    @classmethod
    def load(cls) -> "Settings":
        values = {}
        for name in ("LOG_LEVEL", "LOG_FORMAT"):
            env_value = os.getenv(name)
            if env_value:
                values[name] = env_value
        return cls(**values)


settings = Settings.load()
