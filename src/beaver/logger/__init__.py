"""Leveled application logger with separate standard and error outputs."""
from beaver.logger.leveled import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TAGS,
    Level,
    LeveledLogger,
    LevelTags,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TAGS",
    "Level",
    "LevelTags",
    "LeveledLogger",
]
