"""Configuration schema for clangdconf."""

from .schema import FlagQueryConfig

__all__ = [
    "FlagQueryConfig",
]
