"""CLI commands for forge-levels."""

from .levels import allowed, levels
from .override import override
from .prioritize import sort_exercises
from .targets import targets

__all__ = [
    "allowed",
    "levels",
    "override",
    "sort_exercises",
    "targets",
]
