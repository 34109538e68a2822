"""CLI command modules."""

from .export import export
from .init import init
from .journal import journal
from .mood import forecast, mood, stats, streak

__all__ = [
    "journal",
    "mood",
    "forecast",
    "streak",
    "stats",
    "export",
    "init",
]
