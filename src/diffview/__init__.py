"""Colorized word and line diffs for the terminal."""

from .core.diff.differ import Diff, DiffView
from .core.diff.strategies import DiffStrategy, UnifiedDiff, WordDiff
from .core.exceptions import DiffViewError, MalformedPatchError

__all__ = [
    "Diff",
    "DiffView",
    "DiffStrategy",
    "UnifiedDiff",
    "WordDiff",
    "DiffViewError",
    "MalformedPatchError",
]
