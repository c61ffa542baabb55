"""
Shelver
=======

A command-line tool that sorts similarly named files (numbered photo or audio
exports, paged scans) into folders named after their common stem.
"""

__version__ = "1.0.0"

from .planning import Classification, NO_MATCH, classify, plan_moves
from .scanner import expand_patterns
from .executor import apply_moves

__all__ = [
    "Classification",
    "NO_MATCH",
    "classify",
    "plan_moves",
    "expand_patterns",
    "apply_moves",
]
