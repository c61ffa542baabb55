"""
Planning module for Shelver.

Provides:
- Filename classification (marker mode, then numeric mode)
- Move planning from input paths
"""

from .classifier import (
    Classification,
    NO_MATCH,
    STRATEGIES,
    classify,
    get_stem,
    match_marker,
    match_numeric,
)
from .planner import plan_move, plan_moves, group_moves

__all__ = [
    "Classification",
    "NO_MATCH",
    "STRATEGIES",
    "classify",
    "get_stem",
    "match_marker",
    "match_numeric",
    "plan_move",
    "plan_moves",
    "group_moves",
]
