"""
Move planning for Shelver.

Turns a list of input paths into planned moves, one per file whose name
classifies into a group. The destination of each move is relative to the
destination root: "<group>/<basename>".
"""

import os
from typing import Iterable

from .classifier import classify


def plan_move(path: str, marker: str = "") -> dict | None:
    """
    Plan the move for a single file.

    Args:
        path: Path to the file, as given on the command line.
        marker: Optional marker token passed to the classifier.

    Returns:
        Move dict with source, dest, group and reason, or None if the
        filename does not classify.
    """
    filename = os.path.basename(path)
    result = classify(filename, marker)
    if not result:
        return None

    return {
        "source": path,
        "dest": os.path.join(result.group, filename),
        "group": result.group,
        "reason": result.mode,
    }


def plan_moves(paths: Iterable[str], marker: str = "") -> dict:
    """
    Plan moves for a batch of input paths, preserving input order.

    Only regular files are classified. Directories and paths that cannot be
    read are set aside as "ignored"; files that fail classification are
    "unmatched".

    Args:
        paths: Input paths, typically from expand_patterns().
        marker: Optional marker token.

    Returns:
        Dict with:
        - "moves": list of planned move dicts
        - "unmatched": list of file paths that matched no grouping pattern
        - "ignored": list of paths that are not regular files
    """
    moves = []
    unmatched = []
    ignored = []

    for path in paths:
        path = str(path)
        if not os.path.isfile(path):
            ignored.append(path)
            continue

        move = plan_move(path, marker)
        if move is None:
            unmatched.append(path)
            continue
        moves.append(move)

    return {
        "moves": moves,
        "unmatched": unmatched,
        "ignored": ignored,
    }


def group_moves(moves: Iterable[dict]) -> dict[str, list[dict]]:
    """Group planned moves by destination group, in first-seen order."""
    groups: dict[str, list[dict]] = {}
    for move in moves:
        groups.setdefault(move["group"], []).append(move)
    return groups
