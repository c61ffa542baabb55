"""
Input collection for Shelver.

Expands file names and glob patterns given on the command line into a
stable, de-duplicated list of paths.
"""

import glob
from typing import Iterable


def expand_pattern(pattern: str) -> list[str]:
    """
    Expand one glob pattern into its sorted matches.

    Raises:
        OSError, ValueError: If the pattern cannot be expanded.
    """
    return sorted(glob.glob(pattern))


def expand_patterns(patterns: Iterable[str]) -> dict:
    """
    Expand a list of file names / glob patterns.

    Matches of one pattern are sorted lexicographically; pattern order is
    kept. A path matched by several patterns is listed once. Patterns that
    fail to expand are reported and skipped.

    Args:
        patterns: File names or glob patterns.

    Returns:
        Dict with:
        - "files": list of matched paths
        - "errors": list of (pattern, message) tuples
    """
    files: list[str] = []
    seen: set[str] = set()
    errors: list[tuple[str, str]] = []

    for pattern in patterns:
        try:
            matches = expand_pattern(pattern)
        except (OSError, ValueError) as e:
            print(f"[ERROR] Error expanding glob {pattern}: {e}")
            errors.append((pattern, str(e)))
            continue

        for path in matches:
            if path in seen:
                continue
            seen.add(path)
            files.append(path)

    return {
        "files": files,
        "errors": errors
    }
