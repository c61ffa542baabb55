"""
Configuration defaults for Shelver.

Defaults come from the environment, optionally seeded from a .env file.
Command-line flags override them.
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Environment variables
ENV_PREFIX = "SHELVER_PREFIX"
ENV_DEST = "SHELVER_DEST"

DEFAULT_PREFIX = ""
DEFAULT_DEST = "."


def load_settings(env_file: str | Path | None = None) -> dict:
    """
    Load default settings from the environment.

    Variables already set in the process environment take precedence over
    the .env file.

    Args:
        env_file: Explicit .env path. Defaults to the nearest .env found
            from the current working directory upward.

    Returns:
        Dict with "prefix" (str) and "dest" (Path).
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)

    return {
        "prefix": os.environ.get(ENV_PREFIX, DEFAULT_PREFIX),
        "dest": Path(os.environ.get(ENV_DEST, DEFAULT_DEST)),
    }
