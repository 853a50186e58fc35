"""
Helpers to push the entries of an environment file into ``os.environ``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

from .store import EnvFile, PathLike


def load_env_file(dotenv_path: PathLike = ".env", override: bool = False) -> Dict[str, str]:
    """
    Populate ``os.environ`` using key/value pairs from ``dotenv_path`` (if it exists).

    Existing environment variables win unless ``override`` is set, so shell exports
    or CI secrets are not replaced by stale entries in the file. Returns the pairs
    that were actually applied.
    """

    path = Path(dotenv_path)
    if not path.exists():
        return {}

    applied: Dict[str, str] = {}
    for key, value in EnvFile(path).items():
        if not key or (key in os.environ and not override):
            continue
        try:
            os.environ[key] = value
        except ValueError:
            # embedded NUL or similar; the OS cannot hold this pair
            continue
        applied[key] = value
    return applied


__all__ = ["load_env_file"]
