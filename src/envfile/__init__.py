"""
Load, edit and canonically rewrite ``KEY=VALUE`` environment files.
"""

from .env import load_env_file
from .parser import parse_line, parse_lines
from .quoting import UnescapeError, escape, unescape
from .store import EnvFile, EnvFileError

__all__ = [
    "EnvFile",
    "EnvFileError",
    "UnescapeError",
    "escape",
    "load_env_file",
    "parse_line",
    "parse_lines",
    "unescape",
]
