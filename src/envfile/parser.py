"""
Line oriented parsing of environment files.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, Union

from .quoting import UnescapeError, unescape

Entry = Tuple[str, str]


def parse_line(line: Union[bytes, str]) -> Optional[Entry]:
    """
    Turn one line of an environment file into a ``(key, value)`` pair.

    Comments, blank lines, lines without ``=``, undecodable bytes and values
    with broken quoting all yield ``None`` instead of raising.
    """

    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError:
            return None

    line = line.strip()
    if not line or line.startswith("#"):
        return None

    key, sep, raw_value = line.partition("=")
    if not sep:
        return None

    try:
        value = unescape(raw_value)
    except UnescapeError:
        return None
    return key, value


def parse_lines(data: Union[bytes, str]) -> Iterator[Entry]:
    """Yield every valid entry of ``data``, split on ``\\n`` only."""

    separator = b"\n" if isinstance(data, bytes) else "\n"
    for line in data.split(separator):
        entry = parse_line(line)
        if entry is not None:
            yield entry


__all__ = ["Entry", "parse_line", "parse_lines"]
