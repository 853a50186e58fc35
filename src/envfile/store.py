"""
In-memory store for an environment file, kept in ascending key order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .parser import parse_lines
from .quoting import escape

PathLike = Union[str, Path]


class EnvFileError(OSError):
    """Raised when an environment file cannot be read or written."""


def _read(path: Path) -> bytes:
    try:
        with path.open("rb") as handle:
            return handle.read()
    except OSError as exc:
        raise EnvFileError(f"unable to open file at {str(path)!r}: {exc}") from exc


def _write(path: Path, contents: bytes) -> None:
    try:
        with path.open("wb") as handle:
            handle.write(contents)
    except OSError as exc:
        raise EnvFileError(f"unable to create file at {str(path)!r}: {exc}") from exc


class EnvFile:
    """
    An environment file whose entries have been buffered into memory.

    ``store`` always iterates in ascending key order; :meth:`write` emits the
    entries in that order, one ``KEY=VALUE`` line each, dropping comments and
    blank lines from the source.
    """

    def __init__(self, path: PathLike):
        self.path: Optional[Path] = Path(path)
        self.store: Dict[str, str] = {}
        self._load(_read(self.path))

    @classmethod
    def from_bytes(cls, data: Union[bytes, str], path: Optional[PathLike] = None) -> "EnvFile":
        """Build a store from an in-memory buffer instead of reading ``path``."""

        env = cls.__new__(cls)
        env.path = Path(path) if path is not None else None
        env.store = {}
        env._load(data)
        return env

    def _load(self, data: Union[bytes, str]) -> None:
        entries: Dict[str, str] = {}
        for key, value in parse_lines(data):
            entries[key] = value
        self.store = dict(sorted(entries.items()))

    def update(self, key: str, value: str) -> None:
        """Update or insert ``key``."""

        if key in self.store:
            self.store[key] = value
            return
        self.store[key] = value
        self.store = dict(sorted(self.store.items()))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.store.get(key, default)

    def remove(self, key: str) -> Optional[str]:
        """Delete ``key`` and return its value, or ``None`` if it was missing."""

        return self.store.pop(key, None)

    def keys(self) -> List[str]:
        return list(self.store)

    def items(self) -> List[Tuple[str, str]]:
        return list(self.store.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self.store)

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, key: object) -> bool:
        return key in self.store

    def __getitem__(self, key: str) -> str:
        return self.store[key]

    def __repr__(self) -> str:
        return f"EnvFile(path={self.path!r}, entries={len(self.store)})"

    def to_bytes(self) -> bytes:
        """Render the canonical form of the store."""

        lines = [f"{key}={escape(value)}\n" for key, value in sorted(self.store.items())]
        return "".join(lines).encode("utf-8")

    def write(self) -> None:
        """
        Write the store back to :attr:`path`.

        Keys are written in ascending order.
        """

        if self.path is None:
            raise EnvFileError("unable to create file: no path is bound to this store")
        _write(self.path, self.to_bytes())


__all__ = ["EnvFile", "EnvFileError"]
