"""Version-keyed memo cache for derived values."""

from dataclasses import dataclass
from typing import Protocol


class Memo(Protocol):
    """Cache interface keyed by name and source version."""

    def get(self, key: str, version: int) -> object | None:
        """Return a cached value if it was computed for this version."""

    def set(self, key: str, version: int, value: object) -> None:
        """Store a value computed for a version."""


@dataclass
class _MemoEntry:
    value: object
    version: int


@dataclass
class VersionedMemo(Memo):
    """In-memory memo that drops entries once the source version moves on."""

    _entries: dict[str, _MemoEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str, version: int) -> object | None:
        """Return a cached value if it is still current."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.version != version:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, version: int, value: object) -> None:
        """Store a value for the given version."""
        self._entries[key] = _MemoEntry(value=value, version=version)
