"""Cache entry and statistics models."""

from __future__ import annotations

import re
import time
from pathlib import Path

from pydantic import BaseModel

CACHE_EXT = ".i2html"

_NAME_RE = re.compile(r"^(?P<stamp>[^-]*)-(?P<key>.+)" + re.escape(CACHE_EXT) + r"$")


class CacheEntry(BaseModel):
    """One rendered markup file, named ``{expires_at}-{key}.i2html``."""

    key: str
    expires_at: int
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> CacheEntry | None:
        """Parse an entry from its file name; None if the name isn't an entry.

        An unparseable timestamp prefix yields ``expires_at=0`` so the file
        is always treated as expired and can be collected.
        """
        match = _NAME_RE.match(path.name)
        if match is None:
            return None
        try:
            expires_at = int(match.group("stamp"))
        except ValueError:
            expires_at = 0
        return cls(key=match.group("key"), expires_at=expires_at, path=path)

    @staticmethod
    def file_name(key: str, expires_at: int) -> str:
        return f"{expires_at}-{key}{CACHE_EXT}"

    def is_expired(self, now: float | None = None) -> bool:
        now = time.time() if now is None else now
        return now >= self.expires_at


class CacheStats(BaseModel):
    """Aggregate statistics for a cache directory."""

    entries: int = 0
    expired: int = 0
    size_bytes: int = 0

    @property
    def size_mb(self) -> float:
        return self.size_bytes / (1024 * 1024)

    @property
    def live(self) -> int:
        return self.entries - self.expired
