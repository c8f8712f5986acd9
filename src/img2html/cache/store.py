"""Disk cache of rendered markup, one file per entry with the expiry in its name."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

from img2html.cache.stats import CACHE_EXT, CacheEntry, CacheStats
from img2html.config.defaults import DEFAULT_CACHE_LIFETIME
from img2html.errors.exceptions import ConfigurationError, StorageError

logger = logging.getLogger(__name__)

_DIR_MODE = 0o755
_FILE_MODE = 0o644


def ensure_cache_dir(path: Path) -> Path:
    """Create the cache directory, or repair its permissions if not writable.

    Raises ConfigurationError when the directory cannot be made usable.
    """
    path = Path(path)
    if not path.exists():
        try:
            path.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot create cache directory {path}: {exc}", path=path
            ) from exc
        logger.debug("Created cache directory %s", path)
        return path

    if not path.is_dir():
        raise ConfigurationError(f"Cache path is not a directory: {path}", path=path)

    if not _is_writable(path):
        logger.warning("Cache directory %s is not writable, resetting mode", path)
        try:
            path.chmod(_DIR_MODE)
        except OSError as exc:
            raise ConfigurationError(
                f"Cache directory is not writable: {path}", path=path
            ) from exc
        if not _is_writable(path):
            raise ConfigurationError(f"Cache directory is not writable: {path}", path=path)
    return path


def _is_writable(path: Path) -> bool:
    return os.access(path, os.W_OK | os.X_OK)


class FileCacheStore:
    """Persistent markup cache keyed by fingerprint, expiring by file name.

    No index and no in-memory tier: every call lists the directory. Entries
    appear atomically via ``os.replace`` and deletes tolerate files that are
    already gone, so concurrent processes need no locking.
    """

    def __init__(
        self,
        cache_dir: Path,
        lifetime_seconds: int = DEFAULT_CACHE_LIFETIME,
        clock: Callable[[], float] = time.time,
        create: bool = True,
    ) -> None:
        self._cache_dir = Path(cache_dir)
        self._lifetime = int(lifetime_seconds)
        self._clock = clock
        if create:
            ensure_cache_dir(self._cache_dir)

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def lifetime_seconds(self) -> int:
        return self._lifetime

    def lookup(self, key: str) -> str | None:
        """Return the markup of the first unexpired entry for ``key``.

        Candidates are tried in ascending file-name order. Expired ones are
        skipped but left for the collector.
        """
        now = self._clock()
        for entry in self.entries(key):
            if entry.is_expired(now):
                logger.debug("Skipping expired entry %s", entry.path.name)
                continue
            try:
                markup = entry.path.read_bytes().decode("utf-8")
            except FileNotFoundError:
                # Collected between listing and reading
                continue
            except (OSError, UnicodeDecodeError) as exc:
                raise StorageError(
                    f"Failed to read cache entry {entry.path}: {exc}",
                    path=entry.path,
                    original=exc,
                ) from exc
            logger.debug("Cache hit for %s (%s)", key, entry.path.name)
            return markup

        logger.debug("Cache miss for %s", key)
        return None

    def store(self, key: str, markup: str) -> Path:
        """Persist ``markup`` as a new entry expiring ``lifetime_seconds`` from now.

        Earlier entries for the same key are not touched.
        """
        expires_at = int(self._clock()) + self._lifetime
        target = self._cache_dir / CacheEntry.file_name(key, expires_at)
        tmp: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._cache_dir, prefix=f".{target.name}.", suffix=".tmp"
            )
            tmp = Path(tmp_name)
            with os.fdopen(fd, "wb") as f:
                f.write(markup.encode("utf-8"))
            tmp.chmod(_FILE_MODE)
            os.replace(tmp, target)
        except OSError as exc:
            if tmp is not None:
                tmp.unlink(missing_ok=True)
            raise StorageError(
                f"Failed to write cache entry {target}: {exc}",
                path=target,
                original=exc,
            ) from exc
        logger.debug("Stored cache entry %s", target.name)
        return target

    def garbage_collect(self) -> int:
        """Delete every expired entry. Returns the number of files removed."""
        if not self._cache_dir.is_dir():
            return 0

        now = self._clock()
        removed = 0
        for entry in self.entries():
            if not entry.is_expired(now):
                continue
            try:
                entry.path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise StorageError(
                    f"Failed to delete cache entry {entry.path}: {exc}",
                    path=entry.path,
                    original=exc,
                ) from exc
            removed += 1

        if removed:
            logger.info("Removed %d expired cache entries from %s", removed, self._cache_dir)
        return removed

    def entries(self, key: str | None = None) -> list[CacheEntry]:
        """List cache entries sorted by file name, optionally for one key."""
        if not self._cache_dir.is_dir():
            return []
        pattern = f"*-{key}{CACHE_EXT}" if key else f"*-*{CACHE_EXT}"
        result: list[CacheEntry] = []
        for path in sorted(self._cache_dir.glob(pattern), key=lambda p: p.name):
            entry = CacheEntry.from_path(path)
            if entry is None or (key and entry.key != key):
                continue
            result.append(entry)
        return result

    def stats(self) -> CacheStats:
        now = self._clock()
        stats = CacheStats()
        for entry in self.entries():
            try:
                size = entry.path.stat().st_size
            except FileNotFoundError:
                continue
            stats.entries += 1
            stats.size_bytes += size
            if entry.is_expired(now):
                stats.expired += 1
        return stats
