"""Top-level entry points: ImageToHtml, convert_to_html(), clean_up_cache()."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from img2html.cache.keys import generate_cache_key
from img2html.cache.store import FileCacheStore
from img2html.config.defaults import CACHE_SUBDIR_NAME, DEFAULT_BASE_DIR
from img2html.config.schema import ConverterConfig
from img2html.errors.exceptions import NotFoundError
from img2html.imaging.codec import ImageCodec, PillowCodec
from img2html.imaging.dimensions import resolve_dimensions
from img2html.render.markup import render_image_html
from img2html.types import ConversionResult

logger = logging.getLogger(__name__)


class ImageToHtml:
    """Converts JPEG/PNG/GIF images to pixel-grid HTML, cached on disk.

    Args:
        config: ConverterConfig or a raw mapping (snake_case or camelCase keys).
        base_dir_resolver: Returns the writable root used when no cache
            directory is configured; the cache lives in a fixed subdirectory.
        codec: Raster capability; defaults to PillowCodec.
        clock: Time source for cache expiry.
    """

    def __init__(
        self,
        config: ConverterConfig | Mapping[str, Any] | None = None,
        *,
        base_dir_resolver: Callable[[], Path] | None = None,
        codec: ImageCodec | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not isinstance(config, ConverterConfig):
            config = ConverterConfig.from_mapping(config)
        self._config = config
        self._codec = codec or PillowCodec()

        cache_dir = config.cache_dir
        if cache_dir is None:
            resolver = base_dir_resolver or (lambda: config.base_dir or DEFAULT_BASE_DIR)
            cache_dir = Path(resolver()) / CACHE_SUBDIR_NAME
        self._store = FileCacheStore(
            cache_dir,
            lifetime_seconds=config.cache_lifetime,
            clock=clock,
        )

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def cache_dir(self) -> Path:
        return self._store.cache_dir

    @property
    def store(self) -> FileCacheStore:
        return self._store

    def convert(self, image_path: str | Path) -> ConversionResult:
        """Convert an image, serving from cache when a fresh entry exists."""
        path = Path(image_path)
        if not path.is_file():
            raise NotFoundError(f"Image file does not exist: {path}", path=path)

        source_width, source_height = self._codec.measure(path)
        dims = resolve_dimensions(
            source_width,
            source_height,
            self._config.max_width,
            self._config.max_height,
        )

        stat = path.stat()
        key = generate_cache_key(
            str(path.absolute()),
            int(stat.st_mtime),
            stat.st_size,
            dims.width,
            dims.height,
        )

        cached = self._store.lookup(key)
        if cached is not None:
            logger.info("Served %s from cache (%s)", path.name, key[:12])
            return ConversionResult(html=cached, cache_key=key, dimensions=dims, cached=True)

        grid = self._codec.resize(self._codec.decode(path), dims)
        html = render_image_html(grid, path)
        entry_path = self._store.store(key, html)
        logger.info(
            "Rendered %s at %dx%d (%s)", path.name, dims.width, dims.height, key[:12]
        )
        return ConversionResult(
            html=html,
            cache_key=key,
            dimensions=dims,
            cached=False,
            cache_path=entry_path,
        )

    def convert_to_html(self, image_path: str | Path) -> str:
        """Return the pixel-grid markup for ``image_path``."""
        return self.convert(image_path).html

    @staticmethod
    def clean_up_cache(cache_dir: str | Path) -> int:
        return clean_up_cache(cache_dir)


# ── Module-level convenience functions ──


def clean_up_cache(cache_dir: str | Path, clock: Callable[[], float] = time.time) -> int:
    """Delete expired entries in ``cache_dir``. Safe to call at any time.

    Meant to be invoked periodically by the host's scheduler. Returns the
    number of entries removed.
    """
    store = FileCacheStore(Path(cache_dir), clock=clock, create=False)
    return store.garbage_collect()


def convert_to_html(
    image_path: str | Path,
    config: ConverterConfig | Mapping[str, Any] | None = None,
) -> str:
    """Convert one image with a throwaway converter."""
    return ImageToHtml(config).convert_to_html(image_path)
