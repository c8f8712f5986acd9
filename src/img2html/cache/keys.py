"""Cache key generation, content-addressed on source identity and output size."""

from __future__ import annotations

import hashlib
import json


def generate_cache_key(
    path: str,
    mtime: int,
    size: int,
    width: int,
    height: int,
) -> str:
    """Generate a SHA256 cache key for one rendering of one image.

    Fields are serialized as a JSON array so boundaries stay unambiguous
    (width=12,height=3 never collides with width=1,height=23, and a path
    containing separator characters is quoted).
    """
    components = [str(path), int(mtime), int(size), int(width), int(height)]
    combined = json.dumps(components, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(combined.encode("utf-8")).hexdigest()
