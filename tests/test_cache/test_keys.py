"""Tests for cache key generation."""

from img2html.cache.keys import generate_cache_key

_BASE = dict(path="/images/photo.jpg", mtime=1_700_000_000, size=2048, width=100, height=50)


class TestGenerateCacheKey:
    def test_deterministic(self):
        assert generate_cache_key(**_BASE) == generate_cache_key(**_BASE)

    def test_returns_hex_string(self):
        k = generate_cache_key(**_BASE)
        assert len(k) == 64  # SHA256 hex digest
        assert all(c in "0123456789abcdef" for c in k)

    def test_each_input_changes_key(self):
        k = generate_cache_key(**_BASE)
        assert generate_cache_key(**{**_BASE, "path": "/images/other.jpg"}) != k
        assert generate_cache_key(**{**_BASE, "mtime": 1_700_000_001}) != k
        assert generate_cache_key(**{**_BASE, "size": 2049}) != k
        assert generate_cache_key(**{**_BASE, "width": 101}) != k
        assert generate_cache_key(**{**_BASE, "height": 51}) != k

    def test_field_boundaries_unambiguous(self):
        k1 = generate_cache_key(**{**_BASE, "width": 12, "height": 3})
        k2 = generate_cache_key(**{**_BASE, "width": 1, "height": 23})
        assert k1 != k2

    def test_size_and_mtime_not_concatenated(self):
        k1 = generate_cache_key(**{**_BASE, "mtime": 11, "size": 1})
        k2 = generate_cache_key(**{**_BASE, "mtime": 1, "size": 11})
        assert k1 != k2

    def test_path_with_separators(self):
        k1 = generate_cache_key(**{**_BASE, "path": 'a",1'})
        k2 = generate_cache_key(**{**_BASE, "path": "a"})
        assert k1 != k2
