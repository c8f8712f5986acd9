"""Shared Pydantic models for img2html."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, PositiveInt


class Dimensions(BaseModel):
    """Target output size in pixels."""

    model_config = ConfigDict(frozen=True)

    width: PositiveInt
    height: PositiveInt

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


class ConversionResult(BaseModel):
    html: str
    cache_key: str
    dimensions: Dimensions
    cached: bool = False
    cache_path: Path | None = None

    def save(self, path: str | Path) -> Path:
        """Write the markup to ``path`` and return it."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.html, encoding="utf-8")
        return path
