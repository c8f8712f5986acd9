"""Target-size resolution from configured bounds and source size."""

from __future__ import annotations

from img2html.types import Dimensions


def resolve_dimensions(
    source_width: int,
    source_height: int,
    max_width: int | None = None,
    max_height: int | None = None,
) -> Dimensions:
    """Compute the output size for a source image.

    - No bounds: source size.
    - One bound: that side takes the bound, the other keeps its source size
      (aspect ratio is NOT preserved in this case).
    - Both bounds: scale by ``min(max_width/w, max_height/h)`` so the image
      fits the box, truncating fractional pixels. Sides never drop below 1.
    """
    width = max_width if max_width is not None else source_width
    height = max_height if max_height is not None else source_height

    if max_width is not None and max_height is not None:
        ratio = min(max_width / source_width, max_height / source_height)
        width = max(1, int(source_width * ratio))
        height = max(1, int(source_height * ratio))

    return Dimensions(width=width, height=height)
