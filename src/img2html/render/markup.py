"""Jinja2-based pixel-grid HTML renderer."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2.sandbox import SandboxedEnvironment

from img2html.errors.exceptions import SanitizationError
from img2html.imaging.codec import PixelGrid

_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7e]")
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")

_jinja_env = SandboxedEnvironment(autoescape=True, keep_trailing_newline=False)

# Single line on purpose: any whitespace between inline-block pixels would show.
_TEMPLATE = _jinja_env.from_string(
    '<div class="image {{ ext }} image-to-html" data-name="{{ name }}" data-ext="{{ ext }}"'
    ' style="font-size: 0; line-height: 0; width: {{ width }}px;">'
    "{% for row in rows %}"
    "{% for r, g, b in row %}"
    '<div style="background-color: rgb({{ r }}, {{ g }}, {{ b }});'
    ' width: 1px; height: 1px; display: inline-block;"></div>'
    "{% endfor %}"
    '<div style="clear: both;"></div>'
    "{% endfor %}"
    "</div>"
)


def sanitize_file_name(path: str | Path) -> str:
    """Reduce a file's base name to ``[A-Za-z0-9_-]``.

    Raises SanitizationError if the name holds anything outside printable ASCII.
    """
    file_name = Path(path).name
    if _NON_PRINTABLE_ASCII.search(file_name):
        raise SanitizationError(
            f"Filename contains non-ASCII characters: {file_name!r}", file_name=file_name
        )
    return _UNSAFE_CHARS.sub("", file_name)


def render_html(grid: PixelGrid, source_name: str, source_ext: str) -> str:
    """Render one inline-block div per pixel, row by row, inside a sized container."""
    return _TEMPLATE.render(
        name=source_name,
        ext=_UNSAFE_CHARS.sub("", source_ext.lstrip(".")),
        width=grid.width,
        rows=grid.pixels.tolist(),
    )


def render_image_html(grid: PixelGrid, image_path: str | Path) -> str:
    """Render ``grid`` labelled with the sanitized name and extension of ``image_path``."""
    image_path = Path(image_path)
    return render_html(grid, sanitize_file_name(image_path), image_path.suffix)
