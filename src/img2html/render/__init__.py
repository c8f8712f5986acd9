"""HTML rendering of pixel grids."""

from img2html.render.markup import render_html, render_image_html, sanitize_file_name

__all__ = ["render_html", "render_image_html", "sanitize_file_name"]
