"""Canvas module for pixel storage and image encoding.

Components:
    canvas: Width x height grid of colors with bounds-checked access
    ppm: Plain-text PPM (P3) serialization with 70-column line wrapping

A canvas is mutated through ``write_pixel`` and then serialized with
``to_ppm``. Writing the result to disk is left to the preview module.
"""

from .canvas import Canvas
from .ppm import (
    PPM_MAGIC,
    PPM_MAX_COLOR_VALUE,
    PPM_MAX_LINE_LENGTH,
    canvas_to_ppm,
    ppm_header,
    wrap_components,
)

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "ppm_header",
    "wrap_components",
    "PPM_MAGIC",
    "PPM_MAX_COLOR_VALUE",
    "PPM_MAX_LINE_LENGTH",
]
