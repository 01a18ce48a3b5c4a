"""Preview module for writing canvases to image files.

Components:
    export: PPM and PNG file export

PPM output is the canvas's own plain-text encoding. PNG output goes
through Pillow and uses the same 8-bit quantization, so both files carry
the same samples.

Example:
    >>> from raytracer.preview import save_canvas
    >>> save_canvas(canvas, "frame.ppm")
"""

from raytracer.preview.export import (
    canvas_to_uint8,
    save_canvas,
    save_png,
    save_ppm,
)

__all__ = [
    "save_ppm",
    "save_png",
    "save_canvas",
    "canvas_to_uint8",
]
