"""Image export utilities for canvases.

This module provides functions for saving a canvas to disk.

Supported formats:
    - PPM (plain-text P3, produced by Canvas.to_ppm)
    - PNG (8-bit sRGB via Pillow)

Both formats quantize channels with the same clamp-and-round rule, so a
PNG and a PPM written from the same canvas hold identical samples.

Example:
    >>> from raytracer.canvas.canvas import Canvas
    >>> from raytracer.preview.export import save_png, save_ppm
    >>>
    >>> canvas = Canvas(64, 48)
    >>> save_ppm(canvas, "output.ppm")
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raytracer.core.color import quantize_array

if TYPE_CHECKING:
    from raytracer.canvas.canvas import Canvas

logger = logging.getLogger(__name__)


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Save the canvas as a plain-text PPM file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path that was written.
    """
    path = Path(filepath)
    logger.info("Saving %dx%d canvas to %s", canvas.width, canvas.height, path)
    path.write_text(canvas.to_ppm(), encoding="ascii", newline="\n")
    return path


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit image array.

    Args:
        canvas: The canvas to convert.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    return quantize_array(canvas.to_numpy())


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Save the canvas as an 8-bit PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path that was written.

    Raises:
        ValueError: If the canvas has zero width or height.
    """
    if canvas.width == 0 or canvas.height == 0:
        raise ValueError(
            f"Cannot save an empty canvas as PNG: {canvas.width}x{canvas.height}"
        )

    path = Path(filepath)
    logger.info("Saving %dx%d canvas to %s", canvas.width, canvas.height, path)

    # Save using Pillow
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas))
    pil_image.save(path)
    return path


def save_canvas(canvas: Canvas, filepath: str | Path) -> Path:
    """Save the canvas, choosing the format from the file suffix.

    Args:
        canvas: The canvas to save.
        filepath: Output path ending in .ppm or .png.

    Returns:
        The path that was written.

    Raises:
        ValueError: If the suffix is not a supported format.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        return save_ppm(canvas, path)
    if suffix == ".png":
        return save_png(canvas, path)
    raise ValueError(f"Unsupported image format: {path.suffix!r} (expected .ppm or .png)")
