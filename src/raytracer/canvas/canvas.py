"""Pixel canvas backed by a NumPy color buffer.

The canvas is a width x height grid of colors addressed by ``(x, y)`` with
the origin at the top-left corner. Pixels are stored in a single float64
array of shape ``(height, width, 3)``, so every row always holds exactly
``width`` colors.

Example:
    >>> from raytracer.canvas.canvas import Canvas
    >>> from raytracer.core.color import color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Color(red=1.0, green=0.0, blue=0.0)
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from raytracer.canvas.ppm import canvas_to_ppm
from raytracer.core.color import Color

logger = logging.getLogger(__name__)


class Canvas:
    """A mutable grid of colors, initialised to black.

    Zero-width or zero-height canvases are valid.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Args:
            width: Number of columns (>= 0).
            height: Number of rows (>= 0).

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)
        logger.debug("Allocated %dx%d canvas", width, height)

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def _check_bounds(self, x: int, y: int) -> None:
        # Negative indices would silently wrap in NumPy
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Replace the color of a single pixel.

        Args:
            x: Column index, ``0 <= x < width``.
            y: Row index, ``0 <= y < height``.
            color: The new color. Stored unclamped.

        Raises:
            IndexError: If ``(x, y)`` is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color of a single pixel.

        Args:
            x: Column index, ``0 <= x < width``.
            y: Row index, ``0 <= y < height``.

        Returns:
            The stored color.

        Raises:
            IndexError: If ``(x, y)`` is outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def fill(self, color: Color) -> None:
        """Paint every pixel with the same color."""
        self._pixels[:, :] = (color.red, color.green, color.blue)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the pixel buffer.

        Returns:
            Array of shape (height, width, 3) with unclamped float channels.
        """
        return self._pixels.copy()

    def to_ppm(self) -> str:
        """Serialize the canvas as plain-text PPM. See ``ppm.canvas_to_ppm``."""
        return canvas_to_ppm(self)
