"""Plain-text PPM (P3) encoding for canvases.

The encoder emits:

    P3
    <width> <height>
    255
    <pixel rows>

Each canvas row is written as the quantized ``red green blue`` samples of
its pixels, left to right. PPM readers expect lines of at most 70
characters, so a row is wrapped onto further lines at sample boundaries
whenever the next sample would push the current line past that limit.
Every output line ends with a newline and carries no trailing space.

Example:
    >>> from raytracer.canvas.canvas import Canvas
    >>> from raytracer.canvas.ppm import canvas_to_ppm
    >>> canvas_to_ppm(Canvas(5, 3)).splitlines()[:3]
    ['P3', '5 3', '255']
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from typing import TYPE_CHECKING

from raytracer.core.color import MAX_8BIT, quantize_array

if TYPE_CHECKING:
    from raytracer.canvas.canvas import Canvas

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_COLOR_VALUE = MAX_8BIT
PPM_MAX_LINE_LENGTH = 70


def ppm_header(width: int, height: int) -> str:
    """Build the three header lines of a P3 file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        ``"P3\\n<width> <height>\\n255\\n"``.
    """
    return f"{PPM_MAGIC}\n{width} {height}\n{PPM_MAX_COLOR_VALUE}\n"


def wrap_components(
    tokens: Iterable[str],
    max_length: int = PPM_MAX_LINE_LENGTH,
) -> Generator[str, None, None]:
    """Join tokens with single spaces, wrapping lines at max_length.

    A line is ended before any token that would make it longer than
    max_length. Tokens are never split, and a token longer than max_length
    is emitted on its own line.

    Args:
        tokens: Sample strings in output order.
        max_length: Maximum line length, excluding the newline.

    Yields:
        Output lines without newlines. An empty token sequence yields a
        single empty line.
    """
    line = ""
    for token in tokens:
        if not line:
            line = token
        elif len(line) + 1 + len(token) > max_length:
            yield line
            line = token
        else:
            line = f"{line} {token}"
    yield line


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain-text PPM.

    Args:
        canvas: The canvas to encode.

    Returns:
        The complete file contents, ending with a newline.
    """
    samples = quantize_array(canvas.to_numpy())

    parts = [ppm_header(canvas.width, canvas.height)]
    for row in samples:
        tokens = (str(int(sample)) for sample in row.reshape(-1))
        for line in wrap_components(tokens):
            parts.append(line)
            parts.append("\n")

    ppm = "".join(parts)
    logger.debug(
        "Encoded %dx%d canvas as PPM (%d bytes)", canvas.width, canvas.height, len(ppm)
    )
    return ppm
