"""RGB color representation and 8-bit quantization.

Colors are stored as unclamped floating point triples. Components may go
negative or exceed 1.0 while light contributions are being blended; they
are only clamped to [0, 1] when quantized to 8-bit samples for output.

Quantization rule:
    1. Clamp the channel to [0.0, 1.0]
    2. Scale by 255
    3. Round half away from zero, so 0.5 maps to 128

NaN channels quantize to 0; infinities clamp like any other value.

The scalar ``decimal_to_8bit`` and the vectorised ``quantize_array`` apply
the same rule so PPM and PNG output agree sample for sample.

Example:
    >>> from raytracer.core.color import color
    >>> c = color(1.0, 0.2, 0.4) * color(0.9, 1.0, 0.1)
    >>> str(c)
    '230 51 10'
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np
import numpy.typing as npt

from raytracer.core.tuples import approx_equal

# Largest value of an 8-bit channel
MAX_8BIT = 255


def decimal_to_8bit(value: float) -> int:
    """Quantize a color channel to an 8-bit sample.

    Args:
        value: Channel intensity. Values outside [0, 1] are clamped and
            NaN maps to 0.

    Returns:
        An integer in [0, 255].
    """
    if math.isnan(value):
        return 0
    clamped = max(0.0, min(1.0, value))
    return int(math.floor(clamped * MAX_8BIT + 0.5))


def quantize_array(
    values: npt.NDArray[np.floating[npt.NBitBase]],
) -> npt.NDArray[np.uint8]:
    """Quantize an array of channel intensities to 8-bit samples.

    Vectorised form of ``decimal_to_8bit``.

    Args:
        values: Array of any shape holding channel intensities.

    Returns:
        Array of the same shape with dtype uint8.
    """
    finite = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0)
    clamped = np.clip(finite, 0.0, 1.0)
    return np.floor(clamped * MAX_8BIT + 0.5).astype(np.uint8)


@dataclass(frozen=True, eq=False)
class Color:
    """An immutable RGB color.

    Multiplying by a number scales every channel; multiplying by another
    Color blends the two channel by channel (Hadamard product), which is
    how a light color is combined with a surface color.

    Attributes:
        red: Red intensity, nominally in [0, 1].
        green: Green intensity, nominally in [0, 1].
        blue: Blue intensity, nominally in [0, 1].
    """

    red: float
    green: float
    blue: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Color:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def to_8bit(self) -> tuple[int, int, int]:
        """Quantize all three channels.

        Returns:
            The ``(red, green, blue)`` samples, each in [0, 255].
        """
        return (
            decimal_to_8bit(self.red),
            decimal_to_8bit(self.green),
            decimal_to_8bit(self.blue),
        )

    def __str__(self) -> str:
        r8, g8, b8 = self.to_8bit()
        return f"{r8} {g8} {b8}"


def color(red: float, green: float, blue: float) -> Color:
    """Create a color from its red, green and blue channels."""
    return Color(red, green, blue)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
