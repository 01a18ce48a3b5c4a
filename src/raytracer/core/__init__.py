"""Core numeric module.

This module contains the value types every other part of the ray tracer
is built from:

Components:
    tuples: Points, vectors and the vector utility functions
    color: RGB colors and 8-bit quantization

Points and vectors share one Tuple type and are told apart by the ``w``
component (1 for points, 0 for vectors). Both Tuple and Color compare
component-wise within EPSILON.
"""

from .color import (
    BLACK,
    MAX_8BIT,
    WHITE,
    Color,
    color,
    decimal_to_8bit,
    quantize_array,
)
from .tuples import (
    EPSILON,
    Tuple,
    TupleKind,
    approx_equal,
    cross,
    dot,
    magnitude,
    normalise,
    point,
    vector,
    zero_vector,
)

__all__ = [
    "EPSILON",
    "approx_equal",
    "Tuple",
    "TupleKind",
    "point",
    "vector",
    "zero_vector",
    "magnitude",
    "normalise",
    "dot",
    "cross",
    "Color",
    "color",
    "BLACK",
    "WHITE",
    "MAX_8BIT",
    "decimal_to_8bit",
    "quantize_array",
]
