"""Numeric and output primitives for a software ray tracer.

This package provides the building blocks a renderer consumes, with support for:
- Points and vectors as 4-component homogeneous tuples
- RGB colors with blending arithmetic and 8-bit quantization
- A pixel canvas with plain-text PPM serialization
- PPM and PNG file export

Subpackages:
    core: Tuple/vector algebra and the color model
    canvas: Pixel grid and PPM encoding
    preview: Writing canvases to image files
    physics: Projectile model used by the example scripts
"""

__version__ = "0.1.0"
