"""Pytest configuration for raytracer tests.

This module provides shared fixtures for the canvas, PPM and export tests.
"""

import pytest


@pytest.fixture
def red():
    """Pure red."""
    from raytracer.core.color import color

    return color(1.0, 0.0, 0.0)


@pytest.fixture
def blank_canvas():
    """A 10x20 black canvas."""
    from raytracer.canvas.canvas import Canvas

    return Canvas(10, 20)


@pytest.fixture
def painted_canvas():
    """A 10x2 canvas filled with color(1.0, 0.8, 0.6).

    Each row serializes to 30 samples of three digits, which is too long
    for one 70-character line.
    """
    from raytracer.canvas.canvas import Canvas
    from raytracer.core.color import color

    canvas = Canvas(10, 2)
    canvas.fill(color(1.0, 0.8, 0.6))
    return canvas


@pytest.fixture
def sparse_canvas():
    """A 5x3 canvas with three pixels set, including out-of-range channels."""
    from raytracer.canvas.canvas import Canvas
    from raytracer.core.color import color

    canvas = Canvas(5, 3)
    canvas.write_pixel(0, 0, color(1.5, 0.0, 0.0))
    canvas.write_pixel(2, 1, color(0.0, 0.5, 0.0))
    canvas.write_pixel(4, 2, color(-0.5, 0.0, 1.0))
    return canvas
