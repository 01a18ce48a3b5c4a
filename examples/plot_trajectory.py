#!/usr/bin/env python3
"""Plot a projectile's trajectory onto a canvas and save it.

Each position the projectile passes through is painted as one pixel. The
canvas origin is the top-left corner, so the y coordinate is flipped
before plotting. Positions that fall outside the canvas are skipped.

Usage:
    python -m examples.plot_trajectory [options]

Options:
    --width WIDTH       Canvas width in pixels (default: 900)
    --height HEIGHT     Canvas height in pixels (default: 550)
    --speed SPEED       Launch speed multiplier (default: 11.25)
    --max-steps STEPS   Maximum number of steps (default: 1000)
    --output OUTPUT     Output file path, .ppm or .png (default: trajectory.ppm)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.plot_trajectory --output trajectory.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from raytracer.canvas.canvas import Canvas
from raytracer.core.color import color
from raytracer.core.tuples import Tuple, point, vector
from raytracer.physics.projectile import Environment, Projectile, simulate
from raytracer.preview.export import save_canvas

TRAIL_COLOR = color(1.0, 0.8, 0.6)


def to_canvas_coordinates(position: Tuple, height: int) -> tuple[int, int]:
    """Map a world position to a canvas pixel.

    World y grows upward while canvas rows grow downward, so ground level
    (y in [0, 0.5)) lands on the bottom row, ``height - 1``.

    Args:
        position: The point to plot.
        height: Canvas height in pixels.

    Returns:
        The ``(x, y)`` pixel, which may lie outside the canvas.
    """
    return round(position.x), height - 1 - round(position.y)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Plot a projectile's trajectory onto a canvas.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=900,
        help="Canvas width in pixels (default: 900)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=550,
        help="Canvas height in pixels (default: 550)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=11.25,
        help="Launch speed multiplier (default: 11.25)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=1000,
        help="Maximum number of steps (default: 1000)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="trajectory.ppm",
        help="Output file path, .ppm or .png (default: trajectory.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def plot_trajectory(
    width: int = 900,
    height: int = 550,
    speed: float = 11.25,
    max_steps: int = 1000,
    output_path: str = "trajectory.ppm",
    quiet: bool = False,
) -> Path:
    """Simulate a projectile, plot its path and save the canvas.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        speed: Multiplier applied to the unit launch direction.
        max_steps: Maximum number of simulation steps.
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    canvas = Canvas(width, height)
    env = Environment(gravity=vector(0.0, -0.1, 0.0), wind=vector(-0.01, 0.0, 0.0))
    projectile = Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 1.8, 0.0).normalise() * speed,
    )

    plotted = 0
    for step in simulate(env, projectile, max_steps=max_steps):
        x, y = to_canvas_coordinates(step.position, height)
        if 0 <= x < width and 0 <= y < height:
            canvas.write_pixel(x, y, TRAIL_COLOR)
            plotted += 1

    if not quiet:
        print(f"Plotted {plotted} positions on a {width}x{height} canvas")

    output_file = save_canvas(canvas, output_path)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        plot_trajectory(
            width=args.width,
            height=args.height,
            speed=args.speed,
            max_steps=args.max_steps,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
