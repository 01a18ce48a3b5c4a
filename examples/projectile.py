#!/usr/bin/env python3
"""Fire a projectile and report its position until it lands.

This script demonstrates the tuple algebra: the projectile's position is a
point, its velocity a vector, and each step adds gravity and wind to the
velocity before moving the projectile.

Usage:
    python -m examples.projectile [options]

Options:
    --speed SPEED         Launch speed multiplier (default: 1.0)
    --max-steps STEPS     Maximum number of steps (default: 100)
    --delay SECONDS       Pause between steps (default: 0.0)
    --quiet               Only print the landing position
    --verbose             Enable debug logging

Example:
    python -m examples.projectile --speed 2.0 --delay 0.1
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass

from raytracer.core.tuples import Tuple, point, vector
from raytracer.physics.projectile import Environment, Projectile, simulate


@dataclass
class ProjectileParams:
    """Launch and environment parameters for the demo.

    Attributes:
        start: Launch position (x, y, z).
        direction: Launch direction (x, y, z), normalised before use.
        speed: Multiplier applied to the unit launch direction.
        gravity: Gravity vector (x, y, z).
        wind: Wind vector (x, y, z).
    """

    start: tuple[float, float, float] = (0.0, 1.0, 0.0)
    direction: tuple[float, float, float] = (1.0, 1.0, 0.0)
    speed: float = 1.0
    gravity: tuple[float, float, float] = (0.0, -0.1, 0.0)
    wind: tuple[float, float, float] = (-0.01, 0.0, 0.0)

    def build(self) -> tuple[Environment, Projectile]:
        """Create the environment and the initial projectile."""
        env = Environment(gravity=vector(*self.gravity), wind=vector(*self.wind))
        projectile = Projectile(
            position=point(*self.start),
            velocity=vector(*self.direction).normalise() * self.speed,
        )
        return env, projectile


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Fire a projectile and report its position until it lands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Launch speed multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=100,
        help="Maximum number of steps (default: 100)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Pause between steps in seconds (default: 0.0)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the landing position",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def run_projectile(
    params: ProjectileParams,
    max_steps: int = 100,
    delay: float = 0.0,
    quiet: bool = False,
) -> Tuple:
    """Step the projectile until it lands or max_steps is reached.

    Args:
        params: Launch and environment parameters.
        max_steps: Maximum number of steps to take.
        delay: Seconds to sleep between steps.
        quiet: If True, suppress per-step output.

    Returns:
        The final position of the projectile.
    """
    env, projectile = params.build()

    if not quiet:
        print(f"starting {projectile.position}")
        print(f"environment {env}")

    for projectile in simulate(env, projectile, max_steps=max_steps):
        if projectile.position.y <= 0:
            print(f"we hit the ground at {projectile.position}")
        elif not quiet:
            print(f"dropping to {projectile.position}")

        if delay > 0:
            time.sleep(delay)

    return projectile.position


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        run_projectile(
            ProjectileParams(speed=args.speed),
            max_steps=args.max_steps,
            delay=args.delay,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
