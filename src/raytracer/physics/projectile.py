"""Projectile motion under constant gravity and wind.

A small physics model used to exercise the tuple algebra: a projectile has
a position (a point) and a velocity (a vector), and an environment applies
gravity and wind (both vectors) once per discrete time step.

Example:
    >>> from raytracer.core.tuples import point, vector
    >>> from raytracer.physics.projectile import Environment, Projectile, tick
    >>> env = Environment(gravity=vector(0.0, -0.1, 0.0), wind=vector(-0.01, 0.0, 0.0))
    >>> p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(1.0, 1.0, 0.0).normalise())
    >>> p = tick(env, p)
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass

from raytracer.core.tuples import Tuple

# Default upper bound on simulated steps
DEFAULT_MAX_STEPS = 100


@dataclass(frozen=True)
class Projectile:
    """A moving projectile.

    Attributes:
        position: Current location (a point).
        velocity: Displacement per step (a vector).
    """

    position: Tuple
    velocity: Tuple

    def __str__(self) -> str:
        return f"position {self.position}, velocity {self.velocity}"


@dataclass(frozen=True)
class Environment:
    """Forces applied to a projectile every step.

    Attributes:
        gravity: Constant acceleration (a vector).
        wind: Constant drift (a vector).
    """

    gravity: Tuple
    wind: Tuple

    def __str__(self) -> str:
        return f"gravity {self.gravity}, wind {self.wind}"


def tick(env: Environment, projectile: Projectile) -> Projectile:
    """Advance a projectile by one time step.

    Args:
        env: The environment applying gravity and wind.
        projectile: The projectile before the step.

    Returns:
        A new projectile moved by its velocity, whose velocity has been
        updated by gravity and wind.
    """
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def simulate(
    env: Environment,
    projectile: Projectile,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Generator[Projectile, None, None]:
    """Step a projectile until it reaches the ground.

    Args:
        env: The environment applying gravity and wind.
        projectile: The starting projectile (not yielded).
        max_steps: Maximum number of steps to take.

    Yields:
        The projectile after each step. The step on which ``position.y``
        drops to zero or below is the last one yielded.
    """
    for _ in range(max_steps):
        projectile = tick(env, projectile)
        yield projectile
        if projectile.position.y <= 0:
            return
