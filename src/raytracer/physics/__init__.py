"""Physics module with the projectile model used by the examples.

Components:
    projectile: Projectile/Environment values and the per-step update
"""

from .projectile import DEFAULT_MAX_STEPS, Environment, Projectile, simulate, tick

__all__ = [
    "Projectile",
    "Environment",
    "tick",
    "simulate",
    "DEFAULT_MAX_STEPS",
]
