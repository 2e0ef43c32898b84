"""
Launch Parameters
=================
Defines the immutable LaunchParameters record consumed by the trajectory
engine, the InvalidParameter error raised for physically meaningless input,
and the table of surface gravities used for planetary comparisons.

Angle convention:
  0°  = horizontal, downrange
  90° = straight up
Values outside [0, 90] are accepted and simply produce odd trajectories.
"""

import numpy as np
from dataclasses import dataclass


# ── Defaults ───────────────────────────────────────────────────────────────
DEFAULT_VELOCITY         = 50.0    # m/s
DEFAULT_ANGLE            = 45.0    # degrees above horizontal
EARTH_GRAVITY            = 9.8     # m/s²
DEFAULT_DRAG_COEFFICIENT = 0.47    # sphere, subsonic
DEFAULT_MASS             = 1.0     # kg


# Surface gravity (m/s²)
PLANETS = {
    'Earth': 9.8,
    'Moon': 1.62,
    'Mars': 3.71,
    'Jupiter': 24.79,
    'Venus': 8.87,
}


class InvalidParameter(ValueError):
    """Raised when a launch parameter would make the physics undefined."""

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")


def planet_gravity(name: str) -> float:
    """Surface gravity for one of the PLANETS keys (case-insensitive)."""
    for key, g in PLANETS.items():
        if key.lower() == name.lower():
            return g
    raise ValueError(
        f"Unknown planet '{name}'. "
        f"Available: {list(PLANETS.keys())}"
    )


@dataclass(frozen=True)
class LaunchParameters:
    """
    Complete specification of one launch.

    mass and drag_coefficient only matter (and are only checked) when
    drag_enabled is set.
    """
    initial_velocity: float = DEFAULT_VELOCITY       # m/s
    angle: float = DEFAULT_ANGLE                     # degrees
    gravity: float = EARTH_GRAVITY                   # m/s²
    drag_enabled: bool = False
    drag_coefficient: float = DEFAULT_DRAG_COEFFICIENT
    mass: float = DEFAULT_MASS                       # kg

    def validate(self) -> 'LaunchParameters':
        """
        Check every precondition of the engine.

        Returns self so callers can chain ``params.validate()``.

        Raises
        ------
        InvalidParameter
            If a value is non-finite, or a required quantity is not
            strictly positive.
        """
        fields = [('initial_velocity', self.initial_velocity),
                  ('angle', self.angle),
                  ('gravity', self.gravity)]
        if self.drag_enabled:
            fields += [('drag_coefficient', self.drag_coefficient),
                       ('mass', self.mass)]

        for name, value in fields:
            if not np.isfinite(value):
                raise InvalidParameter(name, value, "must be a finite number")

        for name, value in fields:
            if name != 'angle' and value <= 0:
                raise InvalidParameter(name, value, "must be > 0")

        return self

    def velocity_components(self):
        """Decompose launch speed into (vx, vy)."""
        theta = np.radians(self.angle)
        vx = self.initial_velocity * np.cos(theta)
        vy = self.initial_velocity * np.sin(theta)
        return float(vx), float(vy)
