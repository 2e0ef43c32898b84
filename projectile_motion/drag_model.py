"""
Aerodynamic Drag Model
======================
Quadratic drag with a constant drag coefficient:

    F_drag = ½ ρ Cd A |v|²       (opposing the velocity direction)

Air density and frontal area are fixed for a run and live in DragConfig
so they can be changed without touching the integrator.  Density does not
vary with altitude; the trajectories computed here stay well inside the
lowest few kilometres of the atmosphere.
"""

import numpy as np
from dataclasses import dataclass


# ── Sea-level defaults ─────────────────────────────────────────────────────
AIR_DENSITY   = 1.225    # kg/m³
FRONTAL_AREA  = 0.01     # m²
MIN_SPEED     = 0.001    # m/s  below this drag is treated as zero


@dataclass(frozen=True)
class DragConfig:
    """Environment constants for the drag model."""
    air_density: float = AIR_DENSITY
    frontal_area: float = FRONTAL_AREA
    min_speed: float = MIN_SPEED


def drag_force_magnitude(speed: float, cd: float,
                         config: DragConfig = DragConfig()) -> float:
    """½ ρ Cd A v²  (N)."""
    return 0.5 * config.air_density * cd * config.frontal_area * speed ** 2


def drag_acceleration(velocity: np.ndarray, cd: float, mass: float,
                      config: DragConfig = DragConfig()) -> np.ndarray:
    """
    Compute the drag acceleration vector (m/s²).

    Parameters
    ----------
    velocity : np.ndarray
        Current velocity [vx, vy] (m/s)
    cd : float
        Drag coefficient (dimensionless)
    mass : float
        Projectile mass (kg)
    config : DragConfig
        Air density, frontal area and the zero-speed threshold

    Returns
    -------
    np.ndarray
        [ax, ay], zero on both axes when speed <= config.min_speed
    """
    speed = np.sqrt(velocity[0] ** 2 + velocity[1] ** 2)
    if speed <= config.min_speed:
        return np.zeros(2)

    F_mag = drag_force_magnitude(speed, cd, config)
    return -(F_mag / mass) * (velocity / speed)
