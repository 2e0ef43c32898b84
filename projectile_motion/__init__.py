"""
Projectile Motion Simulator
===========================
Computes 2D projectile trajectories under two physical models:
  - Closed-form constant-gravity kinematics (no air resistance)
  - Fixed-step Euler integration with quadratic drag

and derives range, maximum height, flight time and impact velocity.
Includes angle optimization, drag and planetary comparisons, an ASCII
trajectory plot and matplotlib figures.
"""

from .parameters import (
    LaunchParameters, InvalidParameter, PLANETS, planet_gravity,
    EARTH_GRAVITY,
)
from .drag_model import DragConfig, drag_acceleration
from .integrator import (
    Trajectory, TrajectoryStrategy, AnalyticalStrategy, DragStrategy,
    ANALYTICAL_DT, DRAG_DT, MAX_SAMPLES,
)
from .engine import TrajectoryEngine
from .analysis import (
    compare_angles, best_angle, optimal_angle, compare_drag,
    compare_planets, AngleResult, DragComparison, PlanetResult,
)
from .report import (
    render_ascii_plot, format_samples, format_angle_table,
    format_drag_table, format_planet_table,
)

__version__ = "1.0.0"
__all__ = [
    'LaunchParameters', 'InvalidParameter', 'PLANETS', 'planet_gravity',
    'EARTH_GRAVITY',
    'DragConfig', 'drag_acceleration',
    'Trajectory', 'TrajectoryStrategy', 'AnalyticalStrategy', 'DragStrategy',
    'ANALYTICAL_DT', 'DRAG_DT', 'MAX_SAMPLES',
    'TrajectoryEngine',
    'compare_angles', 'best_angle', 'optimal_angle', 'compare_drag',
    'compare_planets', 'AngleResult', 'DragComparison', 'PlanetResult',
    'render_ascii_plot', 'format_samples', 'format_angle_table',
    'format_drag_table', 'format_planet_table',
]
