"""
Comparison Studies
==================
Orchestration on top of repeated engine runs:
  - Angle sweep and best angle for maximum range
  - Continuous optimal angle (bounded scalar search)
  - Same launch with and without air resistance
  - Same launch under different planetary gravities

Every run uses its own TrajectoryEngine.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
from scipy.optimize import minimize_scalar

from .engine import TrajectoryEngine
from .integrator import Trajectory
from .parameters import (
    LaunchParameters, EARTH_GRAVITY, PLANETS,
    DEFAULT_DRAG_COEFFICIENT, DEFAULT_MASS,
)


DEFAULT_SWEEP_ANGLES = tuple(range(15, 76, 5))   # degrees


@dataclass
class AngleResult:
    """Outcome of one launch angle in a sweep."""
    angle: float
    range_total: float
    max_height: float
    flight_time: float


@dataclass
class DragComparison:
    """Same launch computed with drag off and on."""
    without_drag: Trajectory
    with_drag: Trajectory

    @property
    def range_reduction_pct(self) -> float:
        """Percentage of drag-free range lost to air resistance."""
        r0 = self.without_drag.range_total
        if r0 == 0:
            return 0.0
        return 100.0 * (r0 - self.with_drag.range_total) / r0


@dataclass
class PlanetResult:
    """Drag-free launch under one planet's gravity."""
    name: str
    gravity: float
    trajectory: Trajectory

    @property
    def range_total(self) -> float:
        return self.trajectory.range_total

    @property
    def max_height(self) -> float:
        return self.trajectory.max_height


def run(params: LaunchParameters) -> Trajectory:
    """Compute one trajectory on a fresh engine."""
    return TrajectoryEngine().compute_trajectory(params)


def compare_angles(velocity: float,
                   angles: Iterable[float] = DEFAULT_SWEEP_ANGLES,
                   gravity: float = EARTH_GRAVITY,
                   drag_enabled: bool = False,
                   drag_coefficient: float = DEFAULT_DRAG_COEFFICIENT,
                   mass: float = DEFAULT_MASS) -> List[AngleResult]:
    """Run the same launch at each angle and collect the metrics."""
    results = []
    for angle in angles:
        traj = run(LaunchParameters(
            initial_velocity=velocity,
            angle=float(angle),
            gravity=gravity,
            drag_enabled=drag_enabled,
            drag_coefficient=drag_coefficient,
            mass=mass,
        ))
        results.append(AngleResult(
            angle=float(angle),
            range_total=traj.range_total,
            max_height=traj.max_height,
            flight_time=traj.flight_time,
        ))
    return results


def best_angle(results: List[AngleResult]) -> Optional[AngleResult]:
    """Entry with the longest range; the first one wins a tie."""
    best = None
    for r in results:
        if best is None or r.range_total > best.range_total:
            best = r
    return best


def optimal_angle(velocity: float, gravity: float = EARTH_GRAVITY,
                  drag_enabled: bool = False,
                  drag_coefficient: float = DEFAULT_DRAG_COEFFICIENT,
                  mass: float = DEFAULT_MASS,
                  bounds: Tuple[float, float] = (1.0, 89.0)) -> float:
    """
    Launch angle (degrees) maximizing range, by bounded Brent search.

    The sampled range is a staircase in the angle (one sample step per
    stair), so the answer is only good to a degree or two.
    """
    def negative_range(angle):
        return -run(LaunchParameters(
            initial_velocity=velocity,
            angle=float(angle),
            gravity=gravity,
            drag_enabled=drag_enabled,
            drag_coefficient=drag_coefficient,
            mass=mass,
        )).range_total

    res = minimize_scalar(negative_range, bounds=bounds, method='bounded',
                          options={'xatol': 0.05})
    return float(res.x)


def compare_drag(velocity: float, angle: float,
                 gravity: float = EARTH_GRAVITY,
                 drag_coefficient: float = DEFAULT_DRAG_COEFFICIENT,
                 mass: float = DEFAULT_MASS) -> DragComparison:
    base = LaunchParameters(
        initial_velocity=velocity,
        angle=angle,
        gravity=gravity,
        drag_enabled=False,
        drag_coefficient=drag_coefficient,
        mass=mass,
    )
    dragged = LaunchParameters(
        initial_velocity=velocity,
        angle=angle,
        gravity=gravity,
        drag_enabled=True,
        drag_coefficient=drag_coefficient,
        mass=mass,
    )
    return DragComparison(without_drag=run(base), with_drag=run(dragged))


def compare_planets(velocity: float, angle: float,
                    planets: Dict[str, float] = PLANETS) -> List[PlanetResult]:
    """Drag-free launch on each body in planets (name -> gravity)."""
    return [
        PlanetResult(
            name=name,
            gravity=g,
            trajectory=run(LaunchParameters(
                initial_velocity=velocity, angle=angle, gravity=g,
            )),
        )
        for name, g in planets.items()
    ]


def range_gravity_products(results: List[PlanetResult]) -> np.ndarray:
    """range * g for each planet; constant for ideal drag-free flight."""
    return np.array([r.range_total * r.gravity for r in results])
