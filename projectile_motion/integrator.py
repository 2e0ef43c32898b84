"""
Trajectory Strategies
=====================
Two ways of turning LaunchParameters into a sampled trajectory:

1. **Analytical** (drag off): closed-form constant-gravity kinematics,
       x(t) = vx t,   y(t) = vy t - ½ g t²
   sampled every 0.02 s up to the flight time T = 2 vy / g.

2. **Drag** (drag on): fixed-step explicit Euler with quadratic drag,
   dt = 0.01 s, velocity updated before position:
       v_{n+1} = v_n + a(v_n) dt
       x_{n+1} = x_n + v_{n+1} dt

Launch and landing are both at y = 0.  Neither path interpolates the exact
landing point: the last stored sample is the last one with y >= 0.

Output: Trajectory dataclass with read-only position arrays.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .drag_model import DragConfig, drag_acceleration
from .parameters import LaunchParameters


logger = logging.getLogger(__name__)

ANALYTICAL_DT = 0.02     # s
DRAG_DT       = 0.01     # s
MAX_SAMPLES   = 10_000   # hard cap on the drag path

# Memory ceiling for the analytical path (8 MB per array); ordinary
# launches stay far below it
ANALYTICAL_MAX_SAMPLES = 1_000_000


@dataclass(frozen=True, eq=False)
class Trajectory:
    """Sampled flight path of one run."""
    method: str                # 'analytical' or 'drag'
    dt: float                  # sample step (s)
    x: np.ndarray              # downrange (m)
    y: np.ndarray              # altitude (m)
    params: Optional[LaunchParameters] = None
    truncated: bool = False    # sample cap reached before landing

    def __post_init__(self):
        for name in ('x', 'y'):
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        if self.x.shape != self.y.shape:
            raise ValueError(
                f"x and y must have the same length, got "
                f"{len(self.x)} and {len(self.y)}"
            )

    @classmethod
    def empty(cls, method: str = 'analytical', dt: float = ANALYTICAL_DT):
        return cls(method=method, dt=dt, x=[], y=[])

    def __len__(self) -> int:
        return len(self.x)

    @property
    def sample_count(self) -> int:
        return len(self.x)

    @property
    def time(self) -> np.ndarray:
        """Sample times, t = index * dt."""
        return np.arange(self.sample_count) * self.dt

    @property
    def points(self) -> List[Tuple[float, float]]:
        return list(zip(self.x.tolist(), self.y.tolist()))

    @property
    def max_height(self) -> float:
        """Highest sampled altitude (m), 0 when empty."""
        if self.sample_count == 0:
            return 0.0
        return float(np.max(self.y))

    @property
    def range_total(self) -> float:
        """Downrange position of the last sample (m), 0 when empty."""
        if self.sample_count == 0:
            return 0.0
        return float(self.x[-1])

    @property
    def flight_time(self) -> float:
        """sample_count * dt (s)."""
        return self.sample_count * self.dt

    @property
    def impact_velocity(self) -> Optional[float]:
        """
        Impact speed (m/s) for the analytical path.

        With launch and landing at the same height, energy conservation
        gives an impact speed equal to the launch speed.  Under drag the
        value depends on the whole path and is not reported (None).
        """
        if self.method != 'analytical' or self.params is None:
            return None
        return float(self.params.initial_velocity)

    def summary(self) -> str:
        """Human-readable summary string."""
        p = self.params or LaunchParameters()
        impact = self.impact_velocity
        impact_line = (f"║  Impact vel   : {impact:>10.2f} m/s{'':<22s} ║"
                       if impact is not None else
                       f"║  Impact vel   : {'n/a (drag)':>10s}{'':<26s} ║")
        lines = [
            f"╔══════════════════════════════════════════════════════╗",
            f"║  PROJECTILE MOTION SIMULATOR{'':<24s} ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Launch vel   : {p.initial_velocity:>10.2f} m/s{'':<22s} ║",
            f"║  Angle        : {p.angle:>10.2f} °{'':<24s} ║",
            f"║  Gravity      : {p.gravity:>10.2f} m/s²{'':<21s} ║",
            f"║  Air resist.  : {'ON' if p.drag_enabled else 'OFF':>10s}{'':<26s} ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Max height   : {self.max_height:>10.2f} m{'':<24s} ║",
            f"║  Range        : {self.range_total:>10.2f} m{'':<24s} ║",
            f"║  Flight time  : {self.flight_time:>10.2f} s{'':<24s} ║",
            impact_line,
            f"╚══════════════════════════════════════════════════════╝",
        ]
        if self.truncated:
            lines.append(f"  (stopped after {self.sample_count} samples "
                         f"before landing)")
        return '\n'.join(lines)


def _origin_only(method: str, dt: float,
                 params: LaunchParameters) -> Trajectory:
    return Trajectory(method=method, dt=dt, x=[0.0], y=[0.0], params=params)


class TrajectoryStrategy(ABC):
    """One algorithm for computing a Trajectory from LaunchParameters."""

    method: str = ''

    @abstractmethod
    def compute(self, params: LaunchParameters) -> Trajectory:
        ...


class AnalyticalStrategy(TrajectoryStrategy):
    """Closed-form drag-free flight, sampled every dt seconds."""

    method = 'analytical'

    def __init__(self, dt: float = ANALYTICAL_DT,
                 max_samples: int = ANALYTICAL_MAX_SAMPLES):
        self.dt = dt
        self.max_samples = max_samples

    def compute(self, params: LaunchParameters) -> Trajectory:
        params.validate()
        vx, vy = params.velocity_components()
        g = params.gravity

        # Pointed at or below the ground: nothing to integrate
        if vy <= 0:
            return _origin_only(self.method, self.dt, params)

        total_time = 2.0 * vy / g
        steps = total_time / self.dt
        truncated = bool(steps >= self.max_samples)
        if truncated:
            n_steps = self.max_samples - 1
            logger.warning(
                "Analytical sampling stopped at %d samples before landing "
                "(v0=%.3g m/s, angle=%.1f°, g=%.3g m/s²)",
                self.max_samples, params.initial_velocity, params.angle, g,
            )
        else:
            n_steps = int(np.floor(steps))

        # Integer sample index, no accumulated time
        t = np.arange(n_steps + 1) * self.dt
        x = vx * t
        y = vy * t - 0.5 * g * t ** 2

        below = np.flatnonzero(y < 0)
        if below.size:
            x, y = x[:below[0]], y[:below[0]]

        return Trajectory(method=self.method, dt=self.dt, x=x, y=y,
                          params=params, truncated=truncated)


class DragStrategy(TrajectoryStrategy):
    """
    Explicit Euler integration with quadratic drag.

    Stops at the first step that takes the projectile below y = 0, or after
    max_samples stored points, whichever comes first.
    """

    method = 'drag'

    def __init__(self, dt: float = DRAG_DT, max_samples: int = MAX_SAMPLES,
                 drag: Optional[DragConfig] = None):
        self.dt = dt
        self.max_samples = max_samples
        self.drag = drag if drag is not None else DragConfig()

    def compute(self, params: LaunchParameters) -> Trajectory:
        params.validate()
        vx, vy = params.velocity_components()
        dt = self.dt

        pos = np.zeros(2)
        vel = np.array([vx, vy])
        gravity = np.array([0.0, -params.gravity])

        xs, ys = [], []
        while pos[1] >= 0 and len(xs) < self.max_samples:
            xs.append(pos[0])
            ys.append(pos[1])

            acc = drag_acceleration(vel, params.drag_coefficient,
                                    params.mass, self.drag) + gravity

            # Velocity first, then position
            vel = vel + acc * dt
            pos = pos + vel * dt

        truncated = bool(pos[1] >= 0)
        if truncated:
            logger.warning(
                "Drag integration stopped at %d samples before landing "
                "(v0=%.1f m/s, angle=%.1f°, mass=%.3g kg)",
                len(xs), params.initial_velocity, params.angle, params.mass,
            )

        return Trajectory(method=self.method, dt=dt, x=xs, y=ys,
                          params=params, truncated=truncated)
