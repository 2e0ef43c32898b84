"""
Trajectory Engine
=================
Front door to the physics: picks the analytical or drag strategy from
LaunchParameters.drag_enabled, keeps the most recent Trajectory and answers
metric queries against it.

Each engine owns its trajectory.  Use one engine per run when computing
several trajectories side by side.
"""

import logging
from typing import Optional

from .integrator import (
    AnalyticalStrategy, DragStrategy, Trajectory, TrajectoryStrategy,
)
from .parameters import LaunchParameters


logger = logging.getLogger(__name__)


class TrajectoryEngine:
    """
    Computes trajectories and reports range, max height, flight time and
    impact velocity for the latest one.
    """

    def __init__(self, analytical: Optional[TrajectoryStrategy] = None,
                 drag: Optional[TrajectoryStrategy] = None):
        """
        Parameters
        ----------
        analytical : TrajectoryStrategy, optional
            Used when drag is disabled (default AnalyticalStrategy())
        drag : TrajectoryStrategy, optional
            Used when drag is enabled (default DragStrategy())
        """
        self.analytical = analytical or AnalyticalStrategy()
        self.drag = drag or DragStrategy()
        self._trajectory: Optional[Trajectory] = None

    def select_strategy(self, params: LaunchParameters) -> TrajectoryStrategy:
        return self.drag if params.drag_enabled else self.analytical

    def compute_trajectory(self, params: LaunchParameters) -> Trajectory:
        """
        Compute a new trajectory, replacing the previous one.

        Raises
        ------
        InvalidParameter
            If params fail validation.  The stored trajectory is left
            untouched in that case.
        """
        params.validate()
        strategy = self.select_strategy(params)
        trajectory = strategy.compute(params)
        logger.debug("%s trajectory: %d samples, range %.2f m",
                     strategy.method, trajectory.sample_count,
                     trajectory.range_total)
        self._trajectory = trajectory
        return trajectory

    @property
    def trajectory(self) -> Trajectory:
        """Latest trajectory, or an empty one before the first run."""
        if self._trajectory is None:
            return Trajectory.empty()
        return self._trajectory

    def max_height(self) -> float:
        return self.trajectory.max_height

    def range(self) -> float:
        return self.trajectory.range_total

    def flight_time(self) -> float:
        return self.trajectory.flight_time

    def impact_velocity(self) -> Optional[float]:
        """Launch speed for drag-free runs; None under drag or before any run."""
        return self.trajectory.impact_velocity
