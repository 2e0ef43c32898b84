"""
Console Reports
===============
Text renderings of trajectories and comparison studies:
  1. Fixed-size ASCII plot of the flight path
  2. Sample-point table (time, x, y)
  3. Angle sweep, drag comparison and planet tables
"""

from typing import List

from .analysis import (
    AngleResult, DragComparison, PlanetResult, best_angle,
    range_gravity_products,
)
from .integrator import Trajectory


PLOT_WIDTH = 80
PLOT_HEIGHT = 25


def render_ascii_plot(trajectory: Trajectory, width: int = PLOT_WIDTH,
                      height: int = PLOT_HEIGHT) -> str:
    """
    Draw the trajectory on a width x height character grid.

    The bottom row is the ground.  Points are scaled linearly so that the
    range maps to the last column and the max height to the top row.
    S marks the launch, L the landing column.
    """
    canvas = [[' '] * width for _ in range(height)]
    canvas[height - 1] = ['─'] * width

    max_x = trajectory.range_total
    max_y = trajectory.max_height
    # Flat or empty flights would divide by zero
    scale_x = max_x if max_x != 0 else 1.0
    scale_y = max_y if max_y != 0 else 1.0

    for px, py in trajectory.points:
        col = int((px / scale_x) * (width - 1))
        row = height - 2 - int((py / scale_y) * (height - 2))
        if 0 <= col < width and 0 <= row < height - 1:
            canvas[row][col] = '*'

    canvas[height - 2][0] = 'S'

    end_col = int((max_x / scale_x) * (width - 1))
    if 0 <= end_col < width - 1:
        canvas[height - 2][end_col] = 'L'

    lines = ["  ┌" + '─' * width + "┐"]
    lines += ["  │" + ''.join(row) + "│" for row in canvas]
    lines.append("  └" + '─' * width + "┘")
    lines.append("  S = Start, L = Landing, * = Trajectory")
    lines.append(f"  Scale: {max_x:.1f} m horizontal, {max_y:.1f} m vertical")
    return '\n'.join(lines)


def format_samples(trajectory: Trajectory, rows: int = 10) -> str:
    """Every (n // rows)-th sample as a time / x / y table."""
    rule = '─' * 50
    lines = [rule, f"{'Time(s)':>10}{'X(m)':>15}{'Y(m)':>15}", rule]

    step = max(1, trajectory.sample_count // rows)
    t = trajectory.time
    for i in range(0, trajectory.sample_count, step):
        lines.append(f"{t[i]:>10.2f}{trajectory.x[i]:>15.2f}"
                     f"{trajectory.y[i]:>15.2f}")
    lines.append(rule)
    return '\n'.join(lines)


def format_angle_table(results: List[AngleResult]) -> str:
    rule = '─' * 60
    lines = [rule, f"{'Angle':>15}{'Range(m)':>20}{'Max Height(m)':>20}", rule]
    for r in results:
        lines.append(f"{r.angle:>14.0f}°{r.range_total:>20.2f}"
                     f"{r.max_height:>20.2f}")
    lines.append(rule)

    best = best_angle(results)
    if best is not None:
        lines.append(f"Optimal angle: {best.angle:.0f}° "
                     f"with range: {best.range_total:.2f} m")
    return '\n'.join(lines)


def format_drag_table(comparison: DragComparison) -> str:
    a, b = comparison.without_drag, comparison.with_drag
    rule = '─' * 70
    lines = [
        rule,
        f"{'':>30}{'Without Air':>20}{'With Air':>20}",
        rule,
        f"{'Range (m):':>30}{a.range_total:>20.2f}{b.range_total:>20.2f}",
        f"{'Max Height (m):':>30}{a.max_height:>20.2f}{b.max_height:>20.2f}",
        f"{'Flight Time (s):':>30}{a.flight_time:>20.2f}{b.flight_time:>20.2f}",
        rule,
        f"Range reduction due to air resistance: "
        f"{comparison.range_reduction_pct:.2f}%",
    ]
    return '\n'.join(lines)


def format_planet_table(results: List[PlanetResult]) -> str:
    rule = '─' * 90
    lines = [
        rule,
        f"{'Planet':>15}{'Gravity(m/s²)':>15}{'Range(m)':>20}"
        f"{'Max Height(m)':>20}{'Range×g':>20}",
        rule,
    ]
    for r, rg in zip(results, range_gravity_products(results)):
        lines.append(f"{r.name:>15}{r.gravity:>15.2f}{r.range_total:>20.2f}"
                     f"{r.max_height:>20.2f}{rg:>20.1f}")
    lines.append(rule)
    return '\n'.join(lines)
