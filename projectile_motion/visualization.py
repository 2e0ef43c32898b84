"""
Visualization
=============
Static matplotlib figures for trajectory analysis:
  1. Single trajectory (altitude vs range)
  2. Angle sweep (range and max height vs launch angle)
  3. With vs without air resistance
  4. Planetary comparison
"""

import os
from typing import List

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .analysis import AngleResult, DragComparison, PlanetResult, best_angle
from .integrator import Trajectory


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'legend': dict(facecolor='#1a1a1a', edgecolor='#444', labelcolor='#e0e0e0'),
}


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _save(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Single Trajectory Plot
# ══════════════════════════════════════════════════════════════════════════

def plot_trajectory(trajectory: Trajectory, save_path: str = None) -> plt.Figure:
    """Altitude vs downrange for a single trajectory."""
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    ax.plot(trajectory.x, trajectory.y, color=STYLE['accent_colors'][0],
            linewidth=2.5, label=f'{trajectory.method} (dt={trajectory.dt}s)')

    if trajectory.sample_count:
        ax.plot(0, 0, 'o', color='#00e676', markersize=10,
                label='Launch', zorder=5)
        ax.plot(trajectory.x[-1], trajectory.y[-1], 'x', color='#ff5252',
                markersize=12, markeredgewidth=3, label='Landing', zorder=5)
        idx_max = int(np.argmax(trajectory.y))
        ax.plot(trajectory.x[idx_max], trajectory.y[idx_max], '^',
                color='#ffeb3b', markersize=10, label='Apex', zorder=5)

    title = 'Projectile Trajectory'
    if trajectory.params is not None:
        p = trajectory.params
        title += (f' (v₀={p.initial_velocity:.0f} m/s, θ={p.angle:.0f}°, '
                  f'g={p.gravity:.2f} m/s²)')
    ax.set_xlabel('Horizontal distance (m)', fontsize=12)
    ax.set_ylabel('Height (m)', fontsize=12)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.legend(loc='upper right', fontsize=10, **STYLE['legend'])
    ax.set_ylim(bottom=0)

    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Angle Sweep
# ══════════════════════════════════════════════════════════════════════════

def plot_angle_sweep(results: List[AngleResult],
                     save_path: str = None) -> plt.Figure:
    """Range and max height against launch angle."""
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    _apply_dark_style(fig, axes)

    angles = [r.angle for r in results]

    ax = axes[0]
    ax.plot(angles, [r.range_total for r in results], 'o-',
            color='#00d4ff', linewidth=2, markersize=7)
    best = best_angle(results)
    if best is not None:
        ax.plot(best.angle, best.range_total, '*', color='#ffeb3b',
                markersize=16, label=f'Best: {best.angle:.0f}°', zorder=5)
        ax.legend(fontsize=10, **STYLE['legend'])
    ax.set_xlabel('Launch angle (°)')
    ax.set_ylabel('Range (m)')
    ax.set_title('Range vs Angle', fontweight='bold')

    ax = axes[1]
    ax.plot(angles, [r.max_height for r in results], 's--',
            color='#ff6b35', linewidth=2, markersize=7)
    ax.set_xlabel('Launch angle (°)')
    ax.set_ylabel('Max height (m)')
    ax.set_title('Max Height vs Angle', fontweight='bold')

    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  3. Drag Comparison
# ══════════════════════════════════════════════════════════════════════════

def plot_drag_comparison(comparison: DragComparison,
                         save_path: str = None) -> plt.Figure:
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    a, b = comparison.without_drag, comparison.with_drag
    ax.plot(a.x, a.y, color='#00d4ff', linewidth=2, label='Without air')
    ax.plot(b.x, b.y, color='#ff6b35', linewidth=2, linestyle='--',
            label='With air')
    ax.set_xlabel('Horizontal distance (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title(f'Air Resistance: range reduced by '
                 f'{comparison.range_reduction_pct:.1f}%', fontweight='bold')
    ax.legend(fontsize=10, **STYLE['legend'])
    ax.set_ylim(bottom=0)

    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  4. Planetary Comparison
# ══════════════════════════════════════════════════════════════════════════

def plot_planets(results: List[PlanetResult],
                 save_path: str = None) -> plt.Figure:
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    colors = STYLE['accent_colors']
    for i, r in enumerate(results):
        ax.plot(r.trajectory.x, r.trajectory.y, color=colors[i % len(colors)],
                linewidth=2, label=f'{r.name} (g={r.gravity:.2f})')
    ax.set_xlabel('Horizontal distance (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title('Same Launch on Different Bodies', fontweight='bold')
    ax.legend(fontsize=10, **STYLE['legend'])
    ax.set_ylim(bottom=0)

    plt.tight_layout()
    _save(fig, save_path)
    return fig
