#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE MOTION SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Executes the simulation pipeline:
    1. Single trajectory (summary, ASCII plot, sample table)
    2. Angle optimization (15°–75° sweep + continuous optimum)
    3. With vs without air resistance
    4. Planetary comparison
    5. Figures (PNG) for all of the above

  Usage:
    python main.py                              # defaults: 50 m/s at 45°
    python main.py --velocity 80 --angle 30 --drag
    python main.py --planet Moon --no-plots
═══════════════════════════════════════════════════════════════════════════════
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import replace

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from projectile_motion.parameters import (
    LaunchParameters, InvalidParameter, planet_gravity,
    DEFAULT_VELOCITY, DEFAULT_ANGLE, EARTH_GRAVITY,
    DEFAULT_DRAG_COEFFICIENT, DEFAULT_MASS,
)
from projectile_motion.engine import TrajectoryEngine
from projectile_motion.analysis import (
    compare_angles, optimal_angle, compare_drag, compare_planets,
)
from projectile_motion.report import (
    render_ascii_plot, format_samples, format_angle_table,
    format_drag_table, format_planet_table,
)


logger = logging.getLogger("projectile_motion")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger


def banner():
    print("""
╔═══════════════════════════════════════════════════════╗
║                                                       ║
║     PROJECTILE MOTION SIMULATOR                       ║
║     Physics Simulation & Analysis Tool                ║
║                                                       ║
╚═══════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="2D projectile motion with optional air resistance")
    parser.add_argument("--velocity", type=float, default=DEFAULT_VELOCITY,
                        help="Initial velocity (m/s)")
    parser.add_argument("--angle", type=float, default=DEFAULT_ANGLE,
                        help="Launch angle (degrees, 0-90)")
    grav = parser.add_mutually_exclusive_group()
    grav.add_argument("--gravity", type=float, default=None,
                      help=f"Gravity (m/s², default {EARTH_GRAVITY})")
    grav.add_argument("--planet", type=str, default=None,
                      help="Use a planet's surface gravity (Earth, Moon, ...)")
    parser.add_argument("--drag", action="store_true",
                        help="Include air resistance")
    parser.add_argument("--cd", type=float, default=DEFAULT_DRAG_COEFFICIENT,
                        help="Drag coefficient")
    parser.add_argument("--mass", type=float, default=DEFAULT_MASS,
                        help="Projectile mass (kg)")
    parser.add_argument("--output", type=str, default="outputs",
                        help="Directory for saved figures")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip matplotlib figures")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def params_from_args(args) -> LaunchParameters:
    if args.planet is not None:
        gravity = planet_gravity(args.planet)
    elif args.gravity is not None:
        gravity = args.gravity
    else:
        gravity = EARTH_GRAVITY

    params = LaunchParameters(
        initial_velocity=args.velocity,
        angle=args.angle,
        gravity=gravity,
        drag_enabled=args.drag,
        drag_coefficient=args.cd,
        mass=args.mass,
    ).validate()

    # The drag comparison always runs, so mass and cd must be usable
    replace(params, drag_enabled=True).validate()
    return params


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    start_time = time.time()

    try:
        params = params_from_args(args)
    except InvalidParameter as e:
        logger.error("%s", e)
        return 2
    except ValueError as e:  # unknown planet
        logger.error("%s", e)
        return 2

    banner()

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Single Simulation
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Simulation")
    engine = TrajectoryEngine()
    trajectory = engine.compute_trajectory(params)
    print(trajectory.summary())
    print("\n  TRAJECTORY VISUALIZATION:\n")
    print(render_ascii_plot(trajectory))
    print("\n  TRAJECTORY DATA (sample points):")
    print(format_samples(trajectory))

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Angle Optimization
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Angle Optimization (no air resistance)")
    sweep = compare_angles(params.initial_velocity, gravity=params.gravity)
    print(format_angle_table(sweep))
    best = optimal_angle(params.initial_velocity, gravity=params.gravity)
    print(f"Continuous optimum: {best:.1f}°")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Air Resistance
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Air Resistance Comparison")
    drag_cmp = compare_drag(params.initial_velocity, params.angle,
                            gravity=params.gravity,
                            drag_coefficient=args.cd, mass=args.mass)
    print(format_drag_table(drag_cmp))

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Planets
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Planetary Comparison")
    planets = compare_planets(params.initial_velocity, params.angle)
    print(format_planet_table(planets))

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Figures
    # ══════════════════════════════════════════════════════════════════════
    if not args.no_plots:
        section("PHASE 5: Figures")
        import matplotlib.pyplot as plt
        from projectile_motion.visualization import (
            ensure_output_dir, plot_trajectory, plot_angle_sweep,
            plot_drag_comparison, plot_planets,
        )

        out = ensure_output_dir(args.output)
        figures = [
            ('01_trajectory.png', plot_trajectory, trajectory),
            ('02_angle_sweep.png', plot_angle_sweep, sweep),
            ('03_drag_comparison.png', plot_drag_comparison, drag_cmp),
            ('04_planets.png', plot_planets, planets),
        ]
        for name, plot, data in figures:
            fig = plot(data, save_path=f'{out}/{name}')
            plt.close(fig)
            print(f"  ✓ Saved: {out}/{name}")
    else:
        section("PHASE 5: Figures SKIPPED (--no-plots)")

    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"  Total runtime: {elapsed:.1f} seconds\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
