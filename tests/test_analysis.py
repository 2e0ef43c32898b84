"""
Tests for comparison studies, console reports and figures.
Run: python -m pytest tests/ -v
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from projectile_motion.parameters import LaunchParameters, InvalidParameter, PLANETS
from projectile_motion.integrator import Trajectory
from projectile_motion.engine import TrajectoryEngine
from projectile_motion.analysis import (
    AngleResult, compare_angles, best_angle, optimal_angle, compare_drag,
    compare_planets, range_gravity_products, DEFAULT_SWEEP_ANGLES,
)
from projectile_motion.report import (
    render_ascii_plot, format_samples, format_angle_table,
    format_drag_table, format_planet_table,
)


class TestAngleStudies:

    def test_sweep_covers_15_to_75(self):
        results = compare_angles(50.0)
        assert [r.angle for r in results] == list(map(float, DEFAULT_SWEEP_ANGLES))
        assert results[0].angle == 15.0 and results[-1].angle == 75.0

    def test_best_angle_is_45_without_drag(self):
        for v in (20.0, 50.0, 120.0):
            assert best_angle(compare_angles(v)).angle == 45.0

    def test_best_angle_first_wins_tie(self):
        results = [AngleResult(10.0, 5.0, 1.0, 1.0),
                   AngleResult(20.0, 5.0, 2.0, 1.0)]
        assert best_angle(results).angle == 10.0
        assert best_angle([]) is None

    def test_optimal_angle_near_45(self):
        assert abs(optimal_angle(50.0) - 45.0) < 5.0

    def test_invalid_velocity_propagates(self):
        with pytest.raises(InvalidParameter):
            compare_angles(-10.0)


class TestDragComparison:

    def test_drag_reduces_range(self):
        cmp = compare_drag(50.0, 45.0)
        assert cmp.with_drag.range_total < cmp.without_drag.range_total
        assert 0.0 < cmp.range_reduction_pct < 100.0
        assert cmp.without_drag.method == 'analytical'
        assert cmp.with_drag.method == 'drag'

    def test_reduction_zero_for_flat_launch(self):
        cmp = compare_drag(50.0, 0.0)
        assert cmp.range_reduction_pct == 0.0

    def test_heavier_projectile_loses_less(self):
        light = compare_drag(50.0, 45.0, mass=0.5)
        heavy = compare_drag(50.0, 45.0, mass=10.0)
        assert heavy.range_reduction_pct < light.range_reduction_pct


class TestPlanets:

    def test_all_planets_compared(self):
        results = compare_planets(50.0, 45.0)
        assert [r.name for r in results] == list(PLANETS)

    def test_lower_gravity_goes_further(self):
        results = {r.name: r for r in compare_planets(50.0, 45.0)}
        assert results['Moon'].range_total > results['Mars'].range_total
        assert results['Mars'].range_total > results['Earth'].range_total
        assert results['Earth'].range_total > results['Jupiter'].range_total

    def test_range_inversely_proportional_to_gravity(self):
        products = range_gravity_products(compare_planets(50.0, 45.0))
        exact = 50.0 ** 2
        assert np.all(np.abs(products - exact) / exact < 0.01)


class TestReports:

    def test_ascii_plot_layout(self):
        traj = TrajectoryEngine().compute_trajectory(LaunchParameters())
        text = render_ascii_plot(traj)
        lines = text.split('\n')
        # frame + 25 rows + frame + legend + scale
        assert len(lines) == 25 + 4
        assert all(len(l) == 80 + 4 for l in lines[:27])
        assert lines[25] == "  │" + '─' * 80 + "│"
        assert lines[24].startswith("  │S")
        assert '*' in text
        assert "Scale: 254.6 m horizontal, 63.8 m vertical" in text

    def test_ascii_plot_apex_on_top_row(self):
        traj = TrajectoryEngine().compute_trajectory(LaunchParameters())
        lines = render_ascii_plot(traj).split('\n')
        assert '*' in lines[1]

    def test_ascii_plot_degenerate(self):
        traj = TrajectoryEngine().compute_trajectory(LaunchParameters(angle=0.0))
        text = render_ascii_plot(traj)
        # landing column coincides with the start
        assert text.split("\n")[24][3] == "L"
        assert "Scale: 0.0 m horizontal, 0.0 m vertical" in text

    def test_ascii_plot_empty(self):
        text = render_ascii_plot(Trajectory.empty(), width=20, height=5)
        assert len(text.split('\n')) == 5 + 4

    def test_sample_table(self):
        traj = TrajectoryEngine().compute_trajectory(LaunchParameters())
        text = format_samples(traj, rows=10)
        data = text.split('\n')[3:-1]
        step = traj.sample_count // 10
        assert len(data) == len(range(0, traj.sample_count, step))
        assert data[0].split() == ['0.00', '0.00', '0.00']

    def test_comparison_tables(self):
        assert "Optimal angle: 45°" in format_angle_table(compare_angles(50.0))
        assert "Range reduction" in format_drag_table(compare_drag(50.0, 45.0))
        table = format_planet_table(compare_planets(50.0, 45.0))
        for name in PLANETS:
            assert name in table


class TestFigures:

    def test_figures_saved(self, tmp_path):
        import matplotlib.pyplot as plt
        from projectile_motion.visualization import (
            plot_trajectory, plot_angle_sweep, plot_drag_comparison,
            plot_planets,
        )
        traj = TrajectoryEngine().compute_trajectory(LaunchParameters())
        cases = [
            ('traj.png', plot_trajectory, traj),
            ('sweep.png', plot_angle_sweep, compare_angles(50.0)),
            ('drag.png', plot_drag_comparison, compare_drag(50.0, 45.0)),
            ('planets.png', plot_planets, compare_planets(50.0, 45.0)),
        ]
        for name, plot, data in cases:
            path = tmp_path / name
            fig = plot(data, save_path=str(path))
            plt.close(fig)
            assert path.exists() and path.stat().st_size > 0


class TestRunner:

    @pytest.fixture(autouse=True)
    def _reset_logging(self):
        import main
        yield
        main.logger.handlers.clear()

    def test_main_runs(self, tmp_path, capsys):
        import main
        assert main.main(['--no-plots', '--output', str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert 'PHASE 4' in out

    def test_main_rejects_bad_input(self):
        import main
        assert main.main(['--velocity', '-5', '--no-plots']) == 2
        assert main.main(['--planet', 'Pluto', '--no-plots']) == 2

    def test_main_rejects_unusable_drag_settings(self, capsys):
        """The drag comparison always runs, even without --drag."""
        import main
        assert main.main(['--mass', '0', '--no-plots']) == 2
        assert main.main(['--cd', '0', '--no-plots']) == 2
        assert 'PHASE 1' not in capsys.readouterr().out

    def test_log_level_choices(self):
        import main
        parser = main.build_parser()
        assert parser.parse_args(['--log-level', 'debug']).log_level == 'DEBUG'
        with pytest.raises(SystemExit):
            parser.parse_args(['--log-level', 'verbose'])


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
