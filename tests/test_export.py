"""Tests for CSV/JSON export, aggregate statistics and plotting."""

import csv
import json

import pytest

from leaderflock.analysis import plotting
from leaderflock.analysis.export import (
    TIMESERIES_FIELDS, calculate_aggregate_stats, export_report, export_results_to_csv,
    export_timeseries_to_csv,
)


def sample(frame, cohesion=50.0, speed=200.0):
    return {
        "frame": frame, "elapsed": frame / 60, "boid_count": 5, "leader_speed": 141.4,
        "avg_speed": speed, "max_speed": speed + 50, "flock_cohesion": cohesion,
        "leader_distance": 80.0, "agents_in_obstacles": 0,
    }


def run_result(seed, cohesion, speed):
    return {
        "seed": seed, "flock_mode": "snapshot", "frames": 20, "final_boid_count": 5,
        "obstacle_count": 4, "avg_cohesion": cohesion, "avg_speed": speed,
        "avg_leader_distance": 80.0, "peak_speed": speed + 50, "obstacle_intrusions": 0,
        "final_cohesion": cohesion, "final_avg_speed": speed, "elapsed_time_seconds": 0.5,
        "stats_over_time": [sample(10, cohesion, speed), sample(20, cohesion, speed)],
    }


class TestExport:

    def test_timeseries_csv(self, tmp_path):
        path = export_timeseries_to_csv(run_result(1, 50.0, 200.0), str(tmp_path / "ts.csv"))
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 2
        assert list(rows[0].keys()) == TIMESERIES_FIELDS
        assert rows[1]["frame"] == "20"

    def test_results_csv(self, tmp_path):
        results = {
            "snapshot": [run_result(1, 50.0, 200.0)],
            "sequential": [run_result(1, 60.0, 210.0), run_result(2, 70.0, 220.0)],
        }
        path = export_results_to_csv(results, str(tmp_path / "results.csv"))
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["run_id"] for r in rows] == ["snapshot_trial1", "sequential_trial1", "sequential_trial2"]
        assert rows[2]["avg_cohesion"] == "70.0"

    def test_report_json(self, tmp_path):
        path = export_report({"modes": {"snapshot": {}}}, str(tmp_path / "report.json"))
        with open(path) as f:
            assert json.load(f) == {"modes": {"snapshot": {}}}


class TestAggregateStats:

    def test_mean_and_sample_std(self):
        stats = calculate_aggregate_stats([run_result(1, 10.0, 100.0), run_result(2, 20.0, 100.0)])
        assert stats["avg_cohesion_mean"] == pytest.approx(15.0)
        assert stats["avg_cohesion_std"] == pytest.approx(7.0711, rel=1e-4)
        assert stats["avg_speed_std"] == 0.0

    def test_single_trial(self):
        stats = calculate_aggregate_stats([run_result(1, 10.0, 100.0)])
        assert stats["avg_cohesion_mean"] == 10.0
        assert stats["avg_cohesion_std"] == 0.0

    def test_empty(self):
        assert calculate_aggregate_stats([]) == {}


@pytest.mark.skipif(not plotting.MATPLOTLIB_AVAILABLE, reason="matplotlib not installed")
class TestPlotting:

    def test_run_timeseries_plot(self, tmp_path):
        out = plotting.plot_run_timeseries(run_result(1, 50.0, 200.0), str(tmp_path / "ts.png"))
        assert (tmp_path / "ts.png").exists()
        assert out.endswith("ts.png")

    def test_mode_comparison_plot(self, tmp_path):
        results = {
            "snapshot": [run_result(1, 50.0, 200.0)],
            "sequential": [run_result(1, 60.0, 210.0)],
        }
        plotting.plot_mode_comparison(results, str(tmp_path / "cmp.png"))
        assert (tmp_path / "cmp.png").exists()
