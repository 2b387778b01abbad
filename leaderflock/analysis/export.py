"""
Export functions for saving run results to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List

import numpy as np

SUMMARY_FIELDS = [
    'run_id', 'flock_mode', 'seed', 'frames', 'final_boid_count', 'obstacle_count',
    'avg_cohesion', 'avg_speed', 'avg_leader_distance', 'peak_speed', 'obstacle_intrusions',
]

TIMESERIES_FIELDS = [
    'frame', 'elapsed', 'boid_count', 'leader_speed', 'avg_speed', 'max_speed',
    'flock_cohesion', 'leader_distance', 'agents_in_obstacles',
]

AGGREGATE_METRICS = [
    "avg_cohesion", "avg_speed", "avg_leader_distance", "peak_speed",
    "obstacle_intrusions", "final_cohesion", "final_avg_speed", "elapsed_time_seconds",
]


def export_results_to_csv(results: Dict[str, List[Dict]], filename: str = "flock_results.csv") -> str:
    """
    Export per-run summaries to CSV.

    Args:
        results: Mapping of flock mode to the list of run results for that mode
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()

        for mode, runs in results.items():
            for index, result in enumerate(runs, start=1):
                row = {key: result.get(key, '') for key in SUMMARY_FIELDS}
                row['run_id'] = f"{mode}_trial{result.get('trial', index)}"
                row['flock_mode'] = mode
                writer.writerow(row)

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_timeseries_to_csv(result: Dict[str, Any], filename: str = None) -> str:
    """
    Export the sampled statistics of one run to CSV.

    Args:
        result: Run result containing ``stats_over_time``
        filename: Output filename (auto-generated if None)

    Returns:
        Path to saved CSV file
    """
    if filename is None:
        filename = f"flock_timeseries_{result.get('flock_mode', 'run')}_seed{result.get('seed')}.csv"

    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TIMESERIES_FIELDS, extrasaction='ignore')
        writer.writeheader()
        for sample in result.get("stats_over_time", []):
            writer.writerow(sample)

    print(f"  Time series saved to: {filename}")
    return filename


def export_report(report: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export a full report to JSON.

    Args:
        report: Report dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(report, f, indent=2)

    print(f"\nReport saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with ``<metric>_mean`` and ``<metric>_std`` (sample std) for each metric
    """
    if not trial_results:
        return {}

    aggregates = {}
    for metric in AGGREGATE_METRICS:
        values = np.array([r[metric] for r in trial_results if r.get(metric) is not None], dtype=float)
        if values.size == 0:
            continue
        aggregates[f"{metric}_mean"] = float(values.mean())
        aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return aggregates
