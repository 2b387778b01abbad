"""
Analysis module for plotting and exporting run results.
"""

from .plotting import plot_run_timeseries, plot_mode_comparison
from .export import (
    export_results_to_csv, export_timeseries_to_csv, export_report, calculate_aggregate_stats
)

__all__ = [
    'plot_run_timeseries',
    'plot_mode_comparison',
    'export_results_to_csv',
    'export_timeseries_to_csv',
    'export_report',
    'calculate_aggregate_stats',
]
