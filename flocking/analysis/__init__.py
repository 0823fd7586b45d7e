"""
Analysis module for flock metrics, plotting and exporting simulation results.
"""

from .metrics import flock_statistics, cohesion, polarization, average_speed, neighbor_counts
from .plotting import plot_metrics_over_time, plot_trial_comparison
from .export import export_results_to_csv, export_metrics_timeseries_to_csv

__all__ = [
    'flock_statistics',
    'cohesion',
    'polarization',
    'average_speed',
    'neighbor_counts',
    'plot_metrics_over_time',
    'plot_trial_comparison',
    'export_results_to_csv',
    'export_metrics_timeseries_to_csv'
]
