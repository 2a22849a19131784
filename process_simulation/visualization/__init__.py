"""Visualization utilities for process simulation runs."""

from .plotting import (
    plot_timeline,
    plot_wait_distribution,
    plot_line_length,
    plot_distribution_comparison,
    create_performance_report
)

__all__ = [
    'plot_timeline',
    'plot_wait_distribution',
    'plot_line_length',
    'plot_distribution_comparison',
    'create_performance_report'
]
