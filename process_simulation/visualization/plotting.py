"""
Visualization utilities for process simulation runs.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional
import seaborn as sns
from scipy import stats


def plot_timeline(result, max_processes: int = 50):
    """Gantt-like chart of waiting and service for the first processes."""
    records = result.records[:max_processes]

    fig, ax = plt.subplots(figsize=(12, 6))

    for i, record in enumerate(records):
        ax.barh(i, record.wait_time, left=record.arrival_time, height=0.6,
                color='orange', label='Waiting' if i == 0 else "")
        ax.barh(i, record.service_time, left=record.begin_time, height=0.6,
                color='steelblue', label='Service' if i == 0 else "")

    ax.set_xlabel('Time')
    ax.set_ylabel('Process')
    ax.set_title('Process Timeline')
    ax.invert_yaxis()
    if records:
        ax.legend()

    return fig


def plot_wait_distribution(result, bins: int = 30):
    """Histogram of wait times with a density estimate."""
    waits = result.wait_times

    fig, ax = plt.subplots(figsize=(10, 6))
    if waits:
        sns.histplot(waits, bins=bins, kde=len(set(waits)) > 1, ax=ax)
        ax.axvline(float(np.mean(waits)), color='red', linestyle='--', label='Mean')
        ax.axvline(float(np.median(waits)), color='green', linestyle=':', label='Median')
        ax.legend()
    else:
        ax.text(0.5, 0.5, 'No Wait Time Data',
                ha='center', va='center', transform=ax.transAxes)

    ax.set_xlabel('Wait Time')
    ax.set_title('Wait Time Distribution')
    return fig


def plot_line_length(result):
    """Step plot of the line length seen by each arrival."""
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.step(result.arrival_times, result.trace, where='post')
    ax.set_xlabel('Arrival Time')
    ax.set_ylabel('Processes Waiting')
    ax.set_title('Line Length at Each Arrival')
    ax.grid(True, alpha=0.3)

    return fig


def plot_distribution_comparison(samples: List[float], mean: float,
                                 title: str = "Distribution Comparison"):
    """Compare sampled times with the exponential distribution they came from."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(title)

    if not len(samples):
        for ax in (ax1, ax2):
            ax.text(0.5, 0.5, 'No Sample Data',
                    ha='center', va='center', transform=ax.transAxes)
        return fig

    ax1.hist(samples, bins=50, density=True, alpha=0.7,
             color='blue', label='Simulated')

    x_range = np.linspace(0, max(samples), 100)
    ax1.plot(x_range, stats.expon.pdf(x_range, scale=mean), 'r-', linewidth=2,
             label='Theoretical')

    ax1.set_xlabel('Value')
    ax1.set_ylabel('Density')
    ax1.set_title('PDF Comparison')
    ax1.legend()

    # Q-Q plot
    stats.probplot(samples, dist=stats.expon, sparams=(0, mean), plot=ax2)
    ax2.set_title('Q-Q Plot')

    return fig


def create_performance_report(result, save_path: Optional[str] = None):
    """Create a dashboard with the timeline, line trace, waits and summary."""
    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(16, 12))
    fig.suptitle('Process Simulation Report', fontsize=16)

    # Per-process waits
    ax1.bar(range(len(result)), result.wait_times, color='orange')
    ax1.set_xlabel('Process')
    ax1.set_ylabel('Wait Time')
    ax1.set_title('Wait Time per Process')

    # Line trace
    ax2.step(range(len(result)), result.trace, where='post')
    ax2.set_xlabel('Process')
    ax2.set_ylabel('Processes Waiting')
    ax2.set_title('Line Length at Arrival')

    # Wait distribution
    if len(result):
        sns.histplot(result.wait_times, bins=30, ax=ax3)
    ax3.set_xlabel('Wait Time')
    ax3.set_title('Wait Time Distribution')

    # Summary
    ax4.axis('off')
    if len(result):
        s = result.statistics
        stats_text = f"""
    Summary Statistics
    ------------------
    Processes: {s.count}
    Minimum Wait: {s.minimum:.4f}
    Maximum Wait: {s.maximum:.4f}
    Median Wait: {s.median:.4f}
    Mean Wait: {s.mean:.4f}
    Std Dev of Wait: {s.standard_deviation:.4f}
    Max Line Length: {s.max_line_length}
    Utilization: {result.utilization():.4f}
    """
    else:
        stats_text = "No data"
    ax4.text(0.05, 0.95, stats_text, transform=ax4.transAxes,
             fontfamily='monospace', verticalalignment='top')

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
