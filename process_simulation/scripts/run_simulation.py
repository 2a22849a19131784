#!/usr/bin/env python3
"""Command-line interface for running process wait simulations."""

import argparse
import logging
import sys
from typing import Dict, Iterable, List, Optional

from process_simulation.config import SimulationConfig
from process_simulation.core import relative_error
from process_simulation.errors import EmptySequenceError, SimulationError
from process_simulation.system import (
    SimulationResult,
    run_replications,
    run_simulation,
    save_results,
    theory_for,
)
from process_simulation.visualization.plotting import create_performance_report

logger = logging.getLogger(__name__)


def format_values(values: Iterable, precision: int = 4) -> str:
    """Render a sequence of times or counts on one line."""
    parts = []
    for value in values:
        if isinstance(value, float):
            parts.append(f"{value:.{precision}f}")
        else:
            parts.append(str(value))
    return "[" + ", ".join(parts) + "]"


def print_report(result: SimulationResult, detailed: bool = False) -> None:
    """Print the per-process sequences followed by the summary block."""
    print(f"Arrival times: {format_values(result.arrival_times)}")
    print(f"Begin times: {format_values(result.begin_times)}")
    print(f"End times: {format_values(result.end_times)}")
    print(f"Wait times: {format_values(result.wait_times)}")
    print(f"Length of line during experiment: {format_values(result.trace)}")

    try:
        stats = result.statistics
    except EmptySequenceError:
        print("Max length of line: No data")
        print("\n------- Summary statistics -------")
        print("No data: the simulation produced no processes")
        return

    print(f"Max length of line: {stats.max_line_length}")
    print("\n------- Summary statistics -------")
    print(f"Count of processes: {stats.count}")
    print(f"Minimum wait time: {stats.minimum:.4f}")
    print(f"Maximum wait time: {stats.maximum:.4f}")
    print(f"Median wait time: {stats.median:.4f}")
    print(f"Average wait time: {stats.mean:.4f}")
    print(f"Standard deviation of wait time: {stats.standard_deviation:.4f}")

    if detailed:
        print(f"Server utilization: {result.utilization():.4f}")
        theory = theory_for(result.config) if result.config is not None else None
        if theory is None:
            print("M/M/1 reference: not available (rho >= 1)")
        else:
            print(f"M/M/1 expected wait (Wq): {theory['Wq']:.4f} "
                  f"(relative error {relative_error(stats.mean, theory['Wq']):.2%})")


def print_replications(results: Dict) -> None:
    """Print statistics gathered across replications."""
    print("\n=== Replication Results ===")
    print(f"Replications: {results['replications']}")
    print(f"Base seed: {results['base_seed']}")
    util = results['utilization']
    print(f"Utilization: {util['mean']:.4f} (±{util['std']:.4f})")

    if not results['statistics']:
        print("No data: the simulation produced no processes")
        return

    for metric, stats in results['statistics'].items():
        print(f"  {metric}:")
        print(f"    Mean: {stats['mean']:.4f} (±{stats['std']:.4f})")
        print(f"    Min: {stats['min']:.4f}, Max: {stats['max']:.4f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Simulate a single-server, non-preemptive process queue')

    parser.add_argument('-n', '--queue-size', type=int,
                        help='Number of processes to simulate (default: 100)')
    parser.add_argument('--execution-mean', type=float,
                        help='Mean service time (default: 3.0)')
    parser.add_argument('--interval-mean', type=float,
                        help='Mean time between arrivals (default: 5.0)')
    parser.add_argument('-s', '--seed', type=int,
                        help='Random seed (default: unseeded)')
    parser.add_argument('-r', '--replications', type=int,
                        help='Number of replications (default: 1)')
    parser.add_argument('--config', type=str,
                        help='JSON configuration file; flags override its values')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                        help='Show plots')
    parser.add_argument('--plot-file', type=str,
                        help='Save plots to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Show utilization and the M/M/1 comparison')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Combine the optional config file with command-line overrides."""
    config = SimulationConfig.from_json(args.config) if args.config else SimulationConfig()

    overrides = {
        'queue_size': args.queue_size,
        'execution_mean': args.execution_mean,
        'interval_mean': args.interval_mean,
        'seed': args.seed,
        'replications': args.replications,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = load_config(args)

        if config.replications > 1:
            results = run_replications(config)
            if not args.quiet:
                print_replications(results)
            result = None
        else:
            result = run_simulation(config)
            results = result.get_metrics_summary()
            if not args.quiet:
                print_report(result, args.detailed)

        if args.output:
            save_results(results, args.output)
            if not args.quiet:
                print(f"\nResults saved to: {args.output}")

        if args.plot or args.plot_file:
            if result is None:
                # For plotting, we need a single run
                logger.info("Running additional simulation for plotting")
                result = run_simulation(config)

            fig = create_performance_report(result, save_path=args.plot_file)
            if args.plot_file and not args.quiet:
                print(f"Plot saved to: {args.plot_file}")

            import matplotlib.pyplot as plt
            if args.plot:
                plt.show()
            else:
                plt.close(fig)
    except (SimulationError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
