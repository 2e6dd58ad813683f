"""Visualization utilities for sweep results."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np
from pathlib import Path
from typing import List

from ..core.simulation_result import SimulationResult

sns.set_style("whitegrid")
sns.set_palette("husl")


def plot_sweep_results(results: List[SimulationResult], output_dir: Path) -> List[Path]:
    """Generate all sweep plots.

    Args:
        results: Sweep results in schedule order
        output_dir: Directory to save plots

    Returns:
        Paths of the written images
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if not results:
        return []

    paths = [
        output_dir / "wait_times.png",
        output_dir / "throughput.png",
    ]
    plot_wait_times(results, paths[0])
    plot_throughput(results, paths[1])
    return paths


def plot_wait_times(results: List[SimulationResult], output_path: Path) -> None:
    """Plot average and longest wait against opening time.

    Args:
        results: Sweep results
        output_path: Output file path
    """
    durations = np.array([r.duration for r in results])
    average = np.array([r.average_wait for r in results])
    longest = np.array([r.longest_wait for r in results])

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(durations, average, marker='o', label='Average Wait')
    ax.plot(durations, longest, marker='s', label='Longest Wait')
    if durations.min() > 0:
        ax.set_xscale('log', base=2)
    ax.set_xlabel('Time Open (minutes)')
    ax.set_ylabel('Wait (minutes)')
    ax.set_title('Wait Times by Simulation Length')
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_throughput(results: List[SimulationResult], output_path: Path) -> None:
    """Plot cars washed per minute open.

    Args:
        results: Sweep results
        output_path: Output file path
    """
    labels = [str(r.duration) for r in results]
    rate = [r.total_cars / r.duration if r.duration > 0 else 0.0 for r in results]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(labels, rate, color='steelblue')
    ax.set_xlabel('Time Open (minutes)')
    ax.set_ylabel('Cars Washed per Minute')
    ax.set_title('Throughput by Simulation Length')
    ax.grid(axis='y', alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
