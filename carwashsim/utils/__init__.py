"""Utility functions and helpers."""

from .logger import setup_logger
from .visualization import plot_sweep_results

__all__ = ["setup_logger", "plot_sweep_results"]
