"""Car arrival generation."""

from .arrival_process import ArrivalProcess

__all__ = ["ArrivalProcess"]
