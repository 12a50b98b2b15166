"""Disjoint set library initialization."""

from .structures import DisjointSet, IndexOutOfRangeError, InvalidArgumentError
from .pipeline import ConnectivityAnalyzer, ConnectivityConfig, ConnectivityResult, ConnectivityStats
from .runner import analyze_file

__all__ = [
    "DisjointSet",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
    "analyze_file",
]
