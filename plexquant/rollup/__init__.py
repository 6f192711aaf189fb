"""
Roll-up strategies for the plexquant package.

This module provides the strategies used to aggregate spectral matches into
peptides and peptides into protein groups.
"""

from plexquant.rollup.base import RollUpStrategy
from plexquant.rollup.sum import SumRollUp
from plexquant.rollup.median import MedianRollUp
from plexquant.rollup.mean import MeanRollUp

__all__ = [
    "RollUpStrategy",
    "SumRollUp",
    "MedianRollUp",
    "MeanRollUp",
]
