"""
Collapse strategies for the plexquant package.

This module provides the strategies that merge replicate and fraction
columns into one column per logical sample.
"""

from plexquant.collapse.base import CollapseStrategy, collapse_columns
from plexquant.collapse.none import NoCollapse
from plexquant.collapse.condition import MeanCollapse, SumCollapse
from plexquant.collapse.sample import CollapseDimension, SampleCollapseStrategy

__all__ = [
    "CollapseStrategy",
    "collapse_columns",
    "NoCollapse",
    "MeanCollapse",
    "SumCollapse",
    "CollapseDimension",
    "SampleCollapseStrategy",
]
