"""Median roll-up strategy."""

import numpy as np

from plexquant.core.aggregation import AggregationType
from plexquant.rollup.base import RollUpStrategy


class MedianRollUp(RollUpStrategy):
    """Use the median of the observed intensities of the contributing rows."""

    @property
    def name(self) -> str:
        return "Median"

    def aggregate(self, rows: np.ndarray) -> np.ndarray:
        return AggregationType.MEDIAN.aggregate(rows, axis=0)
