"""Sum roll-up strategy."""

import numpy as np

from plexquant.core.aggregation import AggregationType
from plexquant.rollup.base import RollUpStrategy


class SumRollUp(RollUpStrategy):
    """Add the observed intensities of the contributing rows."""

    @property
    def name(self) -> str:
        return "Sum"

    def aggregate(self, rows: np.ndarray) -> np.ndarray:
        return AggregationType.SUM.aggregate(rows, axis=0)
