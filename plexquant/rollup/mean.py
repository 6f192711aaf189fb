"""Mean roll-up strategy."""

import numpy as np

from plexquant.core.aggregation import AggregationType
from plexquant.rollup.base import RollUpStrategy


class MeanRollUp(RollUpStrategy):
    """Use the mean of the observed intensities of the contributing rows."""

    @property
    def name(self) -> str:
        return "Mean"

    def aggregate(self, rows: np.ndarray) -> np.ndarray:
        return AggregationType.AVERAGE.aggregate(rows, axis=0)
