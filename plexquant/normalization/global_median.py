"""Global median normalization."""

import numpy as np

from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.normalization.base import NormalizationStrategy

logger = get_logger("plexquant.normalization.global_median")


class GlobalMedianNormalization(NormalizationStrategy):
    """
    Scale every column so that its median matches the global median.

    Medians are computed in log2 space over the observed (positive) values
    of each column; the target is the median of those column medians. Each
    observed value of a column is multiplied by
    ``2 ** (target - column_median)``. Columns without observed values are
    left unchanged.
    """

    @property
    def name(self) -> str:
        return "GlobalMedian"

    def normalize(self, matrix: QuantMatrix) -> QuantMatrix:
        values = matrix.values
        observed = values > 0
        log_values = np.log2(values, out=np.zeros_like(values), where=observed)

        column_medians = np.full(values.shape[1], np.nan)
        for column in range(values.shape[1]):
            column_observed = observed[:, column]
            if column_observed.any():
                column_medians[column] = np.median(log_values[column_observed, column])

        if np.isnan(column_medians).all():
            logger.debug("No observed values; global median normalization skipped")
            return matrix.copy()

        target = np.median(column_medians[~np.isnan(column_medians)])
        factors = np.where(np.isnan(column_medians), 1.0, np.exp2(target - column_medians))
        logger.debug("Global median (log2) %.4f, column factors %s", target, factors)

        return matrix.with_values(np.where(observed, values * factors, values))
