"""Reference channel normalization for isobaric designs."""

import numpy as np

from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.normalization.base import NormalizationStrategy

logger = get_logger("plexquant.normalization.reference_channel")


class ReferenceChannelNormalization(NormalizationStrategy):
    """
    Express every channel as a ratio to the reference channels of its file.

    For each row and each file, observed values are divided by the mean of
    the observed reference-channel values of that file, so reference
    channels become 1.0. If a row has no observed reference value in a file,
    its cells for that file become 0 (not observed). Files without a
    reference channel are left unchanged.
    """

    @property
    def name(self) -> str:
        return "ReferenceChannel"

    def normalize(self, matrix: QuantMatrix) -> QuantMatrix:
        values = matrix.values
        result = values.copy()

        file_columns: dict[str, list[int]] = {}
        for column, sample in enumerate(matrix.column_keys):
            file_columns.setdefault(sample.file_path, []).append(column)

        for file_path, columns in file_columns.items():
            reference = [c for c in columns if matrix.column_keys[c].is_reference_channel]
            if not reference:
                logger.debug("No reference channel for %s; columns left unchanged", file_path)
                continue

            reference_values = values[:, reference]
            reference_observed = reference_values > 0
            counts = reference_observed.sum(axis=1)
            totals = np.where(reference_observed, reference_values, 0.0).sum(axis=1)
            reference_mean = np.divide(
                totals, counts, out=np.zeros_like(totals), where=counts > 0
            )

            block = values[:, columns]
            has_reference = (reference_mean > 0)[:, None]
            ratios = np.divide(
                block,
                reference_mean[:, None],
                out=np.zeros_like(block),
                where=has_reference & (block > 0),
            )
            result[:, columns] = ratios

        return matrix.with_values(result)
