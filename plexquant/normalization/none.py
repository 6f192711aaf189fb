"""Identity normalization."""

from plexquant.core.matrix import QuantMatrix
from plexquant.normalization.base import NormalizationStrategy


class NoNormalization(NormalizationStrategy):
    """Leave intensities unchanged."""

    @property
    def name(self) -> str:
        return "None"

    def normalize(self, matrix: QuantMatrix) -> QuantMatrix:
        return matrix.copy()
