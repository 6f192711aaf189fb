"""
Collapse of replicate runs into one column per condition and biological replicate.
"""

from plexquant.collapse.base import CollapseStrategy, collapse_columns
from plexquant.core.aggregation import AggregationType
from plexquant.core.matrix import QuantMatrix

# Descriptor fields that identify a physical run rather than a logical sample
RUN_FIELDS = ("file_path", "technical_replicate", "fraction")


def _logical_sample(sample) -> tuple:
    return sample.condition, sample.biological_replicate


def _merged_sample(sample):
    return sample.collapsed(*RUN_FIELDS)


class MeanCollapse(CollapseStrategy):
    """
    Average the observed values of columns sharing condition and biological replicate.

    Technical replicates and fractions of one logical sample become a single
    column whose descriptor keeps the condition and biological replicate of
    the first member, with run-specific fields reset to 0.
    """

    @property
    def name(self) -> str:
        return "Mean"

    def collapse(self, matrix: QuantMatrix) -> QuantMatrix:
        return collapse_columns(matrix, _logical_sample, _merged_sample, AggregationType.AVERAGE)


class SumCollapse(CollapseStrategy):
    """Like :class:`MeanCollapse`, but add the observed values."""

    @property
    def name(self) -> str:
        return "Sum"

    def collapse(self, matrix: QuantMatrix) -> QuantMatrix:
        return collapse_columns(matrix, _logical_sample, _merged_sample, AggregationType.SUM)
