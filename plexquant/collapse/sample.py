"""
Collapse along a single dimension of the experimental design.
"""

from enum import Enum
from typing import Union

from plexquant.collapse.base import CollapseStrategy, collapse_columns
from plexquant.core.aggregation import AggregationType
from plexquant.core.matrix import QuantMatrix


class CollapseDimension(Enum):
    """
    Design dimension merged by :class:`SampleCollapseStrategy`.

    Attributes
    ----------
    FRACTION : str
        Merge fractions of the same replicate.
    TECHNICAL_REPLICATE : str
        Merge technical replicates of the same biological replicate and fraction.
    BIOLOGICAL_REPLICATE : str
        Merge biological replicates of the same condition.
    """

    FRACTION = "Fraction"
    TECHNICAL_REPLICATE = "TechnicalReplicate"
    BIOLOGICAL_REPLICATE = "BiologicalReplicate"

    @classmethod
    def from_str(cls, name: str) -> "CollapseDimension":
        """
        Convert a string to a CollapseDimension.

        Raises
        ------
        KeyError
            If the name does not match any dimension.
        """
        name_ = name.lower().replace("_", "").replace(" ", "")
        for member in cls:
            if member.value.lower() == name_:
                return member
        raise KeyError(name)

    @property
    def field(self) -> str:
        """Name of the :class:`SampleInfo` attribute holding this dimension."""
        return {
            CollapseDimension.FRACTION: "fraction",
            CollapseDimension.TECHNICAL_REPLICATE: "technical_replicate",
            CollapseDimension.BIOLOGICAL_REPLICATE: "biological_replicate",
        }[self]


_KEY_FIELDS = ("condition", "biological_replicate", "technical_replicate", "fraction")


class SampleCollapseStrategy(CollapseStrategy):
    """
    Merge columns that differ only in one design dimension.

    Columns are grouped by condition, biological replicate, technical
    replicate, fraction and (for isobaric channels) channel label, leaving
    out the collapsed dimension. The merged descriptor reports the collapsed
    dimension as 0 and keeps every other field of the first member.

    Parameters
    ----------
    dimension : CollapseDimension or str
        Dimension to merge.
    aggregation : AggregationType or str
        How the observed values of merged columns are combined.
    """

    def __init__(
        self,
        dimension: Union[CollapseDimension, str],
        aggregation: Union[AggregationType, str] = AggregationType.MEDIAN,
    ):
        if isinstance(dimension, str):
            dimension = CollapseDimension.from_str(dimension)
        if isinstance(aggregation, str):
            aggregation = AggregationType.from_str(aggregation)
        self.dimension = dimension
        self.aggregation = aggregation

    @property
    def name(self) -> str:
        return f"Collapse_{self.dimension.value}_{self.aggregation.value}"

    def _group_key(self, sample) -> tuple:
        key = tuple(getattr(sample, f) for f in _KEY_FIELDS if f != self.dimension.field)
        return key + (getattr(sample, "channel_label", ""),)

    def _merged_sample(self, sample):
        return sample.collapsed("file_path", self.dimension.field)

    def collapse(self, matrix: QuantMatrix) -> QuantMatrix:
        return collapse_columns(matrix, self._group_key, self._merged_sample, self.aggregation)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(dimension={self.dimension.value!r}, "
            f"aggregation={self.aggregation.value!r})"
        )
