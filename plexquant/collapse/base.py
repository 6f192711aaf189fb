"""
Base class for collapse strategies.

A collapse merges the columns that the experimental design marks as parts
of one logical sample (technical replicates, fractions) into a single
column. Rows are unchanged.
"""

from abc import ABC, abstractmethod
from typing import Callable, Hashable

import numpy as np

from plexquant.core.aggregation import AggregationType
from plexquant.core.matrix import QuantMatrix


class CollapseStrategy(ABC):
    """Abstract base class for column collapse strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the collapse strategy."""
        pass

    @abstractmethod
    def collapse(self, matrix: QuantMatrix) -> QuantMatrix:
        """
        Merge replicate columns of ``matrix``.

        Parameters
        ----------
        matrix : QuantMatrix
            Matrix whose columns are sample descriptors. It is not modified.

        Returns
        -------
        QuantMatrix
            Matrix with the same rows and one column per logical sample,
            ordered by first occurrence.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))


def collapse_columns(
    matrix: QuantMatrix,
    group_key: Callable[[object], Hashable],
    merge_key: Callable[[object], object],
    aggregation: AggregationType,
) -> QuantMatrix:
    """
    Group columns by ``group_key`` and aggregate each group into one column.

    Parameters
    ----------
    matrix : QuantMatrix
        Matrix to collapse.
    group_key : callable
        Maps a column descriptor to the logical sample it belongs to.
    merge_key : callable
        Builds the merged descriptor from the first column of a group.
    aggregation : AggregationType
        How the observed values of a group are combined per row.

    Returns
    -------
    QuantMatrix
        Collapsed matrix; groups keep their first-occurrence order.
    """
    groups: dict[Hashable, list[int]] = {}
    for column, sample in enumerate(matrix.column_keys):
        groups.setdefault(group_key(sample), []).append(column)

    columns = [merge_key(matrix.column_keys[indices[0]]) for indices in groups.values()]
    result = QuantMatrix(matrix.row_keys, columns)
    for column, indices in enumerate(groups.values()):
        if len(indices) == 1:
            result.values[:, column] = matrix.values[:, indices[0]]
        else:
            result.values[:, column] = aggregation.aggregate(matrix.values[:, indices], axis=1)
    return result
