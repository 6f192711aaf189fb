"""
Aggregation types for the plexquant package.

This module provides the enumeration of aggregations used when several
matrix cells are merged into one, either along rows (roll-up) or along
columns (collapse). Zero cells mean "not observed" and never take part.
"""

import warnings
from enum import Enum

import numpy as np


class AggregationType(Enum):
    """
    Enumeration of cell aggregations.

    Attributes
    ----------
    MEDIAN : str
        Median of the observed values.
    AVERAGE : str
        Arithmetic mean of the observed values.
    SUM : str
        Sum of the observed values.
    """

    MEDIAN = "Median"
    AVERAGE = "Average"
    SUM = "Sum"

    @classmethod
    def from_str(cls, name: str) -> "AggregationType":
        """
        Convert a string to an AggregationType.

        ``mean`` is accepted as an alias of ``average``.

        Raises
        ------
        KeyError
            If the name does not match any aggregation.
        """
        name_ = name.lower()
        if name_ == "mean":
            name_ = "average"
        for k, v in cls._member_map_.items():
            if k.lower() == name_:
                return v
        raise KeyError(name)

    def aggregate(self, values: np.ndarray, axis: int = 0) -> np.ndarray:
        """
        Aggregate the observed (non-zero) values of ``values`` along ``axis``.

        Positions where nothing was observed aggregate to 0.

        Parameters
        ----------
        values : np.ndarray
            Two-dimensional block of intensities.
        axis : int
            0 to aggregate rows into one row, 1 to aggregate columns into one column.

        Returns
        -------
        np.ndarray
            One-dimensional aggregate.
        """
        values = np.asarray(values, dtype=np.float64)
        if self == AggregationType.SUM:
            return values.sum(axis=axis)

        observed = np.where(values != 0, values, np.nan)
        with warnings.catch_warnings():
            # all-missing slices are expected and mapped to 0 below
            warnings.simplefilter("ignore", category=RuntimeWarning)
            if self == AggregationType.MEDIAN:
                result = np.nanmedian(observed, axis=axis)
            elif self == AggregationType.AVERAGE:
                result = np.nanmean(observed, axis=axis)
            else:
                raise ValueError(f"Unknown aggregation type: {self}")
        return np.nan_to_num(result, nan=0.0)
