"""
Collapse method enumeration for the plexquant package.

This module maps configuration names to collapse strategies, including the
parametrised ``Collapse_<Dimension>_<Aggregation>`` form.
"""

from enum import Enum, auto
from typing import Union

from plexquant.model._names import canonical


class CollapseMethod(Enum):
    """
    Enumeration of collapse methods.

    Attributes
    ----------
    NONE : auto
        Keep every physical channel.
    MEAN : auto
        Mean over runs of a condition and biological replicate.
    SUM : auto
        Sum over runs of a condition and biological replicate.
    SAMPLE : auto
        Collapse along one design dimension; needs ``dimension`` and ``aggregation``.
    """

    NONE = auto()
    MEAN = auto()
    SUM = auto()
    SAMPLE = auto()

    @classmethod
    def from_str(cls, name: str) -> "CollapseMethod":
        """
        Convert a string to a CollapseMethod.

        ``mean_collapse`` and ``MeanCollapse`` are accepted for ``mean``,
        likewise for the other members. Names starting with ``collapse_``
        select :attr:`SAMPLE`.

        Raises
        ------
        KeyError
            If the name does not match any collapse method.
        """
        if name is None:
            return cls.NONE
        name_ = canonical(name)
        if name_.startswith("collapse") and name_ != "collapse":
            return cls.SAMPLE
        name_ = name_.removesuffix("collapse")
        for k, v in cls._member_map_.items():
            if canonical(k) == name_:
                return v
        raise KeyError(name)

    def create(self, dimension: Union[str, None] = None, aggregation: Union[str, None] = None):
        """
        Return a new strategy instance for this method.

        Raises
        ------
        ValueError
            If :attr:`SAMPLE` is requested without a dimension.
        """
        from plexquant.collapse import MeanCollapse, NoCollapse, SampleCollapseStrategy, SumCollapse

        if self == CollapseMethod.NONE:
            return NoCollapse()
        elif self == CollapseMethod.MEAN:
            return MeanCollapse()
        elif self == CollapseMethod.SUM:
            return SumCollapse()
        if dimension is None:
            raise ValueError("Sample collapse requires a dimension")
        return SampleCollapseStrategy(dimension, aggregation or "median")


def collapse_from_name(name: str):
    """
    Build a collapse strategy from its configuration or display name.

    ``Collapse_Fraction_Median`` style names are parsed into a
    :class:`~plexquant.collapse.SampleCollapseStrategy`.
    """
    method = CollapseMethod.from_str(name)
    if method != CollapseMethod.SAMPLE:
        return method.create()
    parts = name.split("_")
    if len(parts) != 3:
        raise KeyError(name)
    _, dimension, aggregation = parts
    return method.create(dimension=dimension, aggregation=aggregation)
