"""
Roll-up method enumeration for the plexquant package.

This module maps configuration names to roll-up strategies.
"""

from enum import Enum, auto

from plexquant.model._names import canonical


class RollUpMethod(Enum):
    """
    Enumeration of roll-up methods.

    Attributes
    ----------
    SUM : auto
        Sum of the contributing rows.
    MEDIAN : auto
        Median of the contributing rows.
    MEAN : auto
        Mean of the contributing rows.
    """

    SUM = auto()
    MEDIAN = auto()
    MEAN = auto()

    @classmethod
    def from_str(cls, name: str) -> "RollUpMethod":
        """
        Convert a string to a RollUpMethod.

        Raises
        ------
        KeyError
            If the name does not match any roll-up method.
        """
        name_ = canonical(name)
        if name_ == "average":
            name_ = "mean"
        for k, v in cls._member_map_.items():
            if canonical(k) == name_:
                return v
        raise KeyError(name)

    def create(self):
        """Return a new strategy instance for this method."""
        from plexquant.rollup import MeanRollUp, MedianRollUp, SumRollUp

        return {
            RollUpMethod.SUM: SumRollUp,
            RollUpMethod.MEDIAN: MedianRollUp,
            RollUpMethod.MEAN: MeanRollUp,
        }[self]()
