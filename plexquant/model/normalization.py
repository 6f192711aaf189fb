"""
Normalization method enumeration for the plexquant package.

This module maps configuration names to normalization strategies.
"""

from enum import Enum, auto

from plexquant.model._names import canonical


class NormalizationMethod(Enum):
    """
    Enumeration of normalization methods.

    Attributes
    ----------
    NONE : auto
        No normalization.
    GLOBAL_MEDIAN : auto
        Scale columns to a common median.
    REFERENCE_CHANNEL : auto
        Ratios to the reference channels of each file.
    """

    NONE = auto()
    GLOBAL_MEDIAN = auto()
    REFERENCE_CHANNEL = auto()

    @classmethod
    def from_str(cls, name: str) -> "NormalizationMethod":
        """
        Convert a string to a NormalizationMethod.

        Matching ignores case, underscores, dashes and spaces, so both
        ``global_median`` and the strategy name ``GlobalMedian`` work.
        ``None`` selects :attr:`NONE`.

        Raises
        ------
        KeyError
            If the name does not match any normalization method.
        """
        if name is None:
            return cls.NONE
        name_ = canonical(name)
        for k, v in cls._member_map_.items():
            if canonical(k) == name_:
                return v
        raise KeyError(name)

    def create(self):
        """Return a new strategy instance for this method."""
        from plexquant.normalization import (
            GlobalMedianNormalization,
            NoNormalization,
            ReferenceChannelNormalization,
        )

        if self == NormalizationMethod.NONE:
            return NoNormalization()
        elif self == NormalizationMethod.GLOBAL_MEDIAN:
            return GlobalMedianNormalization()
        elif self == NormalizationMethod.REFERENCE_CHANNEL:
            return ReferenceChannelNormalization()
        raise ValueError(f"Unknown normalization method: {self}")
