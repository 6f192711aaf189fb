"""
Base class for normalization strategies.

A normalization transforms cell values so samples become comparable. It
returns a new matrix of identical shape and leaves "not observed" (0) cells
at 0.
"""

from abc import ABC, abstractmethod

from plexquant.core.matrix import QuantMatrix


class NormalizationStrategy(ABC):
    """Abstract base class for matrix normalization strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the normalization strategy."""
        pass

    @abstractmethod
    def normalize(self, matrix: QuantMatrix) -> QuantMatrix:
        """
        Normalize a matrix.

        Parameters
        ----------
        matrix : QuantMatrix
            Matrix to normalize. It is not modified.

        Returns
        -------
        QuantMatrix
            A new matrix with the same rows and columns.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))
