"""
Base class for roll-up strategies.

A roll-up aggregates the rows of a lower-level matrix (spectral matches,
peptides) into the rows of a higher-level one (peptides, protein groups).
"""

from abc import ABC, abstractmethod
from typing import Hashable, Mapping, Sequence

import numpy as np

from plexquant.core.matrix import QuantMatrix


class RollUpStrategy(ABC):
    """
    Abstract base class for roll-up strategies.

    Subclasses only define how one block of contributing rows is reduced
    to a single row; :meth:`roll_up` handles the matrix bookkeeping.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the roll-up strategy."""
        pass

    @abstractmethod
    def aggregate(self, rows: np.ndarray) -> np.ndarray:
        """
        Reduce a ``(contributors, columns)`` block to one row.

        Parameters
        ----------
        rows : np.ndarray
            Values of the contributing rows; 0 means not observed.

        Returns
        -------
        np.ndarray
            One value per column, 0 where nothing was observed.
        """
        pass

    def roll_up(
        self, matrix: QuantMatrix, entity_to_indices: Mapping[Hashable, Sequence[int]]
    ) -> QuantMatrix:
        """
        Aggregate ``matrix`` rows into one row per entity.

        Parameters
        ----------
        matrix : QuantMatrix
            Lower-level matrix.
        entity_to_indices : Mapping
            Higher-level entity to the row indices of ``matrix`` that
            contribute to it. Its iteration order becomes the row order.

        Returns
        -------
        QuantMatrix
            Matrix with one row per mapping key and the columns of ``matrix``.
            Entities without contributors get an all-zero row.
        """
        result = QuantMatrix(list(entity_to_indices.keys()), matrix.column_keys)
        for row, indices in enumerate(entity_to_indices.values()):
            if len(indices) == 0:
                continue
            result.values[row, :] = self.aggregate(matrix.values[list(indices), :])
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))
