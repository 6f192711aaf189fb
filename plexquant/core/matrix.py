"""
Dense quantification matrix shared by every pipeline stage.

A :class:`QuantMatrix` holds an ordered sequence of row entities (spectral
matches, peptides or protein groups), an ordered sequence of column sample
descriptors and a dense ``float64`` table. A cell value of 0 means "not
observed". The shape is fixed at construction; stages fill cells by copying.
"""

from typing import Callable, Generic, Hashable, Iterator, Optional, Sequence, TypeVar

import numpy as np
import pandas as pd

from plexquant.core.exceptions import KeyNotFound

E = TypeVar("E", bound=Hashable)


def _default_label(key) -> str:
    label = getattr(key, "label", None)
    return label if label is not None else str(key)


class QuantMatrix(Generic[E]):
    """
    A dense table keyed by row entity and ordered column sample.

    Parameters
    ----------
    row_keys : Sequence
        Ordered, unique row entities. Duplicates are not checked.
    column_keys : Sequence
        Ordered column descriptors, usually :class:`~plexquant.model.design.SampleInfo`.
    """

    def __init__(self, row_keys: Sequence[E], column_keys: Sequence):
        self._row_keys = tuple(row_keys)
        self._column_keys = tuple(column_keys)
        self._row_index = {key: i for i, key in enumerate(self._row_keys)}
        self._values = np.zeros((len(self._row_keys), len(self._column_keys)), dtype=np.float64)

    @property
    def row_keys(self) -> tuple:
        return self._row_keys

    @property
    def column_keys(self) -> tuple:
        return self._column_keys

    @property
    def values(self) -> np.ndarray:
        """The underlying ``(rows, columns)`` array."""
        return self._values

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    def __len__(self) -> int:
        return len(self._row_keys)

    def __contains__(self, entity) -> bool:
        return entity in self._row_index

    def __iter__(self) -> Iterator[E]:
        return iter(self._row_keys)

    def row_index(self, entity: E) -> int:
        """
        Return the position of ``entity`` in the row sequence.

        Raises
        ------
        KeyNotFound
            If the entity is not a row of this matrix.
        """
        try:
            return self._row_index[entity]
        except KeyError:
            raise KeyNotFound(entity) from None

    def get_row(self, entity: E) -> np.ndarray:
        """Return a copy of the row belonging to ``entity``."""
        return self._values[self.row_index(entity)].copy()

    def get_row_at(self, index: int) -> np.ndarray:
        """Return a copy of the row at position ``index``."""
        return self._values[index].copy()

    def set_row(self, entity: E, values: Sequence[float]) -> None:
        """
        Copy ``values`` positionally into the row belonging to ``entity``.

        Raises
        ------
        KeyNotFound
            If the entity is not a row of this matrix.
        ValueError
            If ``values`` does not have one entry per column.
        """
        index = self.row_index(entity)
        self.set_row_at(index, values)

    def set_row_at(self, index: int, values: Sequence[float]) -> None:
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (len(self._column_keys),):
            raise ValueError(
                f"Row has {values.size} values but the matrix has {len(self._column_keys)} columns"
            )
        self._values[index, :] = values

    def get_value(self, row: int, column: int) -> float:
        return float(self._values[row, column])

    def set_value(self, row: int, column: int, value: float) -> None:
        self._values[row, column] = value

    def with_values(self, values: np.ndarray) -> "QuantMatrix[E]":
        """
        Return a new matrix with the same keys and a copy of ``values``.

        Raises
        ------
        ValueError
            If ``values`` does not match this matrix's shape.
        """
        values = np.asarray(values, dtype=np.float64)
        if values.shape != self.shape:
            raise ValueError(f"Expected values of shape {self.shape}, got {values.shape}")
        result = QuantMatrix(self._row_keys, self._column_keys)
        result._values[:, :] = values
        return result

    def copy(self) -> "QuantMatrix[E]":
        return self.with_values(self._values)

    def to_frame(
        self,
        row_label: Optional[Callable[[E], str]] = None,
        column_label: Optional[Callable[[object], str]] = None,
        index_name: Optional[str] = None,
    ) -> pd.DataFrame:
        """
        Export the matrix as a wide DataFrame (rows x samples).

        Parameters
        ----------
        row_label : callable, optional
            Maps a row entity to its index label. Defaults to the entity's
            ``label`` attribute or ``str()``.
        column_label : callable, optional
            Maps a column descriptor to its header. Defaults to ``label``.
        index_name : str, optional
            Name given to the index.
        """
        row_label = row_label or _default_label
        column_label = column_label or _default_label
        frame = pd.DataFrame(
            self._values.copy(),
            index=[row_label(key) for key in self._row_keys],
            columns=[column_label(key) for key in self._column_keys],
        )
        frame.index.name = index_name
        return frame

    def __repr__(self) -> str:
        rows, columns = self.shape
        return f"{self.__class__.__name__}(rows={rows}, columns={columns})"
