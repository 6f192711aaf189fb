"""
Combination of independently processed per-file matrices.

Every file is pivoted, normalized and rolled up on its own. Combining lays
the per-file column blocks side by side over the union of their rows, so a
row missing from a file stays 0 (not observed) in that file's columns.
"""

from operator import attrgetter
from typing import Callable, Mapping, Optional

import numpy as np

from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.model.design import ExperimentalDesign

logger = get_logger("plexquant.quantification.combine")

by_full_sequence = attrgetter("full_sequence")


def combine_matrices(
    per_file: Mapping[str, QuantMatrix],
    sort_key: Callable = by_full_sequence,
) -> QuantMatrix:
    """
    Merge per-file matrices into one matrix spanning all files.

    Parameters
    ----------
    per_file : Mapping[str, QuantMatrix]
        File path to matrix.
    sort_key : callable
        Stable textual key ordering the combined rows. Ties keep the order
        in which rows first appear, files taken in sorted path order.

    Returns
    -------
    QuantMatrix
        Rows: distinct union of all per-file rows. Columns: each file's
        columns concatenated, files in sorted path order.
    """
    files = sorted(per_file)

    universe: dict = {}
    for file_path in files:
        for key in per_file[file_path].row_keys:
            universe.setdefault(key, None)
    rows = sorted(universe, key=sort_key)

    columns = []
    offsets = {}
    for file_path in files:
        offsets[file_path] = len(columns)
        columns.extend(per_file[file_path].column_keys)

    combined = QuantMatrix(rows, columns)
    for file_path in files:
        matrix = per_file[file_path]
        start = offsets[file_path]
        stop = start + len(matrix.column_keys)
        present = [i for i, key in enumerate(matrix.row_keys) if key in combined]
        targets = [combined.row_index(matrix.row_keys[i]) for i in present]
        combined.values[targets, start:stop] = matrix.values[present, :]

    logger.debug("Combined %d files into %d rows x %d columns", len(files), *combined.shape)
    return combined


def combine_peptide_matrices(
    per_file: Mapping[str, QuantMatrix],
    design: Optional[ExperimentalDesign] = None,
) -> QuantMatrix:
    """
    Merge per-file peptide matrices, rows sorted by full sequence.

    Parameters
    ----------
    per_file : Mapping[str, QuantMatrix]
        File path to per-file peptide matrix.
    design : ExperimentalDesign, optional
        When given, every file must be described by it. Callers that built
        ``per_file`` with :func:`~plexquant.quantification.pivot.pivot_by_file`
        have already been checked and may omit it.

    Raises
    ------
    ConfigurationMismatch
        If ``design`` is given and a file is missing from it.
    """
    if design is not None:
        for file_path in per_file:
            design.samples_for(file_path)
    return combine_matrices(per_file, sort_key=by_full_sequence)
