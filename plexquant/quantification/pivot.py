"""
Pivot of spectral-match intensities into quantification matrices.
"""

from typing import Iterable

from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.model.design import ExperimentalDesign
from plexquant.model.identification import SpectralMatch, sort_by_sequence
from plexquant.quantification.combine import combine_matrices

logger = get_logger("plexquant.quantification.pivot")


def pivot_by_file(
    spectral_matches: Iterable[SpectralMatch], design: ExperimentalDesign
) -> dict[str, QuantMatrix]:
    """
    Build one spectral-match matrix per spectra file.

    Spectral matches without an intensity vector are skipped. Rows of each
    matrix are the file's spectral matches sorted by full sequence (ties
    keep input order); columns are the file's channels in design order.

    Parameters
    ----------
    spectral_matches : Iterable[SpectralMatch]
        All spectral matches of the run.
    design : ExperimentalDesign
        Channel layout of every file.

    Returns
    -------
    dict[str, QuantMatrix]
        File path to matrix, in sorted file-path order.

    Raises
    ------
    ConfigurationMismatch
        If a quantified file is missing from the design.
    ValueError
        If an intensity vector does not have one value per channel.
    """
    by_file: dict[str, list[SpectralMatch]] = {}
    skipped = 0
    for match in spectral_matches:
        if match.intensities is None:
            skipped += 1
            continue
        by_file.setdefault(match.file_path, []).append(match)

    if skipped:
        logger.debug("Skipped %d spectral matches without intensities", skipped)

    per_file = {}
    for file_path in sorted(by_file):
        samples = design.samples_for(file_path)
        matches = sort_by_sequence(by_file[file_path])
        matrix = QuantMatrix(matches, samples)
        for row, match in enumerate(matches):
            if len(match.intensities) != len(samples):
                raise ValueError(
                    f"Spectral match {match.label} has {len(match.intensities)} intensities "
                    f"but {file_path} has {len(samples)} channels"
                )
            matrix.set_row_at(row, match.intensities)
        per_file[file_path] = matrix
        logger.debug("Pivoted %d spectral matches x %d channels for %s", *matrix.shape, file_path)

    return per_file


def pivot(spectral_matches: Iterable[SpectralMatch], design: ExperimentalDesign) -> QuantMatrix:
    """
    Build a single spectral-match matrix spanning every file.

    Columns are each file's channels, files in sorted path order; rows are
    all quantified spectral matches sorted by full sequence. A spectral
    match is 0 in the columns of every file but its own.
    """
    return combine_matrices(pivot_by_file(spectral_matches, design))
