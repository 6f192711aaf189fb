"""
Snapshot writers for quantification matrices.

Tables are built from the matrices on the calling thread, so later pipeline
stages can keep working on their own copies while a writer thread puts the
snapshot on disk.
"""

import os
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from plexquant.core.constants import (
    BIOREPLICATE,
    CHANNEL,
    CONDITION,
    FRACTION,
    INTENSITY,
    PEPTIDE_CANONICAL,
    PEPTIDE_OUTPUT_NAME,
    PEPTIDE_SEQUENCE,
    PLEX,
    PROTEIN_NAME,
    PROTEIN_OUTPUT_NAME,
    RAW_OUTPUT_NAME,
    REFERENCE,
    RUN,
    SCAN,
    SEARCH_ENGINE,
    TECHREPLICATE,
)
from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.core.write_queue import create_write_task
from plexquant.model.design import ExperimentalDesign
from plexquant.model.identification import SpectralMatch

logger = get_logger("plexquant.io.writer")


def spectral_matches_to_frame(
    spectral_matches: Iterable[SpectralMatch], design: ExperimentalDesign
) -> pd.DataFrame:
    """
    Long table with one row per spectral match and channel.

    Spectral matches without intensities are left out.

    Raises
    ------
    ConfigurationMismatch
        If a spectral match comes from a file missing from the design.
    """
    records = []
    for match in spectral_matches:
        if match.intensities is None:
            continue
        samples = design.samples_for(match.file_path)
        for sample, intensity in zip(samples, match.intensities):
            records.append(
                {
                    RUN: match.file_name,
                    SCAN: match.scan_number,
                    PEPTIDE_SEQUENCE: match.full_sequence,
                    PEPTIDE_CANONICAL: match.base_sequence,
                    SEARCH_ENGINE: match.score,
                    CONDITION: sample.condition,
                    BIOREPLICATE: sample.biological_replicate,
                    TECHREPLICATE: sample.technical_replicate,
                    FRACTION: sample.fraction,
                    PLEX: getattr(sample, "plex", 0),
                    CHANNEL: getattr(sample, "channel_label", ""),
                    REFERENCE: sample.is_reference_channel,
                    INTENSITY: float(intensity),
                }
            )
    columns = [
        RUN, SCAN, PEPTIDE_SEQUENCE, PEPTIDE_CANONICAL, SEARCH_ENGINE, CONDITION,
        BIOREPLICATE, TECHREPLICATE, FRACTION, PLEX, CHANNEL, REFERENCE, INTENSITY,
    ]
    return pd.DataFrame.from_records(records, columns=columns)


def peptides_to_frame(matrix: QuantMatrix) -> pd.DataFrame:
    """Wide peptide table: sequence columns followed by one column per sample."""
    df = matrix.to_frame(index_name=PEPTIDE_SEQUENCE).reset_index()
    df.insert(1, PEPTIDE_CANONICAL, [peptide.base_sequence for peptide in matrix.row_keys])
    return df


def proteins_to_frame(matrix: QuantMatrix) -> pd.DataFrame:
    """Wide protein table: group name followed by one column per sample."""
    return matrix.to_frame(index_name=PROTEIN_NAME).reset_index()


class QuantMatrixWriter:
    """
    Writes raw, peptide and protein snapshots to an output directory.

    Every ``write_*`` method returns the started writer thread. Callers that
    pass ``wait=False`` must call ``close()`` on it before relying on the file.

    Parameters
    ----------
    output_directory : str or Path
        Directory receiving the files. Created if missing.
    output_format : str
        ``csv`` or ``parquet``.
    """

    def __init__(self, output_directory: Union[str, Path], output_format: str = "csv"):
        self.output_directory = Path(output_directory)
        self.output_format = output_format.lower()

    def _path(self, name: str) -> str:
        return os.path.join(self.output_directory, name)

    def _submit(self, name: str, table: pd.DataFrame, wait: bool):
        self.output_directory.mkdir(parents=True, exist_ok=True)
        task = create_write_task(self._path(name), self.output_format)
        task.write(table)
        logger.info("Writing %d rows to %s", len(table), task.path)
        if wait:
            task.close()
        return task

    def write_spectral_matches(
        self, spectral_matches: Iterable[SpectralMatch], design: ExperimentalDesign, wait: bool = False
    ):
        return self._submit(RAW_OUTPUT_NAME, spectral_matches_to_frame(spectral_matches, design), wait)

    def write_peptides(self, matrix: QuantMatrix, wait: bool = False):
        return self._submit(PEPTIDE_OUTPUT_NAME, peptides_to_frame(matrix), wait)

    def write_proteins(self, matrix: QuantMatrix, wait: bool = True):
        return self._submit(PROTEIN_OUTPUT_NAME, proteins_to_frame(matrix), wait)
