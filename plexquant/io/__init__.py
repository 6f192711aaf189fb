"""
Input/Output utilities for the plexquant package.

This module reads and writes parameter files and writes matrix snapshots
as CSV or Parquet tables.
"""

from plexquant.io.config import load_parameters, save_parameters
from plexquant.io.writer import (
    QuantMatrixWriter,
    peptides_to_frame,
    proteins_to_frame,
    spectral_matches_to_frame,
)

__all__ = [
    "load_parameters",
    "save_parameters",
    "QuantMatrixWriter",
    "peptides_to_frame",
    "proteins_to_frame",
    "spectral_matches_to_frame",
]
