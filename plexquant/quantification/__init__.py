"""
Quantification pipeline for the plexquant package.

This module provides the pivot, mapping and combine building blocks and the
engine that chains them with the configured strategies.
"""

from plexquant.quantification.combine import combine_matrices, combine_peptide_matrices
from plexquant.quantification.engine import QuantificationEngine
from plexquant.quantification.mapping import get_peptide_to_protein_map, get_psm_to_peptide_map
from plexquant.quantification.pivot import pivot, pivot_by_file
from plexquant.quantification.result import QuantificationResult

__all__ = [
    "QuantificationEngine",
    "QuantificationResult",
    "pivot",
    "pivot_by_file",
    "get_psm_to_peptide_map",
    "get_peptide_to_protein_map",
    "combine_matrices",
    "combine_peptide_matrices",
]
