"""
Normalization strategies for the plexquant package.

This module provides the normalization contract and its implementations,
applied to spectral-match, peptide and protein matrices.
"""

from plexquant.normalization.base import NormalizationStrategy
from plexquant.normalization.none import NoNormalization
from plexquant.normalization.global_median import GlobalMedianNormalization
from plexquant.normalization.reference_channel import ReferenceChannelNormalization

__all__ = [
    "NormalizationStrategy",
    "NoNormalization",
    "GlobalMedianNormalization",
    "ReferenceChannelNormalization",
]
