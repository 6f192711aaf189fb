"""
Data models and enumerations for the plexquant package.

This module provides:
- The experimental design and its sample descriptors
- Identification entities (spectral matches, peptides, protein groups)
- Strategy enumerations for normalization, roll-up and collapse
- Quantification parameters
"""

from plexquant.model.design import (
    ExperimentalDesign,
    IsobaricSampleInfo,
    SampleInfo,
    file_key,
)
from plexquant.model.identification import (
    Peptide,
    ProteinGroup,
    SpectralMatch,
    strip_modifications,
)
from plexquant.model.normalization import NormalizationMethod
from plexquant.model.rollup import RollUpMethod
from plexquant.model.collapse import CollapseMethod, collapse_from_name
from plexquant.model.parameters import QuantificationParameters

__all__ = [
    # Design
    "ExperimentalDesign",
    "SampleInfo",
    "IsobaricSampleInfo",
    "file_key",
    # Identifications
    "Peptide",
    "ProteinGroup",
    "SpectralMatch",
    "strip_modifications",
    # Strategy enumerations
    "NormalizationMethod",
    "RollUpMethod",
    "CollapseMethod",
    "collapse_from_name",
    # Parameters
    "QuantificationParameters",
]
