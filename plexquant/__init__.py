"""
plexquant - Roll-up and normalization of isobaric and label-free quantification.

This package turns per-scan reporter or precursor intensities into peptide
and protein group matrices through configurable normalization, roll-up and
collapse strategies.
"""

__version__ = "0.1.0"

# Import logging configuration
from plexquant.core.logging_config import initialize_logging

# Initialize logging with default settings
# Users can override these settings by calling configure_logging with their own settings
initialize_logging()

from plexquant.core.matrix import QuantMatrix
from plexquant.model import (
    ExperimentalDesign,
    IsobaricSampleInfo,
    Peptide,
    ProteinGroup,
    QuantificationParameters,
    SampleInfo,
    SpectralMatch,
)
from plexquant.quantification import QuantificationEngine, QuantificationResult

__all__ = [
    "__version__",
    "QuantMatrix",
    "ExperimentalDesign",
    "SampleInfo",
    "IsobaricSampleInfo",
    "Peptide",
    "ProteinGroup",
    "SpectralMatch",
    "QuantificationParameters",
    "QuantificationEngine",
    "QuantificationResult",
]
