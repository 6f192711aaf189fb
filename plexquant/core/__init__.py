"""
Core modules for the plexquant package.

This module provides the quantification matrix, cell aggregations,
constants, exceptions, logging and asynchronous table writing.
"""

from plexquant.core.constants import (
    PROTEIN_NAME,
    PEPTIDE_SEQUENCE,
    PEPTIDE_CANONICAL,
    CHANNEL,
    PLEX,
    CONDITION,
    BIOREPLICATE,
    TECHREPLICATE,
    RUN,
    FRACTION,
    INTENSITY,
    REFERENCE,
    SEARCH_ENGINE,
    SCAN,
)
from plexquant.core.aggregation import AggregationType
from plexquant.core.exceptions import ConfigurationMismatch, KeyNotFound
from plexquant.core.logger import get_logger, configure_logging, log_execution_time
from plexquant.core.matrix import QuantMatrix
from plexquant.core.write_queue import WriteCSVTask, WriteParquetTask, create_write_task

__all__ = [
    # Constants
    "PROTEIN_NAME",
    "PEPTIDE_SEQUENCE",
    "PEPTIDE_CANONICAL",
    "CHANNEL",
    "PLEX",
    "CONDITION",
    "BIOREPLICATE",
    "TECHREPLICATE",
    "RUN",
    "FRACTION",
    "INTENSITY",
    "REFERENCE",
    "SEARCH_ENGINE",
    "SCAN",
    # Matrix
    "QuantMatrix",
    "AggregationType",
    # Exceptions
    "KeyNotFound",
    "ConfigurationMismatch",
    # Logger
    "get_logger",
    "configure_logging",
    "log_execution_time",
    # Write queue
    "WriteCSVTask",
    "WriteParquetTask",
    "create_write_task",
]
