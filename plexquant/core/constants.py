"""
Constants for the plexquant package.

This module defines the column names used when matrices and spectral matches
are exported as tables, the snapshot file names and the summary messages
reported by the quantification engine.
"""

# Column name constants
PROTEIN_NAME = "ProteinName"
PEPTIDE_SEQUENCE = "PeptideSequence"
PEPTIDE_CANONICAL = "PeptideCanonical"
CHANNEL = "Channel"
PLEX = "Plex"
CONDITION = "Condition"
BIOREPLICATE = "BioReplicate"
TECHREPLICATE = "TechReplicate"
RUN = "Run"
FRACTION = "Fraction"
INTENSITY = "Intensity"
REFERENCE = "Reference"
SEARCH_ENGINE = "searchScore"
SCAN = "Scan"

# Snapshot outputs
RAW_OUTPUT_NAME = "raw_spectral_matches"
PEPTIDE_OUTPUT_NAME = "peptides"
PROTEIN_OUTPUT_NAME = "proteins"
OUTPUT_FORMATS = ("csv", "parquet")

# Engine summaries
SUCCESS_SUMMARY = "Quantification completed successfully."
NULL_DESIGN_SUMMARY = "Experimental design is null or empty. Cannot run quantification."
NO_SPECTRAL_MATCHES_SUMMARY = "No spectral matches were provided. Cannot run quantification."
NO_PEPTIDES_SUMMARY = "No modified biopolymers were provided. Cannot run quantification."
NO_PROTEIN_GROUPS_SUMMARY = "No biopolymer groups were provided. Cannot run quantification."
