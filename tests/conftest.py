"""
Shared fixtures for the plexquant test suite.
"""

import pytest

from plexquant.model import (
    ExperimentalDesign,
    IsobaricSampleInfo,
    Peptide,
    ProteinGroup,
    SampleInfo,
    SpectralMatch,
)

TMT_LABELS = ("126", "127N", "127C", "128N", "128C", "129N")


def tmt_channels(file_path, n_channels, condition="A", reference=(), **kwargs):
    """Isobaric channel descriptors for one file."""
    return [
        IsobaricSampleInfo(
            file_path=file_path,
            condition=condition,
            biological_replicate=i + 1,
            channel_label=TMT_LABELS[i],
            reference=i in reference,
            **kwargs,
        )
        for i in range(n_channels)
    ]


def spectral_match(file_path, scan, peptide, intensities):
    """Spectral match resolving to ``peptide`` (a Peptide or a sequence)."""
    if isinstance(peptide, str):
        peptide = Peptide(peptide)
    return SpectralMatch(
        file_path=file_path,
        scan_number=scan,
        full_sequence=peptide.full_sequence,
        identified_peptides=[peptide],
        intensities=intensities,
    )


@pytest.fixture
def make_tmt_design():
    """Factory: ``make_tmt_design({"file1.raw": 3, ...})``."""

    def _make(files, reference=()):
        return ExperimentalDesign(
            {path: tmt_channels(path, n, reference=reference) for path, n in files.items()}
        )

    return _make


@pytest.fixture
def make_match():
    return spectral_match


@pytest.fixture
def lfq_design():
    """Six label-free runs: conditions A, B, C with two technical replicates each."""
    samples = {}
    for condition in ("A", "B", "C"):
        for tech in (1, 2):
            path = f"{condition.lower()}_t{tech}.raw"
            samples[path] = [
                SampleInfo(
                    file_path=path,
                    condition=condition,
                    biological_replicate=1,
                    technical_replicate=tech,
                )
            ]
    return ExperimentalDesign(samples)


@pytest.fixture
def peptides():
    return {name: Peptide(name) for name in ("PEPTIDEA", "PEPTIDEB", "PEPTIDEC", "SHAREDK")}


@pytest.fixture
def protein_groups(peptides):
    """Two groups with one unique peptide each and one shared peptide, plus an empty group."""
    return [
        ProteinGroup(
            "P1",
            peptides={peptides["PEPTIDEA"], peptides["SHAREDK"]},
            unique_peptides={peptides["PEPTIDEA"]},
        ),
        ProteinGroup(
            "P2",
            peptides={peptides["PEPTIDEB"], peptides["SHAREDK"]},
            unique_peptides={peptides["PEPTIDEB"]},
        ),
        ProteinGroup("P0"),
    ]
