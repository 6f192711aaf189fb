"""
Identification entities quantified by the plexquant package.

Peptides, protein groups and spectral matches are produced by upstream
search and inference tools; this module only models what quantification
needs from them.
"""

import re
from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Iterable, Optional, Sequence

import numpy as np

_MODIFICATION_PATTERN = re.compile(r"\[[^\]]*\]|\([^)]*\)")


def strip_modifications(full_sequence: str) -> str:
    """Remove bracketed modification annotations from a full sequence."""
    return _MODIFICATION_PATTERN.sub("", full_sequence).replace("-", "")


@dataclass(frozen=True)
class Peptide:
    """
    A peptide with a fixed set of modifications.

    Two peptides are equal when their full sequences and accessions match.

    Attributes
    ----------
    full_sequence : str
        Sequence including modification annotations; the stable sort key.
    base_sequence : str
        Unmodified sequence. Derived from ``full_sequence`` when omitted.
    accession : str
        Accession of the parent protein, if known.
    """

    full_sequence: str
    base_sequence: str = ""
    accession: str = ""

    def __post_init__(self):
        if not self.base_sequence:
            object.__setattr__(self, "base_sequence", strip_modifications(self.full_sequence))

    @property
    def label(self) -> str:
        return self.full_sequence


@dataclass(eq=False)
class ProteinGroup:
    """
    A group of indistinguishable proteins and the peptides assigned to it.

    Protein groups compare by identity.

    Attributes
    ----------
    name : str
        Display name, also the stable sort key.
    peptides : frozenset[Peptide]
        Every peptide assigned to the group, shared or not.
    unique_peptides : frozenset[Peptide]
        Peptides assigned to this group only. Defaults to ``peptides``.
    """

    name: str
    peptides: frozenset = field(default_factory=frozenset)
    unique_peptides: Optional[frozenset] = None

    def __post_init__(self):
        self.peptides = frozenset(self.peptides)
        if self.unique_peptides is None:
            self.unique_peptides = self.peptides
        else:
            self.unique_peptides = frozenset(self.unique_peptides)

    @property
    def shared_peptides(self) -> frozenset:
        return self.peptides - self.unique_peptides

    @property
    def label(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, peptides={len(self.peptides)}, "
            f"unique={len(self.unique_peptides)})"
        )


@dataclass(eq=False)
class SpectralMatch:
    """
    The identification of a single scan, with its reporter or precursor intensities.

    Spectral matches compare by identity: two scans carrying the same
    sequence are still separate observations.

    Attributes
    ----------
    file_path : str
        Full path of the spectra file.
    scan_number : int
        One-based scan number.
    full_sequence : str
        Identified sequence with modifications.
    base_sequence : str
        Identified sequence without modifications.
    score : float
        Search engine score.
    identified_peptides : tuple[Peptide, ...]
        Peptides the match resolves to, best first.
    intensities : np.ndarray, optional
        One intensity per channel of the file, ``None`` if not quantified.
    """

    file_path: str
    scan_number: int
    full_sequence: str
    base_sequence: str = ""
    score: float = 0.0
    identified_peptides: Sequence[Peptide] = ()
    intensities: Optional[np.ndarray] = None

    def __post_init__(self):
        if not self.base_sequence:
            self.base_sequence = strip_modifications(self.full_sequence)
        self.identified_peptides = tuple(self.identified_peptides)
        if self.intensities is not None:
            self.intensities = np.asarray(self.intensities, dtype=np.float64)

    @property
    def file_name(self) -> str:
        return PureWindowsPath(self.file_path).stem

    @property
    def peptide(self) -> Optional[Peptide]:
        """The first identified peptide; ambiguous matches resolve to it."""
        return self.identified_peptides[0] if self.identified_peptides else None

    @property
    def label(self) -> str:
        return f"{self.file_name}:{self.scan_number}:{self.full_sequence}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.label!r}, score={self.score})"


def sort_by_sequence(entities: Iterable, key: str = "full_sequence") -> list:
    """Sort entities by a textual attribute; ties keep their input order."""
    return sorted(entities, key=lambda entity: getattr(entity, key))
