"""
Quantification parameters for the plexquant package.

This module provides the immutable configuration bundle read by the
quantification engine: six strategy slots plus output and behaviour flags.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from plexquant.collapse import CollapseStrategy, NoCollapse
from plexquant.core.constants import OUTPUT_FORMATS
from plexquant.model.collapse import collapse_from_name
from plexquant.model.normalization import NormalizationMethod
from plexquant.model.rollup import RollUpMethod
from plexquant.normalization import NoNormalization, NormalizationStrategy
from plexquant.rollup import RollUpStrategy, SumRollUp


@dataclass(frozen=True)
class QuantificationParameters:
    """
    Configuration of one quantification run.

    Attributes
    ----------
    spectral_match_normalization : NormalizationStrategy
        Applied to each per-file spectral-match matrix.
    spectral_match_to_peptide_roll_up : RollUpStrategy
        Aggregates spectral matches into peptides.
    peptide_normalization : NormalizationStrategy
        Applied to the combined peptide matrix.
    collapse : CollapseStrategy
        Merges replicate columns of the peptide matrix.
    peptide_to_protein_roll_up : RollUpStrategy
        Aggregates peptides into protein groups.
    protein_normalization : NormalizationStrategy
        Applied to the protein matrix.
    output_directory : str
        Directory receiving snapshot files.
    write_raw_information : bool
        Write the raw spectral-match matrix.
    write_peptide_information : bool
        Write the normalized peptide matrix.
    write_protein_information : bool
        Write the final protein matrix.
    use_shared_peptides_for_protein_quant : bool
        Let peptides shared between protein groups contribute to every group
        containing them. When False, only unique peptides are used.
    n_jobs : int
        Parallel jobs for the per-file stages (joblib convention, -1 = all cores).
    output_format : str
        ``csv`` or ``parquet``.
    """

    STRATEGY_FIELDS: ClassVar[tuple[str, ...]] = (
        "spectral_match_normalization",
        "spectral_match_to_peptide_roll_up",
        "peptide_normalization",
        "collapse",
        "peptide_to_protein_roll_up",
        "protein_normalization",
    )

    spectral_match_normalization: NormalizationStrategy = field(default_factory=NoNormalization)
    spectral_match_to_peptide_roll_up: RollUpStrategy = field(default_factory=SumRollUp)
    peptide_normalization: NormalizationStrategy = field(default_factory=NoNormalization)
    collapse: CollapseStrategy = field(default_factory=NoCollapse)
    peptide_to_protein_roll_up: RollUpStrategy = field(default_factory=SumRollUp)
    protein_normalization: NormalizationStrategy = field(default_factory=NoNormalization)

    output_directory: str = ""
    write_raw_information: bool = False
    write_peptide_information: bool = False
    write_protein_information: bool = False
    use_shared_peptides_for_protein_quant: bool = False
    n_jobs: int = 1
    output_format: str = "csv"

    def __post_init__(self):
        """Validate flags that cannot be checked by type alone."""
        if self.output_format.lower() not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format: {self.output_format}. Use one of {OUTPUT_FORMATS}"
            )
        if self.n_jobs == 0:
            raise ValueError("n_jobs must be a positive number of jobs or negative (joblib style)")
        writes = (
            self.write_raw_information
            or self.write_peptide_information
            or self.write_protein_information
        )
        if writes and not self.output_directory:
            raise ValueError("output_directory must be set when snapshot writing is enabled")

    @property
    def writes_anything(self) -> bool:
        return (
            self.write_raw_information
            or self.write_peptide_information
            or self.write_protein_information
        )

    @classmethod
    def get_simple_parameters(cls) -> "QuantificationParameters":
        """
        Parameters with no normalization, sum roll-ups and no collapse.

        Nothing is written to disk.
        """
        return cls()

    def replace(self, **changes) -> "QuantificationParameters":
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict) -> "QuantificationParameters":
        """
        Create parameters from a dictionary.

        Strategy slots take names such as ``global_median``, ``median`` or
        ``mean_collapse``; a collapse may also be given as a mapping with
        ``dimension`` and ``aggregation`` keys. Missing keys keep their defaults.

        Raises
        ------
        KeyError
            If a strategy name is not recognised.
        TypeError
            If ``data`` holds unknown keys.
        """
        data = dict(data)
        kwargs = {}
        for name in ("spectral_match_normalization", "peptide_normalization", "protein_normalization"):
            if name in data:
                kwargs[name] = _normalization(data.pop(name))
        for name in ("spectral_match_to_peptide_roll_up", "peptide_to_protein_roll_up"):
            if name in data:
                kwargs[name] = _roll_up(data.pop(name))
        if "collapse" in data:
            kwargs["collapse"] = _collapse(data.pop("collapse"))
        return cls(**kwargs, **data)

    def to_dict(self) -> dict:
        """Convert to a dictionary that :meth:`from_dict` accepts."""
        d = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name in self.STRATEGY_FIELDS:
                value = value.name
            d[f.name] = value
        return d

    def describe(self) -> str:
        """One line per strategy slot, for logging."""
        return "\n".join(
            f"{name}: {getattr(self, name).name}" for name in self.STRATEGY_FIELDS
        )


def _normalization(value) -> NormalizationStrategy:
    if isinstance(value, NormalizationStrategy):
        return value
    return NormalizationMethod.from_str(value).create()


def _roll_up(value) -> RollUpStrategy:
    if isinstance(value, RollUpStrategy):
        return value
    return RollUpMethod.from_str(value).create()


def _collapse(value: Optional[object]) -> CollapseStrategy:
    if isinstance(value, CollapseStrategy):
        return value
    if value is None:
        return NoCollapse()
    if isinstance(value, dict):
        from plexquant.collapse import SampleCollapseStrategy

        return SampleCollapseStrategy(value["dimension"], value.get("aggregation", "median"))
    return collapse_from_name(value)
