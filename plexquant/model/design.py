"""
Experimental design model for the plexquant package.

This module provides the sample descriptors used as matrix columns and the
experimental design mapping each spectra file to its ordered channels.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Iterable, Iterator, Mapping, Sequence

import pandas as pd

from plexquant.core.exceptions import ConfigurationMismatch


def file_key(file_path: str) -> str:
    """Return the file name of ``file_path`` without directory and extension."""
    # PureWindowsPath splits on both "/" and "\\"
    return PureWindowsPath(file_path).stem


@dataclass(frozen=True)
class SampleInfo:
    """
    Descriptor of one quantification column.

    Attributes
    ----------
    file_path : str
        Spectra file the channel was measured in.
    condition : str
        Condition label of the sample.
    biological_replicate : int
        Biological replicate index.
    technical_replicate : int
        Technical replicate index.
    fraction : int
        Fraction index.
    """

    file_path: str
    condition: str
    biological_replicate: int = 0
    technical_replicate: int = 0
    fraction: int = 0

    @property
    def file_name(self) -> str:
        return file_key(self.file_path) if self.file_path else ""

    @property
    def is_reference_channel(self) -> bool:
        return False

    @property
    def label(self) -> str:
        """Stable textual label used as a column header."""
        parts = [self.file_name] if self.file_name else []
        parts += [
            self.condition,
            f"B{self.biological_replicate}",
            f"T{self.technical_replicate}",
            f"F{self.fraction}",
        ]
        return "_".join(parts)

    def collapsed(self, *fields: str) -> "SampleInfo":
        """
        Return a copy with ``fields`` reset, marking them as merged.

        Numeric fields become 0 and text fields become an empty string.
        """
        changes = {}
        for name in fields:
            current = getattr(self, name)
            changes[name] = "" if isinstance(current, str) else type(current)(0)
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class IsobaricSampleInfo(SampleInfo):
    """
    Descriptor of one reporter-ion channel in a multiplexed (TMT/iTRAQ) run.

    Attributes
    ----------
    plex : int
        Identifier of the plex the channel belongs to.
    channel_label : str
        Reporter channel label, e.g. ``126`` or ``127N``.
    reporter_ion_mz : float
        Reporter ion m/z.
    reference : bool
        Whether the channel is a reference (bridge) channel.
    """

    plex: int = 0
    channel_label: str = ""
    reporter_ion_mz: float = 0.0
    reference: bool = False

    @property
    def is_reference_channel(self) -> bool:
        return self.reference

    @property
    def label(self) -> str:
        base = super().label
        return f"{base}_{self.channel_label}" if self.channel_label else base


class ExperimentalDesign:
    """
    Maps each spectra file to the ordered channel descriptors measured in it.

    Keys are file names without directory and extension, so
    ``/data/run1.raw`` and ``run1.mzML`` both resolve to ``run1``.

    Parameters
    ----------
    file_samples : Mapping[str, Sequence[SampleInfo]]
        File name (or path) to channel descriptors in channel order.

    Raises
    ------
    ValueError
        If two entries resolve to the same file name, e.g. ``a.raw`` and ``a.mzML``.
    """

    def __init__(self, file_samples: Mapping[str, Sequence[SampleInfo]]):
        self._file_samples = {}
        for name, samples in file_samples.items():
            key = file_key(name)
            if key in self._file_samples:
                raise ValueError(f"More than one design entry for file name '{key}': {name}")
            self._file_samples[key] = tuple(samples)

    @property
    def file_name_sample_info(self) -> dict[str, tuple[SampleInfo, ...]]:
        return dict(self._file_samples)

    @property
    def files(self) -> list[str]:
        return sorted(self._file_samples)

    @property
    def samples(self) -> list[SampleInfo]:
        """All channel descriptors, files in sorted order."""
        return [sample for name in self.files for sample in self._file_samples[name]]

    def samples_for(self, file_path: str) -> tuple[SampleInfo, ...]:
        """
        Return the channels measured in ``file_path``.

        Raises
        ------
        ConfigurationMismatch
            If the file is not described by this design.
        """
        try:
            return self._file_samples[file_key(file_path)]
        except KeyError:
            raise ConfigurationMismatch(file_key(file_path)) from None

    def __contains__(self, file_path: str) -> bool:
        return file_key(file_path) in self._file_samples

    def __len__(self) -> int:
        return len(self._file_samples)

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> "ExperimentalDesign":
        """
        Build a design from one mapping per channel.

        Each record needs ``file_path`` and ``condition`` and may carry
        ``biological_replicate``, ``technical_replicate`` and ``fraction``.
        Records with a ``channel_label`` become :class:`IsobaricSampleInfo`
        (with optional ``plex``, ``reporter_ion_mz`` and ``reference``).
        Channel order within a file follows record order.

        Raises
        ------
        ValueError
            If two different paths share a file name.
        """
        file_samples: dict[str, list[SampleInfo]] = {}
        for record in records:
            record = {k: v for k, v in record.items() if v is not None}
            common = dict(
                file_path=str(record["file_path"]),
                condition=str(record["condition"]),
                biological_replicate=int(record.get("biological_replicate", 0)),
                technical_replicate=int(record.get("technical_replicate", 0)),
                fraction=int(record.get("fraction", 0)),
            )
            if record.get("channel_label") not in (None, ""):
                sample = IsobaricSampleInfo(
                    **common,
                    plex=int(record.get("plex", 0)),
                    channel_label=str(record["channel_label"]),
                    reporter_ion_mz=float(record.get("reporter_ion_mz", 0.0)),
                    reference=bool(record.get("reference", False)),
                )
            else:
                sample = SampleInfo(**common)
            file_samples.setdefault(sample.file_path, []).append(sample)
        return cls(file_samples)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "ExperimentalDesign":
        """Build a design from a table with one row per channel (see :meth:`from_records`)."""
        records = df.astype(object).where(pd.notna(df), None).to_dict("records")
        return cls.from_records(records)

    def __repr__(self) -> str:
        channels = sum(len(samples) for samples in self._file_samples.values())
        return f"{self.__class__.__name__}(files={len(self)}, channels={channels})"
