"""
Outcome of a quantification run.
"""

from dataclasses import dataclass, field
from typing import Optional

from plexquant.core.matrix import QuantMatrix


@dataclass
class QuantificationResult:
    """
    Success flag, summary message and the matrices a run produced.

    Attributes
    ----------
    success : bool
        False when the inputs failed validation.
    summary : str
        Human-readable outcome.
    peptide_matrix : QuantMatrix, optional
        Normalized peptide matrix, one column per physical channel.
    protein_matrix : QuantMatrix, optional
        Final protein matrix.
    written_files : list[str]
        Snapshot files written during the run.
    """

    success: bool
    summary: str
    peptide_matrix: Optional[QuantMatrix] = None
    protein_matrix: Optional[QuantMatrix] = None
    written_files: list = field(default_factory=list)

    @classmethod
    def failure(cls, summary: str) -> "QuantificationResult":
        return cls(success=False, summary=summary)
