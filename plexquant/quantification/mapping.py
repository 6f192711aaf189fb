"""
Row-index mappings feeding the roll-up strategies.

A mapping assigns every higher-level entity the row positions of its
contributors in a lower-level matrix. Entities without contributors keep
an empty list, so the rolled-up matrix always has one row per entity.
"""

from typing import Iterable

from plexquant.core.logger import get_logger
from plexquant.core.matrix import QuantMatrix
from plexquant.model.identification import Peptide, ProteinGroup, sort_by_sequence

logger = get_logger("plexquant.quantification.mapping")


def get_psm_to_peptide_map(
    matrix: QuantMatrix, peptides: Iterable[Peptide]
) -> dict[Peptide, list[int]]:
    """
    Map each peptide to the spectral-match rows resolving to it.

    Parameters
    ----------
    matrix : QuantMatrix
        Spectral-match matrix of one file.
    peptides : Iterable[Peptide]
        Peptide universe of the run.

    Returns
    -------
    dict[Peptide, list[int]]
        Every distinct peptide, ordered by full sequence, with the row
        indices of its spectral matches. A spectral match contributes to its
        first identified peptide only; a match whose peptide is outside the
        universe contributes to nothing.
    """
    mapping: dict[Peptide, list[int]] = {}
    for peptide in sort_by_sequence(peptides):
        mapping.setdefault(peptide, [])

    orphans = 0
    for row, match in enumerate(matrix.row_keys):
        indices = mapping.get(match.peptide)
        if indices is None:
            orphans += 1
            continue
        indices.append(row)

    if orphans:
        logger.debug("%d spectral matches did not resolve to a known peptide", orphans)
    return mapping


def get_peptide_to_protein_map(
    matrix: QuantMatrix,
    protein_groups: Iterable[ProteinGroup],
    use_shared_peptides: bool = False,
) -> dict[ProteinGroup, list[int]]:
    """
    Map each protein group to the peptide rows contributing to it.

    Parameters
    ----------
    matrix : QuantMatrix
        Combined peptide matrix.
    protein_groups : Iterable[ProteinGroup]
        Protein groups of the run.
    use_shared_peptides : bool
        If True, a peptide contributes to every group listing it among its
        peptides. If False, only unique peptides are used and a peptide
        claimed as unique by more than one group is dropped.

    Returns
    -------
    dict[ProteinGroup, list[int]]
        Every group, ordered by name, with its peptide row indices.
    """
    groups = sorted(protein_groups, key=lambda group: group.name)
    mapping: dict[ProteinGroup, list[int]] = {group: [] for group in groups}

    owners: dict[Peptide, list[ProteinGroup]] = {}
    for group in groups:
        members = group.peptides if use_shared_peptides else group.unique_peptides
        for peptide in members:
            owners.setdefault(peptide, []).append(group)

    if not use_shared_peptides:
        conflicting = [peptide for peptide, claimed in owners.items() if len(claimed) > 1]
        for peptide in conflicting:
            del owners[peptide]
        if conflicting:
            logger.warning(
                "%d peptides are unique to more than one protein group and were ignored",
                len(conflicting),
            )

    for row, peptide in enumerate(matrix.row_keys):
        for group in owners.get(peptide, ()):
            mapping[group].append(row)

    return mapping
