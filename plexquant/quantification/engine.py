"""
Quantification engine: spectral matches to protein groups in one pass.

The engine runs a fixed sequence of stages, each reading the previous
stage's matrix and returning a new one:

1. Pivot the spectral matches into one matrix per spectra file.
2. Per file: normalize, then roll spectral matches up to peptides.
3. Combine the per-file peptide matrices.
4. Normalize the combined peptide matrix.
5. Collapse replicate columns, roll peptides up to protein groups and
   normalize the result.

Which strategy runs at each stage, and which snapshots are written, is
decided by :class:`~plexquant.model.parameters.QuantificationParameters`.
"""

from typing import Iterable, Optional

from joblib import Parallel, delayed

from plexquant.core.constants import (
    NO_PEPTIDES_SUMMARY,
    NO_PROTEIN_GROUPS_SUMMARY,
    NO_SPECTRAL_MATCHES_SUMMARY,
    NULL_DESIGN_SUMMARY,
    SUCCESS_SUMMARY,
)
from plexquant.core.logger import get_logger, log_execution_time
from plexquant.core.matrix import QuantMatrix
from plexquant.io.writer import QuantMatrixWriter
from plexquant.model.design import ExperimentalDesign
from plexquant.model.identification import Peptide, ProteinGroup, SpectralMatch
from plexquant.model.parameters import QuantificationParameters
from plexquant.quantification.combine import combine_peptide_matrices
from plexquant.quantification.mapping import get_peptide_to_protein_map, get_psm_to_peptide_map
from plexquant.quantification.pivot import pivot_by_file
from plexquant.quantification.result import QuantificationResult

logger = get_logger("plexquant.quantification.engine")


class QuantificationEngine:
    """
    Runs the quantification pipeline over one set of inputs.

    Parameters
    ----------
    parameters : QuantificationParameters
        Strategies and output options.
    experimental_design : ExperimentalDesign
        Channel layout of every spectra file.
    spectral_matches : Iterable[SpectralMatch]
        Spectral matches with their intensities.
    peptides : Iterable[Peptide]
        Peptide universe; spectral matches resolving elsewhere are ignored.
    protein_groups : Iterable[ProteinGroup]
        Protein groups to quantify.
    writer : QuantMatrixWriter, optional
        Snapshot writer. Built from ``parameters`` when omitted and any
        snapshot is enabled.

    Examples
    --------
    >>> engine = QuantificationEngine(params, design, matches, peptides, groups)
    >>> result = engine.run()
    >>> result.protein_matrix.to_frame()
    """

    def __init__(
        self,
        parameters: QuantificationParameters,
        experimental_design: Optional[ExperimentalDesign],
        spectral_matches: Optional[Iterable[SpectralMatch]],
        peptides: Optional[Iterable[Peptide]],
        protein_groups: Optional[Iterable[ProteinGroup]],
        writer: Optional[QuantMatrixWriter] = None,
    ):
        self.parameters = parameters or QuantificationParameters.get_simple_parameters()
        self.experimental_design = experimental_design
        self.spectral_matches = list(spectral_matches) if spectral_matches is not None else None
        self.peptides = list(peptides) if peptides is not None else None
        self.protein_groups = list(protein_groups) if protein_groups is not None else None

        if writer is None and self.parameters.writes_anything:
            writer = QuantMatrixWriter(
                self.parameters.output_directory, self.parameters.output_format
            )
        self.writer = writer

    def validate(self) -> Optional[str]:
        """
        Check the inputs in pipeline order.

        Returns
        -------
        str or None
            Summary describing the first missing input, or None if the run
            can proceed.
        """
        if not self.experimental_design:
            return NULL_DESIGN_SUMMARY
        if not self.spectral_matches:
            return NO_SPECTRAL_MATCHES_SUMMARY
        if not self.peptides:
            return NO_PEPTIDES_SUMMARY
        if not self.protein_groups:
            return NO_PROTEIN_GROUPS_SUMMARY
        return None

    @log_execution_time(logger)
    def run(self) -> QuantificationResult:
        """
        Run every stage and return the peptide and protein matrices.

        Snapshots of the raw and peptide data are written in the background
        and joined before returning; the protein snapshot is written last.

        Returns
        -------
        QuantificationResult
            ``success`` is False, with no matrices, if validation failed.

        Raises
        ------
        ConfigurationMismatch
            If a spectral match comes from a file missing from the design.
        Exception
            Any error raised while writing a snapshot.
        """
        failure = self.validate()
        if failure is not None:
            logger.warning(failure)
            return QuantificationResult.failure(failure)

        logger.info(
            "Quantifying %d spectral matches, %d peptides and %d protein groups over %d files",
            len(self.spectral_matches),
            len(self.peptides),
            len(self.protein_groups),
            len(self.experimental_design),
        )
        logger.debug("Strategies:\n%s", self.parameters.describe())

        pending = []
        written = []
        try:
            if self.parameters.write_raw_information:
                pending.append(
                    self.writer.write_spectral_matches(
                        self.spectral_matches, self.experimental_design
                    )
                )

            peptide_matrix = self.run_peptide_quant()
            if self.parameters.write_peptide_information:
                pending.append(self.writer.write_peptides(peptide_matrix))

            protein_matrix = self.run_protein_quant(peptide_matrix)
        except BaseException:
            # the pipeline error wins over any snapshot error
            self._join_snapshots(pending, written, raise_errors=False)
            raise
        self._join_snapshots(pending, written)

        if self.parameters.write_protein_information:
            written.append(self.writer.write_proteins(protein_matrix).path)

        return QuantificationResult(
            success=True,
            summary=SUCCESS_SUMMARY,
            peptide_matrix=peptide_matrix,
            protein_matrix=protein_matrix,
            written_files=written,
        )

    def run_and_return_protein_matrix(self) -> QuantMatrix:
        """
        Run the pipeline and return only the protein matrix.

        Raises
        ------
        ValueError
            If the inputs failed validation.
        """
        result = self.run()
        if not result.success:
            raise ValueError(result.summary)
        return result.protein_matrix

    def run_peptide_quant(self) -> QuantMatrix:
        """Pivot, per-file normalize and roll up, combine and normalize."""
        per_file = pivot_by_file(self.spectral_matches, self.experimental_design)

        results = Parallel(n_jobs=self.parameters.n_jobs, prefer="threads")(
            delayed(self._quantify_file)(matrix) for matrix in per_file.values()
        )
        per_file_peptides = dict(zip(per_file.keys(), results))

        combined = combine_peptide_matrices(per_file_peptides)
        logger.info("Combined peptide matrix: %d peptides x %d samples", *combined.shape)

        return self.parameters.peptide_normalization.normalize(combined)

    def run_protein_quant(self, peptide_matrix: QuantMatrix) -> QuantMatrix:
        """Collapse replicate columns, roll peptides up to protein groups and normalize."""
        collapsed = self.parameters.collapse.collapse(peptide_matrix)
        if collapsed.shape != peptide_matrix.shape:
            logger.info(
                "%s collapsed %d samples into %d",
                self.parameters.collapse.name,
                peptide_matrix.shape[1],
                collapsed.shape[1],
            )

        mapping = get_peptide_to_protein_map(
            collapsed,
            self.protein_groups,
            self.parameters.use_shared_peptides_for_protein_quant,
        )
        proteins = self.parameters.peptide_to_protein_roll_up.roll_up(collapsed, mapping)
        logger.info("Protein matrix: %d protein groups x %d samples", *proteins.shape)
        return self.parameters.protein_normalization.normalize(proteins)

    @staticmethod
    def _join_snapshots(tasks, written: list, raise_errors: bool = True) -> None:
        """
        Join every background snapshot task, then re-raise the first writer error.

        Paths of the snapshots that were written successfully are appended to
        ``written``.
        """
        first_error = None
        for task in tasks:
            try:
                task.close()
            except Exception as e:
                logger.error("Snapshot %s failed: %s", task.path, str(e))
                if first_error is None:
                    first_error = e
                continue
            written.append(task.path)
        if first_error is not None and raise_errors:
            raise first_error

    def _quantify_file(self, matrix: QuantMatrix) -> QuantMatrix:
        normalized = self.parameters.spectral_match_normalization.normalize(matrix)
        mapping = get_psm_to_peptide_map(normalized, self.peptides)
        return self.parameters.spectral_match_to_peptide_roll_up.roll_up(normalized, mapping)
