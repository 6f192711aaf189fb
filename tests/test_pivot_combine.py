"""
Tests for pivoting spectral matches and combining per-file matrices.
"""

import numpy as np
import pytest

from plexquant.core.exceptions import ConfigurationMismatch
from plexquant.core.matrix import QuantMatrix
from plexquant.model import Peptide, SpectralMatch
from plexquant.quantification import (
    combine_peptide_matrices,
    get_psm_to_peptide_map,
    pivot,
    pivot_by_file,
)
from plexquant.rollup import SumRollUp


@pytest.fixture
def design(make_tmt_design):
    return make_tmt_design({"file2.raw": 3, "file1.raw": 3})


@pytest.fixture
def matches(make_match):
    return [
        make_match("file2.raw", 10, "PEPTIDEC", [1000.0, 1100.0, 1200.0]),
        make_match("file1.raw", 1, "PEPTIDEB", [100.0, 200.0, 300.0]),
        make_match("file2.raw", 11, "PEPTIDEA", [700.0, 800.0, 900.0]),
        make_match("file1.raw", 2, "PEPTIDEA", [400.0, 500.0, 600.0]),
    ]


class TestPivotByFile:
    """Tests for the per-file spectral-match matrices."""

    def test_one_matrix_per_file_in_sorted_order(self, matches, design):
        per_file = pivot_by_file(matches, design)
        assert list(per_file) == ["file1.raw", "file2.raw"]

    def test_rows_sorted_and_values_copied(self, matches, design):
        per_file = pivot_by_file(matches, design)
        file1 = per_file["file1.raw"]

        assert [m.full_sequence for m in file1.row_keys] == ["PEPTIDEA", "PEPTIDEB"]
        assert file1.column_keys == design.samples_for("file1.raw")
        assert file1.values.tolist() == [[400.0, 500.0, 600.0], [100.0, 200.0, 300.0]]
        assert per_file["file2.raw"].values.tolist() == [
            [700.0, 800.0, 900.0],
            [1000.0, 1100.0, 1200.0],
        ]

    def test_ties_keep_input_order(self, design, make_match):
        first = make_match("file1.raw", 5, "PEPTIDEA", [1.0, 1.0, 1.0])
        second = make_match("file1.raw", 3, "PEPTIDEA", [2.0, 2.0, 2.0])
        matrix = pivot_by_file([first, second], design)["file1.raw"]

        assert matrix.row_keys == (first, second)

    def test_matches_without_intensities_skipped(self, matches, design):
        unquantified = SpectralMatch("file1.raw", 3, "PEPTIDED")
        per_file = pivot_by_file(matches + [unquantified], design)

        assert unquantified not in per_file["file1.raw"]
        assert len(per_file["file1.raw"]) == 2

    def test_file_missing_from_design(self, matches, make_tmt_design):
        design = make_tmt_design({"file1.raw": 3})
        with pytest.raises(ConfigurationMismatch) as excinfo:
            pivot_by_file(matches, design)
        assert "file2" in str(excinfo.value)

    def test_wrong_number_of_intensities(self, design, make_match):
        with pytest.raises(ValueError):
            pivot_by_file([make_match("file1.raw", 1, "PEPTIDEA", [1.0, 2.0])], design)

    def test_design_lookup_ignores_directory_and_extension(self, make_tmt_design, make_match):
        design = make_tmt_design({"file1.raw": 2})
        match = make_match(r"C:\data\file1.mzML", 1, "PEPTIDEA", [1.0, 2.0])

        per_file = pivot_by_file([match], design)
        assert per_file[r"C:\data\file1.mzML"].values.tolist() == [[1.0, 2.0]]


class TestPivot:
    def test_single_matrix_over_all_files(self, matches, design):
        matrix = pivot(matches, design)

        assert matrix.shape == (4, 6)
        assert [m.full_sequence for m in matrix.row_keys] == [
            "PEPTIDEA",
            "PEPTIDEA",
            "PEPTIDEB",
            "PEPTIDEC",
        ]
        # file1's PEPTIDEA match is not observed in file2's channels
        assert matrix.get_row_at(0).tolist() == [400.0, 500.0, 600.0, 0.0, 0.0, 0.0]
        assert matrix.get_row_at(1).tolist() == [0.0, 0.0, 0.0, 700.0, 800.0, 900.0]


class TestCombinePeptideMatrices:
    """Tests for merging per-file peptide matrices."""

    def peptide_matrix(self, design, file_path, rows):
        matrix = QuantMatrix([Peptide(seq) for seq in rows], design.samples_for(file_path))
        for i, values in enumerate(rows.values()):
            matrix.set_row_at(i, values)
        return matrix

    def test_union_of_rows_with_zero_fill(self, make_tmt_design):
        design = make_tmt_design({"file1.raw": 2, "file2.raw": 2})
        per_file = {
            "file2.raw": self.peptide_matrix(
                design, "file2.raw", {"PEPA": [5.0, 6.0], "PEPC": [7.0, 8.0]}
            ),
            "file1.raw": self.peptide_matrix(
                design, "file1.raw", {"PEPB": [3.0, 4.0], "PEPA": [1.0, 2.0]}
            ),
        }
        combined = combine_peptide_matrices(per_file, design)

        assert [p.full_sequence for p in combined.row_keys] == ["PEPA", "PEPB", "PEPC"]
        assert combined.column_keys == design.samples_for("file1.raw") + design.samples_for(
            "file2.raw"
        )
        assert combined.values.tolist() == [
            [1.0, 2.0, 5.0, 6.0],
            [3.0, 4.0, 0.0, 0.0],
            [0.0, 0.0, 7.0, 8.0],
        ]

    def test_file_missing_from_design(self, make_tmt_design):
        design = make_tmt_design({"file1.raw": 2})
        other = make_tmt_design({"file9.raw": 2})
        per_file = {"file9.raw": self.peptide_matrix(other, "file9.raw", {"PEPA": [1.0, 2.0]})}

        with pytest.raises(ConfigurationMismatch):
            combine_peptide_matrices(per_file, design)

    def test_two_files_three_peptides(self, make_tmt_design, make_match):
        design = make_tmt_design({"file1.raw": 2, "file2.raw": 2})
        peptides = [Peptide("PEPA"), Peptide("PEPB"), Peptide("PEPC")]
        intensities = {
            "file1.raw": {"PEPA": [10.0, 20.0], "PEPB": [30.0, 40.0], "PEPC": [50.0, 60.0]},
            "file2.raw": {"PEPA": [11.0, 21.0], "PEPB": [31.0, 41.0], "PEPC": [51.0, 61.0]},
        }
        matches = [
            make_match(path, scan, Peptide(seq), values)
            for path, rows in intensities.items()
            for scan, (seq, values) in enumerate(rows.items())
        ]

        per_file = {
            path: SumRollUp().roll_up(matrix, get_psm_to_peptide_map(matrix, peptides))
            for path, matrix in pivot_by_file(matches, design).items()
        }
        combined = combine_peptide_matrices(per_file, design)

        assert combined.shape == (3, 4)
        expected = np.array(
            [intensities["file1.raw"][p.full_sequence] + intensities["file2.raw"][p.full_sequence]
             for p in peptides]
        )
        assert np.array_equal(combined.values, expected)
