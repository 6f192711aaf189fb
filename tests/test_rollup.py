"""
Tests for roll-up strategies.
"""

import pytest

from plexquant.core.matrix import QuantMatrix
from plexquant.model import RollUpMethod, SampleInfo
from plexquant.rollup import MeanRollUp, MedianRollUp, SumRollUp


@pytest.fixture
def matrix():
    columns = [SampleInfo("run1.raw", "A", 1), SampleInfo("run1.raw", "A", 2)]
    m = QuantMatrix(["psm0", "psm1", "psm2", "psm3"], columns)
    m.values[:, :] = [
        [100.0, 200.0],
        [300.0, 400.0],
        [500.0, 100.0],
        [300.0, 0.0],
    ]
    return m


class TestMedianRollUp:
    """Tests for the median roll-up."""

    def test_median_of_rows(self, matrix):
        result = MedianRollUp().roll_up(matrix, {"pep": [0, 1, 2]})
        assert result.get_row("pep").tolist() == [300.0, 200.0]

    def test_zeros_are_ignored(self, matrix):
        result = MedianRollUp().roll_up(matrix, {"pep": [0, 3]})
        assert result.get_row("pep").tolist() == [200.0, 200.0]

    def test_all_zero_column(self, matrix):
        result = MedianRollUp().roll_up(matrix, {"pep": [3]})
        assert result.get_row("pep").tolist() == [300.0, 0.0]


class TestSumRollUp:
    """Tests for the sum roll-up."""

    def test_sum_of_rows(self, matrix):
        result = SumRollUp().roll_up(matrix, {"pepA": [0, 1], "pepB": [2, 3]})

        assert result.get_row("pepA").tolist() == [400.0, 600.0]
        assert result.get_row("pepB").tolist() == [800.0, 100.0]

    def test_empty_mapping_entry_gives_zero_row(self, matrix):
        result = SumRollUp().roll_up(matrix, {"pepA": [0], "missing": []})

        assert result.row_keys == ("pepA", "missing")
        assert result.get_row("missing").tolist() == [0.0, 0.0]

    def test_rows_follow_mapping_order(self, matrix):
        result = SumRollUp().roll_up(matrix, {"z": [0], "a": [1]})

        assert result.row_keys == ("z", "a")
        assert result.column_keys == matrix.column_keys


class TestMeanRollUp:
    def test_mean_ignores_zeros(self, matrix):
        result = MeanRollUp().roll_up(matrix, {"pep": [1, 3]})
        assert result.get_row("pep").tolist() == [300.0, 400.0]


class TestRollUpMethod:
    @pytest.mark.parametrize(
        "name, expected",
        [("sum", SumRollUp), ("Median", MedianRollUp), ("average", MeanRollUp), ("mean", MeanRollUp)],
    )
    def test_from_str(self, name, expected):
        assert isinstance(RollUpMethod.from_str(name).create(), expected)

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            RollUpMethod.from_str("top3")
