"""
Tests for collapse strategies.
"""

import pytest

from plexquant.collapse import (
    CollapseDimension,
    MeanCollapse,
    NoCollapse,
    SampleCollapseStrategy,
    SumCollapse,
)
from plexquant.core.aggregation import AggregationType
from plexquant.core.matrix import QuantMatrix
from plexquant.model import SampleInfo, collapse_from_name

from conftest import tmt_channels


def build(values, columns):
    matrix = QuantMatrix([f"pep{i}" for i in range(len(values))], columns)
    matrix.values[:, :] = values
    return matrix


class TestSampleCollapseStrategy:
    """Tests for collapsing a single design dimension."""

    def test_fractions_median(self):
        columns = [
            SampleInfo("f1.raw", "A", 1, 1, fraction=1),
            SampleInfo("f2.raw", "A", 1, 1, fraction=2),
        ]
        matrix = build([[1000.0, 2000.0], [1000.0, 0.0]], columns)
        result = SampleCollapseStrategy(CollapseDimension.FRACTION).collapse(matrix)

        assert result.shape == (2, 1)
        assert result.get_row("pep0").tolist() == [1500.0]
        assert result.get_row("pep1").tolist() == [1000.0]

        merged = result.column_keys[0]
        assert merged.fraction == 0
        assert merged.file_path == ""
        assert merged.condition == "A"
        assert merged.biological_replicate == 1

    def test_technical_replicates_average(self):
        columns = [SampleInfo("t1.raw", "A", 1, 1), SampleInfo("t2.raw", "A", 1, 2)]
        matrix = build([[1000.0, 3000.0]], columns)
        result = SampleCollapseStrategy("TechnicalReplicate", "Average").collapse(matrix)

        assert result.get_row("pep0").tolist() == [2000.0]
        assert result.column_keys[0].technical_replicate == 0

    def test_different_biological_replicates_not_collapsed(self):
        columns = [
            SampleInfo("f1.raw", "A", 1, fraction=1),
            SampleInfo("f2.raw", "A", 2, fraction=1),
        ]
        matrix = build([[1000.0, 3000.0]], columns)
        result = SampleCollapseStrategy("Fraction").collapse(matrix)

        assert result.shape == (1, 2)
        assert result.get_row("pep0").tolist() == [1000.0, 3000.0]

    def test_biological_replicates_average(self):
        columns = [SampleInfo("b1.raw", "A", 1), SampleInfo("b2.raw", "A", 2)]
        matrix = build([[1000.0, 3000.0]], columns)
        result = SampleCollapseStrategy("BiologicalReplicate", AggregationType.AVERAGE).collapse(matrix)

        assert result.get_row("pep0").tolist() == [2000.0]

    def test_sum(self):
        columns = [SampleInfo("b1.raw", "A", 1), SampleInfo("b2.raw", "A", 2)]
        matrix = build([[1000.0, 3000.0]], columns)
        result = SampleCollapseStrategy("BiologicalReplicate", "Sum").collapse(matrix)

        assert result.get_row("pep0").tolist() == [4000.0]

    def test_isobaric_channels_kept_apart(self):
        columns = tmt_channels("f1.raw", 2, fraction=1) + tmt_channels("f2.raw", 2, fraction=2)
        matrix = build([[10.0, 20.0, 30.0, 40.0]], columns)
        result = SampleCollapseStrategy("Fraction", "Sum").collapse(matrix)

        assert result.shape == (1, 2)
        assert result.get_row("pep0").tolist() == [40.0, 60.0]
        assert [c.channel_label for c in result.column_keys] == ["126", "127N"]

    def test_name(self):
        assert SampleCollapseStrategy("Fraction").name == "Collapse_Fraction_Median"
        assert (
            SampleCollapseStrategy("technical_replicate", "mean").name
            == "Collapse_TechnicalReplicate_Average"
        )

    def test_unknown_dimension(self):
        with pytest.raises(KeyError):
            SampleCollapseStrategy("Plex")


class TestConditionCollapse:
    """Tests for collapsing runs into condition and biological replicate."""

    @pytest.fixture
    def matrix(self):
        columns = [
            SampleInfo("a1.raw", "A", 1, 1),
            SampleInfo("a2.raw", "A", 1, 2),
            SampleInfo("b1.raw", "B", 1, 1),
        ]
        return build([[100.0, 300.0, 50.0], [0.0, 300.0, 0.0]], columns)

    def test_mean_collapse(self, matrix):
        result = MeanCollapse().collapse(matrix)

        assert result.shape == (2, 2)
        assert result.get_row("pep0").tolist() == [200.0, 50.0]
        assert result.get_row("pep1").tolist() == [300.0, 0.0]
        assert [c.condition for c in result.column_keys] == ["A", "B"]
        assert all(c.file_path == "" and c.technical_replicate == 0 for c in result.column_keys)

    def test_sum_collapse(self, matrix):
        result = SumCollapse().collapse(matrix)

        assert result.get_row("pep0").tolist() == [400.0, 50.0]
        assert result.get_row("pep1").tolist() == [300.0, 0.0]

    def test_no_collapse(self, matrix):
        result = NoCollapse().collapse(matrix)

        assert result is not matrix
        assert result.column_keys == matrix.column_keys


class TestCollapseFromName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("None", NoCollapse()),
            ("mean_collapse", MeanCollapse()),
            ("Sum", SumCollapse()),
            ("Collapse_Fraction_Median", SampleCollapseStrategy("Fraction", "Median")),
            (
                "Collapse_BiologicalReplicate_Average",
                SampleCollapseStrategy("BiologicalReplicate", "Average"),
            ),
        ],
    )
    def test_names(self, name, expected):
        assert collapse_from_name(name) == expected

    def test_name_round_trip(self):
        strategy = SampleCollapseStrategy("TechnicalReplicate", "Sum")
        assert collapse_from_name(strategy.name) == strategy

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            collapse_from_name("Quantile")
