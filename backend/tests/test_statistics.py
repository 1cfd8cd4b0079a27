"""
Tests for numeric summaries, frequency tables, correlation and histograms.
"""

import math

import pytest

from donki_eda.services.statistics import (
    category_key,
    correlation_matrix,
    frequency_table,
    histogram,
    numeric_summary,
    pearson_correlation,
    quantile,
)


def test_quantiles_at_exact_data_points():
    """Test linear-interpolation quantiles on 1..5."""
    data = [1, 2, 3, 4, 5]
    assert quantile(data, 0.5) == 3
    assert quantile(data, 0.25) == 2
    assert quantile(data, 0.75) == 4


def test_quantile_interpolates():
    """Test interpolation between bracketing elements."""
    assert quantile([1, 2, 3, 4], 0.5) == pytest.approx(2.5)
    assert quantile([10, 20], 0.25) == pytest.approx(12.5)


def test_quantile_empty_is_nan():
    """Test quantile of an empty sequence."""
    assert math.isnan(quantile([], 0.5))


def test_numeric_summary_basic():
    """Test the full numeric summary of 1..5."""
    summary = numeric_summary([3, "1", 5, "2", 4])

    assert summary.count == 5
    assert summary.min == 1
    assert summary.max == 5
    assert summary.mean == pytest.approx(3.0)
    assert summary.median == 3
    assert summary.p25 == 2
    assert summary.p75 == 4
    assert summary.stddev == pytest.approx(math.sqrt(2.5))


def test_numeric_summary_skips_unparseable():
    """Test that unparseable and missing values are left out of the count."""
    summary = numeric_summary(["1", "x", None, "3", ""])
    assert summary.count == 2
    assert summary.mean == pytest.approx(2.0)


def test_numeric_summary_single_value_has_zero_stddev():
    """Test the n<=1 standard deviation rule."""
    summary = numeric_summary([7])
    assert summary.stddev == 0
    assert summary.min == summary.max == summary.median == 7


def test_numeric_summary_none_when_nothing_parses():
    """Test that no summary is produced without numbers."""
    assert numeric_summary(["a", "b", None]) is None
    assert numeric_summary([]) is None


def test_numeric_summary_bounds_are_ordered():
    """Test min <= p25 <= median <= p75 <= max on skewed data."""
    s = numeric_summary([0.1, 100, 3, 3, 3, 42.5, -7, 1e4])
    assert s.min <= s.p25 <= s.median <= s.p75 <= s.max


def test_category_key_normalizes():
    """Test text keys for booleans, integral floats and nested values."""
    assert category_key(True) == "true"
    assert category_key(3.0) == "3"
    assert category_key(3.5) == "3.5"
    assert category_key(" C ") == "C"
    assert category_key({"b": 1, "a": 2}) == category_key({"a": 2, "b": 1})


def test_frequency_table_orders_by_count_then_first_seen():
    """Test descending counts with ties kept in first-seen order."""
    cardinality, top = frequency_table(["b", "a", "b", "a", "c", None, ""])
    assert cardinality == 3
    assert [(c.value, c.count) for c in top] == [("b", 2), ("a", 2), ("c", 1)]


def test_frequency_table_truncates_but_keeps_cardinality():
    """Test that cardinality is the full distinct count."""
    values = [f"v{i}" for i in range(30)]
    cardinality, top = frequency_table(values, top_n=20)
    assert cardinality == 30
    assert len(top) == 20


def test_frequency_table_merges_equivalent_values():
    """Test that 1, 1.0 and "1" share a key."""
    cardinality, top = frequency_table([1, 1.0, "1", 2])
    assert cardinality == 2
    assert top[0].value == "1"
    assert top[0].count == 3


def test_pearson_perfect_positive():
    """Test y = 2x gives r = 1."""
    assert pearson_correlation([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)


def test_pearson_perfect_negative():
    """Test y = -x gives r = -1."""
    assert pearson_correlation([1, 2, 3, 4], [-1, -2, -3, -4]) == pytest.approx(-1.0)


def test_pearson_truncates_to_shorter_vector():
    """Test that unequal vectors are truncated."""
    assert pearson_correlation([1, 2, 3, 4, 100], [2, 4, 6, 8]) == pytest.approx(1.0)


def test_pearson_skips_missing_pairs():
    """Test that positions with a missing side are ignored."""
    r = pearson_correlation([1, None, 3, 4], [2, 5, None, 8])
    assert r == pytest.approx(1.0)


def test_pearson_undefined_cases():
    """Test NaN for too few pairs and zero variance."""
    assert math.isnan(pearson_correlation([1], [2]))
    assert math.isnan(pearson_correlation([1, 2, 3], [5, 5, 5]))
    assert math.isnan(pearson_correlation([0.1, 0.1, 0.1], [1, 2, 3]))
    assert math.isnan(pearson_correlation([], []))


def test_correlation_matrix_symmetric_with_unit_diagonal():
    """Test matrix symmetry and identity diagonal."""
    columns = [[1, 2, 3, 4], [2, 1, 4, 3], [4, 3, 2, 1]]
    matrix = correlation_matrix(columns)

    for i in range(3):
        assert matrix[i][i] == 1
        for j in range(3):
            assert matrix[i][j] == matrix[j][i]
            assert -1 <= matrix[i][j] <= 1


def test_histogram_bins():
    """Test equal-width bins with the maximum in the last bin."""
    bins = histogram([1, 2, 3, 4, 5, "x", None], 1, 5, bins=4)
    assert [b["count"] for b in bins] == [1, 1, 1, 2]
    assert bins[0]["start"] == 1
    assert bins[1]["start"] == pytest.approx(2)


def test_histogram_degenerate_range_is_empty():
    """Test that constant or non-finite ranges cannot be binned."""
    assert histogram([5, 5, 5], 5, 5) == []
    assert histogram([1, 2], float("nan"), 2) == []
    assert histogram([1, 2], 1, float("inf")) == []
