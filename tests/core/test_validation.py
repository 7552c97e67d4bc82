"""
Tests for numeric parsing and input validation utilities.

Validates every function in core/validation.py:
    - parse_float / parse_int / parse_count / parse_probability:
      strict editor-text parsing, None on failure
    - check_array: conversion, dtype coercion, object rejection
    - check_finite, check_ndim / check_1d / check_2d, check_non_empty,
      check_non_negative, check_consistent_length
"""

import numpy as np
import pytest

from pychisq.core.exceptions import DimensionError, ValidationError
from pychisq.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_non_empty,
    check_non_negative,
    parse_count,
    parse_float,
    parse_int,
    parse_probability,
)


# ═══════════════════════════════════════════════════════════════════════
# Parsing
# ═══════════════════════════════════════════════════════════════════════


class TestParseFloat:

    @pytest.mark.parametrize("text,value", [
        ("1", 1.0), ("2.5", 2.5), ("-3", -3.0), ("+4", 4.0), ("1e3", 1000.0), (".5", 0.5),
    ])
    def test_valid(self, text, value):
        assert parse_float(text) == value

    @pytest.mark.parametrize("text", [
        "", "abc", " 1", "1 ", "1_000", "nan", "inf", "-inf", "1.2.3", "---",
    ])
    def test_invalid(self, text):
        assert parse_float(text) is None


class TestParseInt:

    @pytest.mark.parametrize("text,value", [("0", 0), ("12", 12), ("-2", -2), ("+7", 7)])
    def test_valid(self, text, value):
        assert parse_int(text) == value

    @pytest.mark.parametrize("text", ["", "1.0", "1e2", " 3", "1_0", "x"])
    def test_invalid(self, text):
        assert parse_int(text) is None


class TestParseCount:

    def test_non_negative(self):
        assert parse_count("0") == 0
        assert parse_count("15") == 15

    def test_negative_rejected(self):
        assert parse_count("-1") is None


class TestParseProbability:

    @pytest.mark.parametrize("text,value", [("0", 0.0), ("1", 1.0), ("0.3", 0.3)])
    def test_in_range(self, text, value):
        assert parse_probability(text) == value

    @pytest.mark.parametrize("text", ["1.5", "-0.1", "", "p"])
    def test_out_of_range_or_invalid(self, text):
        assert parse_probability(text) is None


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "x")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([[1, 2], [3]], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape and value checks
# ═══════════════════════════════════════════════════════════════════════


class TestChecks:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_finite_reports_counts(self):
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "x")

    def test_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_2d(self):
        check_2d(np.zeros((2, 2)), "t")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "t")

    def test_non_empty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_non_empty(np.zeros(0), "x")

    def test_non_negative(self):
        check_non_negative(np.array([0.0, 1.0]), "x")
        with pytest.raises(ValidationError, match=r"\[1\]"):
            check_non_negative(np.array([0.0, -1.0]), "x")

    def test_consistent_length(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))
        with pytest.raises(DimensionError, match="a=3, b=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("a", "b"))

    def test_consistent_length_name_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))
