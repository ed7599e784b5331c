import math

import numpy as np
import pytest

from core.exceptions import ParseWarning, ValidationError
from ingestion.validator import (
    KeywordValidator,
    coerce_volume,
    parse_volume_field
)
from labeling.intent_classifier import KeywordClassifier


@pytest.mark.parametrize("raw, expected", [
    (500, 500),
    ("500", 500),
    (" 500 ", 500),
    (12.7, 12),
    ("12.7", 12),
    ("300 searches", 0),
    ("0x1A", 26),
    ("Infinity", 0),
    ("1e400", 0),
    ("1e3", 1000),
    (np.int64(42), 42),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (-5, 0),
    ("-5", 0),
    (math.nan, 0),
    (math.inf, 0),
    (True, 0),
])
def test_coerce_volume(raw, expected):
    assert coerce_volume(raw) == expected


def test_matching_volumes_pair_positionally():
    pairs = KeywordValidator().normalize_input(["a", "b"], ["10", 20])
    assert pairs == [("a", 10), ("b", 20)]


def test_mismatched_volumes_default_to_zero():
    result = KeywordValidator().normalize(["a", "b", "c"], [10, 20])

    assert result.pairs == [("a", 0), ("b", 0), ("c", 0)]
    assert result.volumes_defaulted is True
    assert result.total_volume == 0


def test_missing_volumes_default_to_zero():
    assert KeywordValidator().normalize_input(["a"]) == [("a", 0)]


def test_keywords_trimmed_and_empty_dropped():
    result = KeywordValidator().normalize(
        ["  buy shoes ", "   ", "", "best shoes"],
        [1, 2, 3, 4]
    )

    assert result.pairs == [("buy shoes", 1), ("best shoes", 4)]
    assert result.dropped_keywords == 2
    assert result.keyword_count == 2


def test_unparseable_volumes_recorded():
    result = KeywordValidator().normalize(["a", "b", "c"], ["n/a", 0, None])

    assert result.pairs == [("a", 0), ("b", 0), ("c", 0)]
    assert result.recovered_volumes == ["a"]
    assert len(result.warnings) == 1
    assert isinstance(result.warnings[0], ParseWarning)


def test_empty_keyword_list_raises():
    with pytest.raises(ValidationError):
        KeywordValidator().normalize_input([])


def test_only_blank_keywords_raises():
    with pytest.raises(ValidationError) as exc:
        KeywordValidator().normalize_input(["  ", ""])
    assert exc.value.field == "keywords"


@pytest.mark.parametrize("raw", [9007199254740993, "9007199254740993"])
def test_large_integer_volumes_stay_exact(raw):
    assert coerce_volume(raw) == 9007199254740993


def test_volume_beyond_float_range_is_kept():
    assert coerce_volume(10 ** 400) == 10 ** 400


def test_large_volume_sums_exactly():
    result = KeywordClassifier().analyze(
        ["buy shoes", "seo tips"],
        [9007199254740993, 10 ** 400]
    )
    assert result.stats.total_volume == 9007199254740993 + 10 ** 400


def test_decimal_string_truncates_without_rounding():
    assert coerce_volume("9007199254740993.9") == 9007199254740993


@pytest.mark.parametrize("raw, expected", [
    ("500", 500),
    ("300 searches", 300),
    ("12.7", 12),
    ("1e3", 1),
    ("9007199254740993", 9007199254740993),
    ("-5", 0),
    ("lots", 0),
    ("", 0),
    (None, 0),
])
def test_parse_volume_field(raw, expected):
    assert parse_volume_field(raw) == expected
