"""
Tests for the Vybe tokenizer (vybe/parser.py).

Covers matcher priority, overlap resolution, time rejection, percent
buckets and the pre-supplied token seam.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from vybe import CaptureInput, Thresholds, Token, extract_tokens, ensure_tokens, percent_bucket
from vybe.parser import intersects


def token_types(raw, **kwargs):
    return [(t.raw, t.type) for t in extract_tokens(raw, **kwargs)]


# =============================================================================
# BASIC MATCHERS
# =============================================================================

def test_empty_input_yields_no_tokens():
    assert extract_tokens("") == []
    assert extract_tokens("   no numbers here ") == []


def test_time_token_value():
    tokens = extract_tokens("12:21")
    assert len(tokens) == 1
    time = tokens[0]
    assert time.type == "time"
    assert time.value.hours == 12
    assert time.value.minutes == 21
    assert time.value.iso == "12:21"
    assert time.value.total_minutes == 12 * 60 + 21


def test_single_digit_hour_is_zero_padded():
    time = extract_tokens("7:05")[0]
    assert time.type == "time"
    assert time.value.iso == "07:05"


def test_percent_token_value():
    tokens = extract_tokens("battery 74%")
    assert [(t.raw, t.type) for t in tokens] == [("74%", "percent")]
    assert tokens[0].value.value == 74


def test_percent_is_clamped():
    assert extract_tokens("250%")[0].value.value == 100


def test_temperature_token():
    tokens = extract_tokens("18°C outside")
    assert tokens[0].type == "temp"
    assert tokens[0].value.value == 18
    assert tokens[0].value.unit == "C"


def test_fahrenheit_temperature():
    tokens = extract_tokens("it is 72°F")
    assert tokens[0].type == "temp"
    assert tokens[0].value.value == 72
    assert tokens[0].value.unit == "F"


def test_distance_and_fuel():
    assert token_types("77 km 11.1 L") == [("77 km", "distance"), ("11.1 L", "fuel")]
    tokens = extract_tokens("77 km 11.1 L")
    assert tokens[0].value.value == 77
    assert isinstance(tokens[0].value.value, int)
    assert tokens[0].value.unit == "km"
    assert tokens[1].value.value == 11.1


def test_miles_distance():
    tokens = extract_tokens("drove 12.5mi")
    assert tokens[0].type == "distance"
    assert tokens[0].value.unit == "mi"
    assert tokens[0].value.value == 12.5


def test_consumption_wins_over_fuel_and_distance():
    # "8.4 L" and "100km" are both inside the consumption span
    assert token_types("8.4 L/100km") == [("8.4 L/100km", "consumption")]


def test_count_and_code():
    assert token_types("1200 42") == [("1200", "count"), ("42", "code")]


def test_tagged_code():
    tokens = extract_tokens("gate AB1234")
    assert [(t.raw, t.type) for t in tokens] == [("AB1234", "tagged-code")]
    assert tokens[0].value.prefix == "AB"
    assert tokens[0].value.digits == "1234"
    assert tokens[0].value.numeric == 1234


# =============================================================================
# TIME REJECTION
# =============================================================================

class TestTimeRejection:
    """Out-of-range times produce no time token."""

    def test_minutes_out_of_range(self):
        tokens = extract_tokens("06:60")
        assert all(t.type != "time" for t in tokens)

    def test_rejected_time_leaves_span_free(self):
        # The rejected candidate does not block lower-priority matchers
        assert token_types("06:60") == [("06", "code"), ("60", "code")]

    def test_hours_out_of_range(self):
        assert all(t.type != "time" for t in extract_tokens("24:00"))

    def test_valid_mirrored_time(self):
        tokens = extract_tokens("12:21")
        assert tokens[0].type == "time"


# =============================================================================
# ORDERING AND OVERLAP
# =============================================================================

def test_tokens_sorted_by_start():
    tokens = extract_tokens("42 then 15:51 then 74%")
    starts = [t.start for t in tokens]
    assert starts == sorted(starts)
    assert [t.raw for t in tokens] == ["42", "15:51", "74%"]


@pytest.mark.parametrize("raw", [
    "15:51 74%",
    "06:16 99% 18°C 1200",
    "77 km 11.1 L 8.4 L/100km",
    "AB1234 1144 555 11:11",
    "06:60 12:21 88% 2024",
])
def test_spans_never_overlap(raw):
    tokens = extract_tokens(raw)
    for i, a in enumerate(tokens):
        for b in tokens[i + 1:]:
            assert not intersects(a.span, b.span)


def test_intersects_is_half_open():
    assert intersects((0, 5), (4, 6))
    assert not intersects((0, 5), (5, 7))


def test_reduction_attached():
    token = extract_tokens("15:51")[0]
    assert token.reduction.sum == 12
    assert token.reduction.reduce_to == 3


# =============================================================================
# PERCENT BUCKETS
# =============================================================================

class TestPercentBuckets:

    def test_default_buckets(self):
        thresholds = Thresholds()
        assert percent_bucket(99, thresholds) == "near_full"
        assert percent_bucket(95, thresholds) == "near_full"
        assert percent_bucket(70, thresholds) == "seventies"
        assert percent_bucket(79, thresholds) == "seventies"
        assert percent_bucket(88, thresholds) == "88"
        assert percent_bucket(50, thresholds) is None

    def test_tokens_carry_bucket(self):
        tokens = extract_tokens("74% 88% 97% 30%")
        assert [t.bucket for t in tokens] == ["seventies", "88", "near_full", None]

    def test_custom_thresholds(self):
        thresholds = Thresholds(near_full_percent=90, seventies=(60, 69))
        tokens = extract_tokens("92% 65% 74%", thresholds=thresholds)
        assert [t.bucket for t in tokens] == ["near_full", "seventies", None]

    def test_non_percent_tokens_have_no_bucket(self):
        assert extract_tokens("15:51")[0].bucket is None


# =============================================================================
# PRE-SUPPLIED TOKENS
# =============================================================================

def test_ensure_tokens_uses_supplied_tokens_verbatim():
    supplied = Token.from_dict({"raw": "42", "type": "code", "value": {"value": "42", "numeric": 42}})
    capture = CaptureInput(raw="15:51 74%", tokens=(supplied,))
    assert ensure_tokens(capture) == [supplied]


def test_ensure_tokens_tokenizes_raw_without_supplied_tokens():
    capture = CaptureInput(raw="15:51 74%")
    assert [t.raw for t in ensure_tokens(capture)] == ["15:51", "74%"]
