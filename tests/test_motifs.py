"""
Tests for motif detection (vybe/motifs.py).

Per-token rules, cross-token rules (progression, arrival), priority order,
and the non-mutating annotation pass.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from vybe import MOTIF_PRIORITY, detect_motifs, dominant_motif, extract_tokens, motif_strength
from vybe.motifs import (
    annotate_motifs,
    has_arrival_keyword,
    is_mirror_time,
    merge_flags,
    token_motifs,
)


def motifs_for(raw, context=None):
    return list(detect_motifs(extract_tokens(raw), context).motifs)


def single(raw):
    tokens = extract_tokens(raw)
    assert len(tokens) == 1
    return tokens[0]


# =============================================================================
# PER-TOKEN RULES
# =============================================================================

class TestMirror:

    @pytest.mark.parametrize("iso", ["15:51", "12:21", "20:02", "14:41"])
    def test_mirrored_times(self, iso):
        assert is_mirror_time(iso)

    @pytest.mark.parametrize("iso", ["10:10", "06:16", "15:55"])
    def test_non_mirrored_times(self, iso):
        assert not is_mirror_time(iso)

    def test_numeric_palindrome(self):
        assert "mirror_time" in token_motifs(single("1221"))
        assert "mirror_time" in token_motifs(single("77 km"))

    def test_single_digit_is_not_a_palindrome(self):
        assert "mirror_time" not in token_motifs(single("5%"))


class TestGateway:

    def test_raw_contains_11(self):
        assert "gateway_11" in token_motifs(single("11:11"))
        assert "gateway_11" in token_motifs(single("11.1 L"))
        assert "gateway_11" in token_motifs(single("AB110"))

    def test_travel_value_suffix(self):
        assert "gateway_11" in token_motifs(single("3.11 km"))

    def test_no_gateway(self):
        assert "gateway_11" not in token_motifs(single("12:21"))
        assert "gateway_11" not in token_motifs(single("101"))


def test_triple():
    assert "triple" in token_motifs(single("1112"))
    assert "triple" not in token_motifs(single("1121"))


def test_shift_555():
    assert "shift_555" in token_motifs(single("15:55"))
    assert "shift_555" in token_motifs(single("5550"))
    assert "shift_555" not in token_motifs(single("5505"))


def test_heart_6_stack():
    assert "heart_6_stack" in token_motifs(single("600"))
    # reduces to 6 but only two digits
    assert "heart_6_stack" not in token_motifs(single("06%"))
    # contains 6 but reduces to 3
    assert "heart_6_stack" not in token_motifs(single("246"))


def test_builder():
    assert "builder_44_1144" in token_motifs(single("1144"))
    assert "builder_44_1144" in token_motifs(single("440"))
    assert "builder_44_1144" not in token_motifs(single("414"))


def test_abundance_and_percent_bucket_are_independent():
    token = single("88%")
    assert token.bucket == "88"
    assert "abundance_signature" in token_motifs(token)
    assert "abundance_signature" in token_motifs(single("888"))


def test_percent_near_full():
    assert "percent_near_full" in token_motifs(single("97%"))
    assert "percent_near_full" not in token_motifs(single("74%"))


# =============================================================================
# CROSS-TOKEN RULES
# =============================================================================

class TestProgression:

    def test_three_consecutive_minutes(self):
        assert "progression" in motifs_for("10:00 10:01 10:02")

    def test_unordered_input(self):
        assert "progression" in motifs_for("10:02 10:00 10:01")

    def test_two_times_are_not_enough(self):
        assert "progression" not in motifs_for("10:00 10:01")

    def test_gap_breaks_run(self):
        assert "progression" not in motifs_for("10:00 10:01 10:03")

    def test_duplicate_breaks_run(self):
        assert "progression" not in motifs_for("10:00 10:00 10:01")

    def test_all_time_tokens_flagged(self):
        result = detect_motifs(extract_tokens("10:00 10:01 10:02 42"))
        flagged = [t.raw for t in result.tokens if t.has_flag("progression")]
        assert flagged == ["10:00", "10:01", "10:02"]


class TestArrival:

    def test_context_keyword(self):
        assert "arrival" in motifs_for("12 km", context="Arriving at the station")
        assert "arrival" in motifs_for("5 L", context="finally back home")

    def test_distance_and_fuel_together(self):
        assert "arrival" in motifs_for("12 km 30 L")

    def test_distance_of_77(self):
        assert "arrival" in motifs_for("77 km")

    def test_other_distance_without_context(self):
        assert "arrival" not in motifs_for("76 km")

    def test_needs_travel_token(self):
        assert "arrival" not in motifs_for("15:51", context="arrived home")

    def test_keyword_match_is_case_insensitive(self):
        assert has_arrival_keyword("We ARRIVE soon")
        assert not has_arrival_keyword(None)
        assert not has_arrival_keyword("leaving")

    def test_travel_tokens_flagged(self):
        result = detect_motifs(extract_tokens("15:51 77 km 11.1 L"))
        flagged = [t.raw for t in result.tokens if t.has_flag("arrival")]
        assert flagged == ["77 km", "11.1 L"]


# =============================================================================
# PRIORITY AND PURITY
# =============================================================================

def test_motifs_in_priority_order():
    motifs = motifs_for("77 km 11.1 L")
    assert motifs == [m for m in MOTIF_PRIORITY if m in motifs]
    assert motifs[0] == "arrival"


def test_arrival_dominates_gateway():
    result = detect_motifs(extract_tokens("77 km 11.1 L"))
    assert "gateway_11" in result.motifs
    assert result.dominant == "arrival"


def test_dominant_motif():
    assert dominant_motif([]) is None
    assert dominant_motif(["triple", "mirror_time"]) == "mirror_time"
    assert motif_strength("arrival") == 0


def test_detection_does_not_mutate_input():
    tokens = extract_tokens("15:51 74%")
    result = detect_motifs(tokens)
    assert all(t.flags == () for t in tokens)
    assert result.tokens[0].flags == ("mirror_time",)
    assert result.tokens[0] is not tokens[0]


def test_annotations_keyed_by_index():
    tokens = extract_tokens("42 15:51")
    motifs, annotations = annotate_motifs(tokens)
    assert motifs == ["mirror_time"]
    assert annotations[0] == []
    assert annotations[1] == ["mirror_time"]


def test_merge_flags_keeps_existing_first():
    assert merge_flags(("triple",), ["mirror_time", "triple"]) == ("triple", "mirror_time")
