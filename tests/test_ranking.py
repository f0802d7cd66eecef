"""
Tests for canonical token ordering (vybe/ranking.py).
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vybe import detect_motifs, extract_tokens, order_tokens, rank_token
from vybe.constants import TYPE_PRIORITY, UNRANKED


def ranked(raw, context=None):
    return [t.raw for t in order_tokens(detect_motifs(extract_tokens(raw), context).tokens)]


def test_motif_tokens_first_then_type_then_position():
    # 99% is a numeric palindrome, the rest carry no motif
    assert ranked("06:16 99% 18°C 1200") == ["99%", "06:16", "18°C", "1200"]


def test_unflagged_rank_uses_sentinel():
    token = extract_tokens("42")[0]
    assert rank_token(token) == UNRANKED * 100 + TYPE_PRIORITY.index("code") * 10 + 0


def test_flagged_rank():
    token = detect_motifs(extract_tokens("x 15:51")).tokens[0]
    # mirror_time is index 2, time is type 0, start offset 2
    assert rank_token(token) == 2 * 100 + 0 * 10 + 2


def test_strongest_flag_wins():
    tokens = detect_motifs(extract_tokens("77 km 11.1 L")).tokens
    assert all(t.has_flag("arrival") for t in tokens)
    assert ranked("77 km 11.1 L") == ["77 km", "11.1 L"]


def test_type_breaks_motif_ties():
    # both unflagged; count sorts after code regardless of position
    assert ranked("1203 42") == ["42", "1203"]


def test_position_breaks_type_ties():
    assert ranked("42 37 58") == ["42", "37", "58"]


def test_ordering_does_not_drop_tokens():
    raw = "06:16 99% 18°C 1200 AB12 7.5 L"
    assert sorted(ranked(raw)) == sorted(t.raw for t in extract_tokens(raw))


def test_empty():
    assert order_tokens([]) == []
