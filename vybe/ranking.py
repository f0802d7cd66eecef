"""
Vybe Reading - Token Ranker

Canonical display order shared by every reading section.

rank = motif_rank * 100 + type_rank * 10 + start

motif_rank is the strongest motif index among the token's flags (UNRANKED
when it has none); type_rank is the index in TYPE_PRIORITY (len when
unknown). Lower ranks display first.
"""
from __future__ import annotations
from typing import List, Sequence

from .constants import MOTIF_PRIORITY, TYPE_PRIORITY, UNRANKED
from .types import Token


def rank_token(token: Token) -> int:
    motif_ranks = [MOTIF_PRIORITY.index(f) for f in token.flags if f in MOTIF_PRIORITY]
    motif_rank = min(motif_ranks) if motif_ranks else UNRANKED
    if token.type in TYPE_PRIORITY:
        type_rank = TYPE_PRIORITY.index(token.type)
    else:
        type_rank = len(TYPE_PRIORITY)
    return motif_rank * 100 + type_rank * 10 + token.start


def order_tokens(tokens: Sequence[Token]) -> List[Token]:
    """Stable ascending sort by rank_token()."""
    return sorted(tokens, key=rank_token)
