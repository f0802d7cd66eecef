"""
Vybe Reading - Motif Detector

Classifies structural patterns across a token set.

Detection is a pure pass: it computes a (token index -> motifs) annotation
map and returns new token copies with those flags merged in. Input tokens
are never mutated.

Per-token rules are independent and all evaluated. Cross-token rules
(progression, arrival) run after the per-token pass. The returned motif list
is always in canonical priority order.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import (
    ARRIVAL_KEYWORDS,
    MOTIF_PRIORITY,
    TRAVEL_TYPES,
)
from .types import Token, sort_motifs

logger = logging.getLogger(__name__)

_TRIPLE = re.compile(r"(\d)\1\1")


# =============================================================================
# PER-TOKEN RULES
# =============================================================================

def is_mirror_time(iso: str) -> bool:
    """HH equals MM reversed (15:51, 20:02, 12:21)."""
    hours, minutes = iso.split(":")
    return hours.zfill(2) == minutes[::-1]


def is_mirror_numeric(digits: str) -> bool:
    return len(digits) > 1 and digits == digits[::-1]


def is_mirror(token: Token) -> bool:
    if token.type == "time":
        return is_mirror_time(token.value.iso)
    return is_mirror_numeric(token.digit_string)


def is_gateway(token: Token) -> bool:
    raw = token.raw
    if "11" in raw:
        return True
    if token.type in TRAVEL_TYPES:
        return raw.startswith("11.") or raw.endswith(".11")
    if token.type == "time":
        return token.value.iso == "11:11"
    return token.digit_string in ("111", "1111")


def is_triple(token: Token) -> bool:
    return bool(_TRIPLE.search(token.digit_string))


def is_shift_555(token: Token) -> bool:
    return "555" in token.digit_string or "15:55" in token.raw


def is_heart_stack(token: Token) -> bool:
    if token.reduction.reduce_to != 6:
        return False
    digits = token.digit_string
    return "6" in digits and len(digits) >= 3


def is_builder(token: Token) -> bool:
    digits = token.digit_string
    return "44" in digits or "1144" in digits


def is_abundance(token: Token) -> bool:
    digits = token.digit_string
    return "88" in digits or (len(digits) > 0 and set(digits) == {"8"})


def is_percent_near_full(token: Token) -> bool:
    return token.bucket == "near_full"


TOKEN_RULES = [
    ("mirror_time", is_mirror),
    ("gateway_11", is_gateway),
    ("triple", is_triple),
    ("shift_555", is_shift_555),
    ("heart_6_stack", is_heart_stack),
    ("builder_44_1144", is_builder),
    ("abundance_signature", is_abundance),
    ("percent_near_full", is_percent_near_full),
]


def token_motifs(token: Token) -> List[str]:
    """Per-token motifs in rule evaluation order."""
    return [motif for motif, rule in TOKEN_RULES if rule(token)]


# =============================================================================
# CROSS-TOKEN RULES
# =============================================================================

def is_progression(time_tokens: Sequence[Token]) -> bool:
    """
    At least three time tokens whose total minutes step by exactly one.

    Duplicates break the run.
    """
    minutes = sorted(t.value.total_minutes for t in time_tokens)
    if len(minutes) < 2:
        return False
    consecutive = 1
    for prev, curr in zip(minutes, minutes[1:]):
        if curr - prev == 1:
            consecutive += 1
            if consecutive >= 3:
                return True
        else:
            consecutive = 1
    return False


def has_arrival_keyword(context: Optional[str]) -> bool:
    if not context:
        return False
    lowered = context.lower()
    return any(keyword in lowered for keyword in ARRIVAL_KEYWORDS)


def is_arrival(tokens: Sequence[Token], context: Optional[str] = None) -> bool:
    """
    Journey motif.

    Needs a distance or fuel/consumption token, then any of: an arrival
    keyword in the context, distance and fuel/consumption together, or a
    first distance reading of exactly 77.
    """
    distances = [t for t in tokens if t.type == "distance"]
    has_fuel = any(t.type in ("fuel", "consumption") for t in tokens)

    if not distances and not has_fuel:
        return False
    if has_arrival_keyword(context):
        return True
    if distances and has_fuel:
        return True
    return bool(distances) and distances[0].value.value == 77


# =============================================================================
# DETECTION
# =============================================================================

@dataclass(frozen=True)
class MotifResult:
    """Detected motifs (priority order) and flag-annotated token copies."""
    motifs: Tuple[str, ...]
    tokens: Tuple[Token, ...]
    annotations: Dict[int, Tuple[str, ...]] = field(default_factory=dict)

    @property
    def dominant(self) -> Optional[str]:
        return dominant_motif(self.motifs)


def annotate_motifs(
    tokens: Sequence[Token],
    context: Optional[str] = None,
) -> Tuple[List[str], Dict[int, List[str]]]:
    """
    Compute motif annotations without touching the tokens.

    Returns:
        Tuple of (motifs in priority order, token index -> new motif flags)
    """
    detected = set()
    annotations: Dict[int, List[str]] = {i: [] for i in range(len(tokens))}

    for index, token in enumerate(tokens):
        flags = token_motifs(token)
        annotations[index].extend(flags)
        detected.update(flags)

    time_indexes = [i for i, t in enumerate(tokens) if t.type == "time"]
    if len(time_indexes) >= 2 and is_progression([tokens[i] for i in time_indexes]):
        detected.add("progression")
        for index in time_indexes:
            annotations[index].append("progression")

    if is_arrival(tokens, context):
        detected.add("arrival")
        for index, token in enumerate(tokens):
            if token.type in TRAVEL_TYPES:
                annotations[index].append("arrival")

    return sort_motifs(detected), annotations


def merge_flags(existing: Iterable[str], new: Iterable[str]) -> Tuple[str, ...]:
    """Existing flags first, then new ones; first occurrence wins."""
    merged: List[str] = []
    for flag in list(existing) + list(new):
        if flag not in merged:
            merged.append(flag)
    return tuple(merged)


def detect_motifs(tokens: Sequence[Token], context: Optional[str] = None) -> MotifResult:
    """
    Detect motifs and return flag-annotated token copies.

    Args:
        tokens: Tokens in any order
        context: Optional free text (arrival keywords)

    Returns:
        MotifResult; `tokens` keeps the input order
    """
    motifs, annotations = annotate_motifs(tokens, context)
    flagged = tuple(
        replace(token, flags=merge_flags(token.flags, annotations[i]))
        for i, token in enumerate(tokens)
    )
    logger.debug("Detected motifs %s", motifs)
    return MotifResult(
        motifs=tuple(motifs),
        tokens=flagged,
        annotations={i: tuple(flags) for i, flags in annotations.items() if flags},
    )


def motif_strength(motif: str) -> int:
    """Priority index (0 = strongest)."""
    return MOTIF_PRIORITY.index(motif)


def dominant_motif(motifs: Iterable[str]) -> Optional[str]:
    """Highest-priority motif present, or None."""
    ordered = sort_motifs(motifs)
    return ordered[0] if ordered else None
