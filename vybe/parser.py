"""
Vybe Reading - Tokenizer

Extracts typed, non-overlapping numeric tokens from a raw capture.

Parsing Algorithm:
1. Run each matcher in fixed priority order, scanning left to right
2. Skip candidates that intersect a span accepted by an earlier matcher
3. Reject (do not downgrade) out-of-range times
4. Sort accepted matches by start offset
5. Attach reductions and percent buckets

Overlap resolution is greedy by matcher priority, not by match length.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Tuple

from .config import Thresholds
from .reduce import build_reduction
from .types import (
    CaptureInput,
    CodeValue,
    DistanceValue,
    MeasureValue,
    PercentValue,
    TaggedCodeValue,
    TemperatureValue,
    TimeValue,
    Token,
    TokenValue,
    parse_number,
)

logger = logging.getLogger(__name__)


# =============================================================================
# VALUE BUILDERS
# =============================================================================

def _time_value(match: re.Match) -> Optional[TimeValue]:
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if minutes > 59 or hours > 23:
        return None
    return TimeValue(
        hours=hours,
        minutes=minutes,
        iso=f"{hours:02d}:{minutes:02d}",
        total_minutes=hours * 60 + minutes,
    )


def _percent_value(match: re.Match) -> PercentValue:
    return PercentValue(value=min(max(int(match.group(1)), 0), 100))


def _temp_value(match: re.Match) -> TemperatureValue:
    return TemperatureValue(value=int(match.group(1)), unit=match.group(2))


def _consumption_value(match: re.Match) -> MeasureValue:
    return MeasureValue(value=parse_number(match.group(1)))


def _distance_value(match: re.Match) -> DistanceValue:
    unit = "km" if match.group(2).lower() == "km" else "mi"
    return DistanceValue(value=parse_number(match.group(1)), unit=unit)


def _fuel_value(match: re.Match) -> MeasureValue:
    return MeasureValue(value=parse_number(match.group(1)))


def _count_value(match: re.Match) -> MeasureValue:
    return MeasureValue(value=int(match.group(0)))


def _tagged_code_value(match: re.Match) -> TaggedCodeValue:
    return TaggedCodeValue(
        prefix=match.group(1),
        digits=match.group(2),
        numeric=int(match.group(2)),
    )


def _code_value(match: re.Match) -> CodeValue:
    return CodeValue(value=match.group(0), numeric=int(match.group(0)))


# =============================================================================
# MATCHERS (priority order)
# =============================================================================

@dataclass(frozen=True)
class Matcher:
    type: str
    regex: Pattern
    value: Callable[[re.Match], Optional[TokenValue]]


_FLAGS = re.ASCII
_FLAGS_I = re.ASCII | re.IGNORECASE

TOKEN_PATTERNS: List[Matcher] = [
    Matcher("time", re.compile(r"\b(\d{1,2}):(\d{2})\b", _FLAGS), _time_value),
    Matcher("percent", re.compile(r"\b(\d{1,3})%(?=\s|$)", _FLAGS), _percent_value),
    Matcher("temp", re.compile(r"\b(-?\d{1,2})°([CF])\b", _FLAGS), _temp_value),
    Matcher("consumption", re.compile(r"\b(\d+(?:\.\d+)?)\s?L/100km\b", _FLAGS_I), _consumption_value),
    Matcher("distance", re.compile(r"\b(\d+(?:\.\d+)?)\s?(km|mi)\b", _FLAGS_I), _distance_value),
    Matcher("fuel", re.compile(r"\b(\d+(?:\.\d+)?)\s?L\b", _FLAGS_I), _fuel_value),
    Matcher("count", re.compile(r"\b\d{3,}\b", _FLAGS), _count_value),
    Matcher("tagged-code", re.compile(r"\b([A-Z]{1,3})(\d{2,4})\b", _FLAGS), _tagged_code_value),
    Matcher("code", re.compile(r"\b\d{2,4}\b", _FLAGS), _code_value),
]


# =============================================================================
# SPAN BOOKKEEPING
# =============================================================================

def intersects(existing: Tuple[int, int], candidate: Tuple[int, int]) -> bool:
    """Half-open [start, end) intersection test."""
    return candidate[0] < existing[1] and candidate[1] > existing[0]


def is_occupied(span: Tuple[int, int], occupied: List[Tuple[int, int]]) -> bool:
    return any(intersects(existing, span) for existing in occupied)


# =============================================================================
# BUCKETS
# =============================================================================

def percent_bucket(value: int, thresholds: Thresholds) -> Optional[str]:
    """
    Secondary classification for percent tokens.

    Checked in order: near_full, seventies, exactly 88.
    """
    low, high = thresholds.seventies
    if value >= thresholds.near_full_percent:
        return "near_full"
    if low <= value <= high:
        return "seventies"
    if value == 88:
        return "88"
    return None


# =============================================================================
# MAIN TOKENIZER
# =============================================================================

def extract_tokens(raw: str, thresholds: Optional[Thresholds] = None) -> List[Token]:
    """
    Extract typed tokens from raw capture text.

    Args:
        raw: Capture text (may be empty)
        thresholds: Percent bucket cutoffs (defaults: 95, 70..79)

    Returns:
        Non-overlapping tokens in ascending span order. Empty input yields [].
    """
    thresholds = thresholds or Thresholds()
    accepted: List[Tuple[str, int, int, str, TokenValue]] = []
    occupied: List[Tuple[int, int]] = []

    for matcher in TOKEN_PATTERNS:
        for match in matcher.regex.finditer(raw):
            span = (match.start(), match.end())
            if is_occupied(span, occupied):
                continue
            value = matcher.value(match)
            if value is None:
                logger.debug("Rejected %s candidate %r", matcher.type, match.group(0))
                continue
            accepted.append((matcher.type, span[0], span[1], match.group(0), value))
            occupied.append(span)

    accepted.sort(key=lambda m: (m[1], m[2]))

    tokens = []
    for token_type, start, end, token_raw, value in accepted:
        bucket = None
        if token_type == "percent":
            bucket = percent_bucket(value.value, thresholds)
        tokens.append(Token(
            raw=token_raw,
            type=token_type,
            value=value,
            start=start,
            end=end,
            reduction=build_reduction(token_raw),
            bucket=bucket,
        ))

    logger.debug("Extracted %d tokens from %r", len(tokens), raw)
    return tokens


def ensure_tokens(capture: CaptureInput, thresholds: Optional[Thresholds] = None) -> List[Token]:
    """
    Use pre-supplied tokens verbatim when present, otherwise tokenize `raw`.
    """
    if capture.tokens:
        return list(capture.tokens)
    return extract_tokens(capture.raw, thresholds)
