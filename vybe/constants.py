"""
Vybe Reading - Canonical Constants

Fixed orderings, keywords and literal fallbacks shared by the parse, motif,
ranking and assembly stages.

All orderings are deterministic and canonical. Reordering any of these lists
changes which motif dominates a reading and how tokens are displayed.
"""
from typing import List, Set, Tuple

# =============================================================================
# TOKEN TYPES (closed set, phrasebook keys)
# =============================================================================

TOKEN_TYPES: List[str] = [
    "time",
    "percent",
    "temp",
    "distance",
    "consumption",
    "fuel",
    "count",
    "code",
    "tagged-code",
]

# Display priority used by the ranker (differs from the matcher order)
TYPE_PRIORITY: List[str] = [
    "time",
    "percent",
    "temp",
    "distance",
    "consumption",
    "fuel",
    "code",
    "tagged-code",
    "count",
]

# Token types that describe a journey (arrival motif)
TRAVEL_TYPES: Set[str] = {"distance", "fuel", "consumption"}

# =============================================================================
# MOTIFS (closed set, total priority order)
# =============================================================================

MOTIF_PRIORITY: List[str] = [
    "arrival",
    "gateway_11",
    "mirror_time",
    "shift_555",
    "heart_6_stack",
    "builder_44_1144",
    "abundance_signature",
    "percent_near_full",
    "progression",
    "triple",
]

ARRIVAL_KEYWORDS: List[str] = [
    "arrive",
    "arriving",
    "arrival",
    "return home",
    "back home",
]

# Rank assigned to tokens that carry no motif flag
UNRANKED: int = 2 ** 53 - 1

# =============================================================================
# NUMEROLOGY
# =============================================================================

MASTER_NUMBERS: Set[int] = {11, 22, 33}

# =============================================================================
# THRESHOLDS
# =============================================================================

DEFAULT_NEAR_FULL_PERCENT: int = 95
DEFAULT_SEVENTIES: Tuple[int, int] = (70, 79)

# =============================================================================
# FEATURE GATE
# =============================================================================

FEATURE_FLAG: str = "FEATURE_VYBE_V4_READINGS"

# =============================================================================
# LITERAL FALLBACKS
# =============================================================================

DEFAULT_KEY: str = "default"
TOKEN_PLACEHOLDER: str = "{token}"
HEADLINE_SEPARATOR: str = " · "
ENTRY_PREFIX: str = "Cycle IV Entry #{entry_no} — "

EMPTY_HEADLINE: str = "Snapshot"
EMPTY_SUBJECT: str = "This moment"
FALLBACK_TITLE_SUFFIX: str = "Seal (The Renewal Spark)"
FALLBACK_GUIDANCE_AREA: str = "Integration"
FALLBACK_RESONANCE_CORE: str = "5"

MAX_LAYERED_ROWS: int = 4
MAX_ALIGNMENT_ROWS: int = 4
MAX_HEADLINE_SEGMENTS: int = 2


def is_valid_token_type(token_type: str) -> bool:
    """Check if token type is in the closed set."""
    return token_type in TOKEN_TYPES


def is_valid_motif(motif: str) -> bool:
    """Check if motif is in the closed set."""
    return motif in MOTIF_PRIORITY
