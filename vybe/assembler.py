"""
Vybe Reading - Assembler

Implements assemble_reading: capture -> VybeReading (+ optional explain)

Assembly Algorithm:
1. Tokenize (or take pre-supplied tokens)
2. Detect motifs and pick the dominant one
3. Rank tokens into display order
4. Derive flow values and the core frequency
5. Resolve each section against the phrasebook

Every phrasebook lookup falls through to a literal terminal, so assembly
never raises on missing keys or empty input.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence

from .config import DEFAULT_CONFIG, ReadingConfig
from .constants import (
    EMPTY_HEADLINE,
    EMPTY_SUBJECT,
    ENTRY_PREFIX,
    HEADLINE_SEPARATOR,
    MAX_ALIGNMENT_ROWS,
    MAX_HEADLINE_SEGMENTS,
    MAX_LAYERED_ROWS,
    TOKEN_PLACEHOLDER,
)
from .explain import build_explain_payload
from .motifs import detect_motifs
from .parser import ensure_tokens
from .phrasebook import Phrasebook
from .ranking import order_tokens
from .reduce import core_contribution, derive_core_frequency
from .types import (
    AlignmentSummaryRow,
    CaptureInput,
    GeneratedReading,
    GuidanceEntry,
    LayeredMeaningRow,
    NumerologyBlock,
    ReadingHeader,
    ResonanceEntry,
    Token,
    VybeReading,
    is_ascii_digit,
    parse_number,
)

logger = logging.getLogger(__name__)


def fill_token(template: str, text: str) -> str:
    """Substitute the first {token} placeholder."""
    return template.replace(TOKEN_PLACEHOLDER, text, 1)


# =============================================================================
# HEADER
# =============================================================================

def select_headline(tokens: Sequence[Token], motif: Optional[str]) -> str:
    """
    Headline from the tokens carrying the dominant motif.

    Falls back to the first two ranked tokens, then to "Snapshot".
    """
    motif_tokens = [t for t in tokens if motif and t.has_flag(motif)]
    headline_tokens = motif_tokens or list(tokens[:MAX_HEADLINE_SEGMENTS])

    segments: List[str] = []
    for token in headline_tokens:
        if token.raw not in segments:
            segments.append(token.raw)

    if not segments:
        return EMPTY_HEADLINE
    return HEADLINE_SEPARATOR.join(segments[:MAX_HEADLINE_SEGMENTS])


def build_header(
    capture: CaptureInput,
    phrasebook: Phrasebook,
    motif: Optional[str],
    core: int,
    headline: str,
) -> ReadingHeader:
    prefix = ENTRY_PREFIX.format(entry_no=capture.entry_no) if capture.entry_no else ""
    suffix = phrasebook.titles.resolve(motif, core)
    return ReadingHeader(
        title=f"{prefix}{headline} {suffix}",
        theme=tuple(phrasebook.themes.resolve(motif, core)),
    )


# =============================================================================
# ANCHOR FRAME
# =============================================================================

def build_anchor_frame(
    tokens: Sequence[Token],
    phrasebook: Phrasebook,
    motif: Optional[str],
) -> Dict[str, str]:
    """One entry per label; tokens sharing a label are joined with ' · '."""
    anchors: Dict[str, str] = {}
    for token in tokens:
        label = phrasebook.anchors.label(token.type)
        text = fill_token(phrasebook.anchors.template(token.type, motif), token.raw)
        if anchors.get(label):
            anchors[label] = f"{anchors[label]}{HEADLINE_SEPARATOR}{text}"
        else:
            anchors[label] = text
    return anchors


# =============================================================================
# LAYERED MEANING
# =============================================================================

def layer_key(token: Token) -> str:
    """
    Lookup key into layered[type].

    percent -> bucket, else flow value; code/tagged-code/count -> master,
    else flow value; everything else -> flow value.
    """
    flow = str(core_contribution(token))
    if token.type == "percent":
        return token.bucket or flow
    if token.type in ("code", "tagged-code", "count"):
        master = token.reduction.master
        return str(master) if master else flow
    return flow


def build_layered_meaning(tokens: Sequence[Token], phrasebook: Phrasebook) -> List[LayeredMeaningRow]:
    rows = []
    for token in tokens[:MAX_LAYERED_ROWS]:
        entry = phrasebook.layer_entry(token.type, layer_key(token))
        rows.append(LayeredMeaningRow(
            segment=token.raw,
            essence=entry.essence if entry else "",
            message=entry.message if entry else "",
        ))
    return rows


# =============================================================================
# ENERGY / RESONANCE / GUIDANCE / ESSENCE
# =============================================================================

def pick_energy_message(phrasebook: Phrasebook, motif: Optional[str], core: int) -> str:
    return phrasebook.energy_message.resolve(motif, core)


def pick_resonance(phrasebook: Phrasebook, motif: Optional[str], core: int) -> ResonanceEntry:
    return phrasebook.resonance.resolve(motif, core)


def pick_guidance_aspect(phrasebook: Phrasebook, motif: Optional[str], core: int) -> GuidanceEntry:
    return phrasebook.guidance_aspect.resolve(motif, core)


def pick_essence_sentence(
    phrasebook: Phrasebook,
    motif: Optional[str],
    tokens: Sequence[Token],
    headline: str,
) -> str:
    if headline:
        subject = headline
    elif tokens:
        subject = tokens[0].raw
    else:
        subject = EMPTY_SUBJECT
    return fill_token(phrasebook.essence_sentence.resolve(motif), subject)


# =============================================================================
# ALIGNMENT SUMMARY
# =============================================================================

def _display_number(key: str):
    try:
        return parse_number(key)
    except ValueError:
        return key


def build_alignment_summary(
    tokens: Sequence[Token],
    phrasebook: Phrasebook,
    core: int,
) -> List[AlignmentSummaryRow]:
    """
    Match tokens against the focus map, deduplicated by lookup key.

    Order of candidates: per token its numeric raw text then its flow key;
    then the core frequency; then, while fewer than four rows exist, each
    distinct reduction digit.
    """
    rows: List[AlignmentSummaryRow] = []
    used = set()

    def register(key: str) -> None:
        entry = phrasebook.alignment(key)
        if entry is None or key in used:
            return
        rows.append(AlignmentSummaryRow(
            focus=entry.focus,
            number=_display_number(key),
            tone=entry.tone,
            guidance=entry.guidance,
        ))
        used.add(key)

    for token in tokens:
        numeric_raw = "".join(ch for ch in token.raw if is_ascii_digit(ch) or ch == ".")
        if numeric_raw:
            register(numeric_raw)
        master = token.reduction.master
        register(str(master) if master else str(core_contribution(token)))

    register(str(core))

    if len(rows) < MAX_ALIGNMENT_ROWS:
        digit_keys: List[str] = []
        for token in tokens:
            for digit in token.reduction.digits:
                if str(digit) not in digit_keys:
                    digit_keys.append(str(digit))
        for key in digit_keys:
            if len(rows) >= MAX_ALIGNMENT_ROWS:
                break
            register(key)

    return rows[:MAX_ALIGNMENT_ROWS]


# =============================================================================
# MAIN ASSEMBLER
# =============================================================================

def assemble_reading(
    capture: CaptureInput,
    config: Optional[ReadingConfig] = None,
    explain: bool = False,
) -> GeneratedReading:
    """
    Build a complete reading for one capture. Not feature-gated.

    Args:
        capture: Raw text plus optional context, entry number, tokens
        config: Phrasebook and thresholds (defaults to the bundled ones)
        explain: Attach the explain payload

    Returns:
        GeneratedReading with `explain` set only when requested
    """
    config = config or DEFAULT_CONFIG
    phrasebook = config.phrasebook

    tokens = ensure_tokens(capture, config.thresholds)
    detection = detect_motifs(tokens, capture.context)
    motif = detection.dominant
    ordered = order_tokens(detection.tokens)

    headline = select_headline(ordered, motif)
    flow = tuple(core_contribution(t) for t in ordered)
    core = derive_core_frequency(ordered)
    logger.debug("Dominant motif %s, core frequency %d, headline %r", motif, core, headline)

    reading = VybeReading(
        header=build_header(capture, phrasebook, motif, core, headline),
        anchor_frame=build_anchor_frame(ordered, phrasebook, motif),
        numerology=NumerologyBlock(
            tokens=tuple(ordered),
            flow=flow,
            core_frequency=core,
            notes=detection.motifs,
        ),
        layered_meaning=tuple(build_layered_meaning(ordered, phrasebook)),
        energy_message=pick_energy_message(phrasebook, motif, core),
        alignment_summary=tuple(build_alignment_summary(ordered, phrasebook, core)),
        resonance=pick_resonance(phrasebook, motif, core),
        guidance_aspect=pick_guidance_aspect(phrasebook, motif, core),
        essence_sentence=pick_essence_sentence(phrasebook, motif, ordered, headline),
    )

    payload = build_explain_payload(capture, reading, motif) if explain else None
    return GeneratedReading(reading=reading, explain=payload)
