"""
Vybe Reading - Type Definitions

Dataclasses for captures, tokens, reductions, phrasebook entries and the
assembled reading. Every record here is immutable once built; the pipeline
produces new copies instead of mutating shared state.

Serialization follows the external JSON contract (camelCase keys). Token
spans are internal and never serialized.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .constants import (
    MOTIF_PRIORITY,
    is_valid_motif,
    is_valid_token_type,
)

Number = Union[int, float]


def is_ascii_digit(ch: str) -> bool:
    """0-9 only; Unicode digits such as superscripts do not count."""
    return "0" <= ch <= "9"


def parse_number(text: str) -> Number:
    """Parse a numeric string, keeping integers integral ('77' -> 77, '8.4' -> 8.4)."""
    value = float(text)
    if "." not in text and value.is_integer():
        return int(value)
    return value


# =============================================================================
# TOKEN VALUES
# =============================================================================

@dataclass(frozen=True)
class TimeValue:
    """Clock time. `iso` is always zero-padded HH:MM."""
    hours: int
    minutes: int
    iso: str
    total_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "iso": self.iso,
            "totalMinutes": self.total_minutes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeValue":
        hours = int(data["hours"])
        minutes = int(data["minutes"])
        return cls(
            hours=hours,
            minutes=minutes,
            iso=data.get("iso") or f"{hours:02d}:{minutes:02d}",
            total_minutes=int(data.get("totalMinutes", hours * 60 + minutes)),
        )


@dataclass(frozen=True)
class PercentValue:
    value: int  # clamped to 0..100

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PercentValue":
        return cls(value=int(data["value"]))


@dataclass(frozen=True)
class TemperatureValue:
    value: int
    unit: str  # C or F

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemperatureValue":
        return cls(value=int(data["value"]), unit=str(data.get("unit", "C")))


@dataclass(frozen=True)
class DistanceValue:
    value: Number
    unit: str  # km or mi

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DistanceValue":
        return cls(value=data["value"], unit=str(data.get("unit", "km")))


@dataclass(frozen=True)
class MeasureValue:
    """Bare numeric payload used by fuel, consumption and count tokens."""
    value: Number

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MeasureValue":
        return cls(value=data["value"])


@dataclass(frozen=True)
class CodeValue:
    value: str
    numeric: int

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "numeric": self.numeric}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodeValue":
        value = str(data["value"])
        return cls(value=value, numeric=int(data.get("numeric", value)))


@dataclass(frozen=True)
class TaggedCodeValue:
    prefix: str
    digits: str
    numeric: int

    def to_dict(self) -> Dict[str, Any]:
        return {"prefix": self.prefix, "digits": self.digits, "numeric": self.numeric}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaggedCodeValue":
        digits = str(data["digits"])
        return cls(
            prefix=str(data["prefix"]),
            digits=digits,
            numeric=int(data.get("numeric", digits)),
        )


TokenValue = Union[
    TimeValue,
    PercentValue,
    TemperatureValue,
    DistanceValue,
    MeasureValue,
    CodeValue,
    TaggedCodeValue,
]

VALUE_TYPES: Dict[str, type] = {
    "time": TimeValue,
    "percent": PercentValue,
    "temp": TemperatureValue,
    "distance": DistanceValue,
    "consumption": MeasureValue,
    "fuel": MeasureValue,
    "count": MeasureValue,
    "code": CodeValue,
    "tagged-code": TaggedCodeValue,
}


# =============================================================================
# REDUCTION
# =============================================================================

@dataclass(frozen=True)
class ReductionDetail:
    """
    Trace of a numerological reduction.

    Invariant: when `master` is set, `reduce_to == master` and reduction
    stopped there.
    """
    digits: Tuple[int, ...]
    sum: int
    reduce_to: int
    steps: Tuple[int, ...]
    master: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "digits": list(self.digits),
            "sum": self.sum,
            "reduceTo": self.reduce_to,
            "steps": list(self.steps),
        }
        if self.master is not None:
            data["master"] = self.master
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReductionDetail":
        return cls(
            digits=tuple(int(d) for d in data.get("digits", ())),
            sum=int(data["sum"]),
            reduce_to=int(data["reduceTo"]),
            steps=tuple(int(s) for s in data.get("steps", ())),
            master=data.get("master"),
        )


# =============================================================================
# TOKEN
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    One recognized numeric pattern.

    `start`/`end` are character offsets in the capture. They exist only for
    overlap checks and ranking tie-breaks and are not part of the output
    contract.
    """
    raw: str
    type: str
    value: TokenValue
    start: int
    end: int
    reduction: ReductionDetail
    flags: Tuple[str, ...] = ()
    bucket: Optional[str] = None

    def __post_init__(self):
        if not is_valid_token_type(self.type):
            raise ValueError(f"Invalid token type: {self.type}")

    @property
    def digit_string(self) -> str:
        """All digit characters of the raw text, in order."""
        return "".join(ch for ch in self.raw if is_ascii_digit(ch))

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def has_flag(self, motif: str) -> bool:
        return motif in self.flags

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "raw": self.raw,
            "type": self.type,
            "value": self.value.to_dict(),
            "flags": list(self.flags),
            "reduction": self.reduction.to_dict(),
        }
        if self.bucket is not None:
            data["bucket"] = self.bucket
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Token":
        """
        Build a token supplied by an upstream extractor.

        Missing reductions are recomputed from `raw`; missing offsets default
        to the whole raw string.
        """
        from .reduce import build_reduction

        token_type = data.get("type")
        if not is_valid_token_type(token_type):
            raise ValueError(f"Invalid token type: {token_type}")
        raw = str(data["raw"])
        value_cls = VALUE_TYPES[token_type]
        reduction = data.get("reduction")
        flags = tuple(f for f in data.get("flags", ()) if is_valid_motif(f))
        return cls(
            raw=raw,
            type=token_type,
            value=value_cls.from_dict(data.get("value") or {}),
            start=int(data.get("start", 0)),
            end=int(data.get("end", len(raw))),
            reduction=(
                ReductionDetail.from_dict(reduction)
                if reduction
                else build_reduction(raw)
            ),
            flags=flags,
            bucket=data.get("bucket"),
        )

    def __str__(self) -> str:
        return self.raw


# =============================================================================
# CAPTURE INPUT
# =============================================================================

@dataclass(frozen=True)
class CaptureInput:
    """A raw capture plus optional context, entry number and pre-extracted tokens."""
    raw: str
    context: Optional[str] = None
    entry_no: Optional[int] = None
    tokens: Tuple[Token, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptureInput":
        """
        Parse a request body: {"raw", "context"?, "entryNo"?, "tokens"?}.

        Raises:
            ValueError: If neither `raw` nor `tokens` is provided
        """
        if not isinstance(data, dict):
            raise ValueError("Capture must be a JSON object")
        tokens = tuple(Token.from_dict(t) for t in data.get("tokens") or ())
        raw = data.get("raw")
        if not raw and not tokens:
            raise ValueError("Missing required field: raw")
        entry_no = data.get("entryNo", data.get("entry_no"))
        return cls(
            raw=str(raw or ""),
            context=data.get("context"),
            entry_no=int(entry_no) if entry_no is not None else None,
            tokens=tokens,
        )


# =============================================================================
# PHRASEBOOK ENTRIES
# =============================================================================

@dataclass(frozen=True)
class LayerEntry:
    essence: str = ""
    message: str = ""


@dataclass(frozen=True)
class AlignmentEntry:
    focus: str
    tone: str = ""
    guidance: str = ""


@dataclass(frozen=True)
class ResonanceEntry:
    elements: Tuple[str, ...] = ()
    chakras: Tuple[str, ...] = ()
    blurb: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elements": list(self.elements),
            "chakras": list(self.chakras),
            "blurb": self.blurb,
        }


@dataclass(frozen=True)
class GuidanceEntry:
    area: str
    blurb: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"area": self.area, "blurb": self.blurb}


# =============================================================================
# READING
# =============================================================================

@dataclass(frozen=True)
class ReadingHeader:
    title: str
    theme: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "theme": list(self.theme)}


@dataclass(frozen=True)
class NumerologyBlock:
    tokens: Tuple[Token, ...]
    flow: Tuple[int, ...]
    core_frequency: int
    notes: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokens": [t.to_dict() for t in self.tokens],
            "flow": list(self.flow),
            "coreFrequency": self.core_frequency,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class LayeredMeaningRow:
    segment: str
    essence: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"segment": self.segment, "essence": self.essence, "message": self.message}


@dataclass(frozen=True)
class AlignmentSummaryRow:
    focus: str
    number: Number
    tone: str
    guidance: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focus": self.focus,
            "number": self.number,
            "tone": self.tone,
            "guidance": self.guidance,
        }


@dataclass(frozen=True)
class VybeReading:
    """
    The assembled reading. Constructed once per capture and never mutated.
    """
    header: ReadingHeader
    anchor_frame: Dict[str, str]
    numerology: NumerologyBlock
    layered_meaning: Tuple[LayeredMeaningRow, ...]
    energy_message: str
    alignment_summary: Tuple[AlignmentSummaryRow, ...]
    resonance: ResonanceEntry
    guidance_aspect: GuidanceEntry
    essence_sentence: str

    @property
    def dominant_motif(self) -> Optional[str]:
        return self.numerology.notes[0] if self.numerology.notes else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "anchorFrame": dict(self.anchor_frame),
            "numerology": self.numerology.to_dict(),
            "layeredMeaning": [row.to_dict() for row in self.layered_meaning],
            "energyMessage": self.energy_message,
            "alignmentSummary": [row.to_dict() for row in self.alignment_summary],
            "resonance": self.resonance.to_dict(),
            "guidanceAspect": self.guidance_aspect.to_dict(),
            "essenceSentence": self.essence_sentence,
        }


@dataclass(frozen=True)
class ExplainToken:
    raw: str
    type: str
    flags: Tuple[str, ...]
    reduction: ReductionDetail
    bucket: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "raw": self.raw,
            "type": self.type,
            "flags": list(self.flags),
            "reduction": self.reduction.to_dict(),
        }
        if self.bucket is not None:
            data["bucket"] = self.bucket
        return data


@dataclass(frozen=True)
class ExplainPayload:
    """Debug side-channel mirroring the resolution decisions of one reading."""
    input: Dict[str, Any]
    tokens: Tuple[ExplainToken, ...]
    motifs: Tuple[str, ...]
    core_frequency: int
    template_keys: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": dict(self.input),
            "tokens": [t.to_dict() for t in self.tokens],
            "motifs": list(self.motifs),
            "coreFrequency": self.core_frequency,
            "templateKeys": dict(self.template_keys),
        }


@dataclass(frozen=True)
class GeneratedReading:
    reading: VybeReading
    explain: Optional[ExplainPayload] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"reading": self.reading.to_dict()}
        if self.explain is not None:
            data["explain"] = self.explain.to_dict()
        return data


def sort_motifs(motifs) -> List[str]:
    """Filter a motif collection through the canonical priority order."""
    present = set(motifs)
    return [m for m in MOTIF_PRIORITY if m in present]
