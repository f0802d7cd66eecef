"""
Vybe Reading - Phrasebook

Typed view over the static phrasebook. Each section is a small lookup object
whose fallback chain always ends in a literal terminal, so a missing key
degrades to the next tier and never raises.

Chains:
- titles/themes/guidance: [motif][core] -> [default][core] -> literal
- energy message:         [motif][core] -> [motif][default] -> [default][core] -> ""
- essence sentence:       [motif] -> [default] -> "{token}"
- resonance:              byMotif[motif] -> byCore[core] -> byCore["5"] -> empty entry
- anchor templates:       byType[type][motif] -> byType[type][default] -> "{token}"

An absent motif group resolves to the default group.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .constants import (
    DEFAULT_KEY,
    FALLBACK_GUIDANCE_AREA,
    FALLBACK_RESONANCE_CORE,
    FALLBACK_TITLE_SUFFIX,
    TOKEN_PLACEHOLDER,
)
from .phrasebook_data import PHRASEBOOK
from .types import (
    AlignmentEntry,
    GuidanceEntry,
    LayerEntry,
    ResonanceEntry,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SECTION TYPES
# =============================================================================

@dataclass(frozen=True)
class MotifTable:
    """
    Two-level table keyed by motif (or "default") then by a core/bucket key.
    """
    name: str
    entries: Dict[str, Dict[str, Any]]
    terminal: Any
    group_default: bool = False  # consult [motif]["default"] before [default][core]

    def group(self, motif: Optional[str]) -> Dict[str, Any]:
        key = motif or DEFAULT_KEY
        group = self.entries.get(key)
        if group is None:
            group = self.entries.get(DEFAULT_KEY)
        return group or {}

    def resolve(self, motif: Optional[str], core: Union[int, str]) -> Any:
        core_key = str(core)
        group = self.group(motif)

        value = group.get(core_key)
        if value is None and self.group_default:
            value = group.get(DEFAULT_KEY)
        if value is None:
            value = self.entries.get(DEFAULT_KEY, {}).get(core_key)
        if value is None:
            logger.debug("%s: no entry for %s:%s, using literal", self.name, motif, core_key)
            return self.terminal
        return value


@dataclass(frozen=True)
class EssenceTable:
    templates: Dict[str, str]

    def resolve(self, motif: Optional[str]) -> str:
        template = self.templates.get(motif or DEFAULT_KEY)
        if template is None:
            template = self.templates.get(DEFAULT_KEY)
        if template is None:
            logger.debug("essenceSentence: no template for %s, using literal", motif)
            return TOKEN_PLACEHOLDER
        return template


@dataclass(frozen=True)
class ResonanceTable:
    by_core: Dict[str, ResonanceEntry]
    by_motif: Dict[str, ResonanceEntry] = field(default_factory=dict)

    def resolve(self, motif: Optional[str], core: Union[int, str]) -> ResonanceEntry:
        if motif and motif in self.by_motif:
            return self.by_motif[motif]
        entry = self.by_core.get(str(core))
        if entry is None:
            entry = self.by_core.get(FALLBACK_RESONANCE_CORE)
        if entry is None:
            logger.debug("resonance: no entry for core %s, using empty entry", core)
            return ResonanceEntry()
        return entry


@dataclass(frozen=True)
class AnchorTable:
    labels: Dict[str, str]
    templates: Dict[str, Dict[str, str]]

    def label(self, token_type: str) -> str:
        return self.labels.get(token_type, token_type)

    def template(self, token_type: str, motif: Optional[str]) -> str:
        group = self.templates.get(token_type, {})
        template = group.get(motif or DEFAULT_KEY)
        if template is None:
            template = group.get(DEFAULT_KEY)
        return template if template is not None else TOKEN_PLACEHOLDER


# =============================================================================
# PHRASEBOOK
# =============================================================================

@dataclass(frozen=True)
class Phrasebook:
    titles: MotifTable
    themes: MotifTable
    energy_message: MotifTable
    guidance_aspect: MotifTable
    essence_sentence: EssenceTable
    resonance: ResonanceTable
    anchors: AnchorTable
    layered: Dict[str, Dict[str, LayerEntry]] = field(default_factory=dict)
    focus_map: Dict[str, AlignmentEntry] = field(default_factory=dict)

    def layer_entry(self, token_type: str, key: str) -> Optional[LayerEntry]:
        table = self.layered.get(token_type)
        if table is None:
            return None
        return table.get(key)

    def alignment(self, key: str) -> Optional[AlignmentEntry]:
        return self.focus_map.get(key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Phrasebook":
        """
        Build from the external JSON shape.

        Every section and key is optional; absent data falls through to the
        section's literal terminal at lookup time.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Phrasebook must be a JSON object")

        resonance = data.get("resonance") or {}
        anchor_templates = data.get("anchorTemplates") or {}
        alignment_rows = data.get("alignmentRows") or {}

        return cls(
            titles=MotifTable(
                "titles",
                _nested(data.get("titles"), str),
                FALLBACK_TITLE_SUFFIX,
            ),
            themes=MotifTable(
                "themes",
                _nested(data.get("themes"), lambda v: tuple(v)),
                (),
            ),
            energy_message=MotifTable(
                "energyMessage",
                _nested(data.get("energyMessage"), str),
                "",
                group_default=True,
            ),
            guidance_aspect=MotifTable(
                "guidanceAspect",
                _nested(data.get("guidanceAspect"), _guidance_entry),
                GuidanceEntry(area=FALLBACK_GUIDANCE_AREA, blurb=""),
            ),
            essence_sentence=EssenceTable(
                {k: str(v) for k, v in (data.get("essenceSentence") or {}).items()}
            ),
            resonance=ResonanceTable(
                by_core=_flat(resonance.get("byCore"), _resonance_entry),
                by_motif=_flat(resonance.get("byMotif"), _resonance_entry),
            ),
            anchors=AnchorTable(
                labels={k: str(v) for k, v in (data.get("anchorLabels") or {}).items()},
                templates=_nested(anchor_templates.get("byType"), str),
            ),
            layered=_nested(data.get("layered"), _layer_entry),
            focus_map=_flat(alignment_rows.get("focusMap"), _alignment_entry),
        )


def _flat(section: Optional[Mapping[str, Any]], build: Callable[[Any], Any]) -> Dict[str, Any]:
    return {str(k): build(v) for k, v in (section or {}).items()}


def _nested(section: Optional[Mapping[str, Any]], build: Callable[[Any], Any]) -> Dict[str, Dict[str, Any]]:
    return {str(k): _flat(group, build) for k, group in (section or {}).items()}


def _layer_entry(data: Mapping[str, Any]) -> LayerEntry:
    return LayerEntry(essence=data.get("essence", ""), message=data.get("message", ""))


def _alignment_entry(data: Mapping[str, Any]) -> AlignmentEntry:
    return AlignmentEntry(
        focus=data.get("focus", ""),
        tone=data.get("tone", ""),
        guidance=data.get("guidance", ""),
    )


def _resonance_entry(data: Mapping[str, Any]) -> ResonanceEntry:
    return ResonanceEntry(
        elements=tuple(data.get("elements", ())),
        chakras=tuple(data.get("chakras", ())),
        blurb=data.get("blurb", ""),
    )


def _guidance_entry(data: Mapping[str, Any]) -> GuidanceEntry:
    return GuidanceEntry(area=data.get("area", FALLBACK_GUIDANCE_AREA), blurb=data.get("blurb", ""))


def load_phrasebook(path: Union[str, Path]) -> Phrasebook:
    """
    Load a phrasebook JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.debug("Loaded phrasebook from %s", path)
    return Phrasebook.from_dict(data)


DEFAULT_PHRASEBOOK = Phrasebook.from_dict(PHRASEBOOK)
