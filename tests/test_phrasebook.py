"""
Tests for phrasebook lookups and their fallback chains (vybe/phrasebook.py).
"""
import sys
import copy
import json
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from vybe import DEFAULT_PHRASEBOOK, Phrasebook, load_phrasebook
from vybe.phrasebook_data import PHRASEBOOK
from vybe.types import GuidanceEntry, ResonanceEntry


EMPTY = Phrasebook.from_dict({})


# =============================================================================
# BUNDLED DATA
# =============================================================================

def test_focus_map_has_no_zero_key():
    assert DEFAULT_PHRASEBOOK.alignment("0") is None


def test_every_token_type_has_layered_table():
    for token_type in ("time", "percent", "temp", "distance", "consumption",
                       "fuel", "count", "code", "tagged-code"):
        assert DEFAULT_PHRASEBOOK.layered.get(token_type), token_type


def test_layered_temperature_entries():
    for key in "123456789":
        assert "Temperature cue" in DEFAULT_PHRASEBOOK.layer_entry("temp", key).essence


def test_layered_percent_near_full():
    assert "Near completion" in DEFAULT_PHRASEBOOK.layer_entry("percent", "near_full").essence


# =============================================================================
# TWO-LEVEL TABLES
# =============================================================================

class TestTitles:

    def test_motif_and_core(self):
        assert DEFAULT_PHRASEBOOK.titles.resolve("mirror_time", 5) == "Seal (The Mirror of Renewal)"

    def test_missing_core_falls_back_to_default_group(self):
        assert DEFAULT_PHRASEBOOK.titles.resolve("arrival", 1) == "Seal (The First Light)"

    def test_missing_everywhere_uses_literal(self):
        assert DEFAULT_PHRASEBOOK.titles.resolve(None, 0) == "Seal (The Renewal Spark)"

    def test_core_accepts_str_or_int(self):
        assert DEFAULT_PHRASEBOOK.titles.resolve("gateway_11", "4") == \
            DEFAULT_PHRASEBOOK.titles.resolve("gateway_11", 4)


class TestEnergyMessage:

    def test_motif_default_before_global_default(self):
        assert DEFAULT_PHRASEBOOK.energy_message.resolve("arrival", 1) == \
            "You have arrived; let the journey settle."

    def test_absent_motif_group_uses_default_group(self):
        data = copy.deepcopy(PHRASEBOOK)
        del data["energyMessage"]["arrival"]
        book = Phrasebook.from_dict(data)
        assert book.energy_message.resolve("arrival", 8) == PHRASEBOOK["energyMessage"]["default"]["8"]

    def test_terminal_is_empty_string(self):
        assert EMPTY.energy_message.resolve("arrival", 8) == ""


def test_themes_terminal_is_empty():
    assert EMPTY.themes.resolve("mirror_time", 5) == ()
    assert DEFAULT_PHRASEBOOK.themes.resolve("gateway_11", 4) == \
        ("Awakening", "Confirmation", "Manifestation in Motion")


def test_guidance_fallbacks():
    assert DEFAULT_PHRASEBOOK.guidance_aspect.resolve("arrival", 8).area == "Completion & Integration"
    assert DEFAULT_PHRASEBOOK.guidance_aspect.resolve("triple", 3).area == "Creativity & Voice"
    assert DEFAULT_PHRASEBOOK.guidance_aspect.resolve(None, 0) == GuidanceEntry("Integration", "")


# =============================================================================
# FLAT TABLES
# =============================================================================

class TestEssence:

    def test_motif_template(self):
        assert DEFAULT_PHRASEBOOK.essence_sentence.resolve("arrival").startswith("{token}")

    def test_unknown_motif_uses_default(self):
        assert DEFAULT_PHRASEBOOK.essence_sentence.resolve(None) == PHRASEBOOK["essenceSentence"]["default"]

    def test_terminal_is_placeholder(self):
        assert EMPTY.essence_sentence.resolve("arrival") == "{token}"


class TestResonance:

    def test_motif_entry_preferred(self):
        entry = DEFAULT_PHRASEBOOK.resonance.resolve("arrival", 3)
        assert entry.blurb == "Divine awareness anchored into stability."

    def test_core_entry(self):
        entry = DEFAULT_PHRASEBOOK.resonance.resolve("gateway_11", 4)
        assert entry.chakras == ("Root ❤️",)

    def test_missing_core_falls_back_to_five(self):
        assert DEFAULT_PHRASEBOOK.resonance.resolve(None, 0) == DEFAULT_PHRASEBOOK.resonance.resolve(None, 5)

    def test_terminal_is_empty_entry(self):
        assert EMPTY.resonance.resolve("arrival", 8) == ResonanceEntry()


class TestAnchors:

    def test_label(self):
        assert DEFAULT_PHRASEBOOK.anchors.label("percent") == "charge"
        assert EMPTY.anchors.label("percent") == "percent"

    def test_template_chain(self):
        anchors = DEFAULT_PHRASEBOOK.anchors
        assert "mirrored time sequence" in anchors.template("time", "mirror_time")
        assert anchors.template("time", "triple") == PHRASEBOOK["anchorTemplates"]["byType"]["time"]["default"]
        assert EMPTY.anchors.template("time", None) == "{token}"


def test_layer_entry_missing_table_or_key():
    assert EMPTY.layer_entry("time", "3") is None
    assert DEFAULT_PHRASEBOOK.layer_entry("time", "0") is None


# =============================================================================
# LOADING
# =============================================================================

def test_load_phrasebook_round_trip(tmp_path):
    path = tmp_path / "phrasebook.json"
    path.write_text(json.dumps(PHRASEBOOK), encoding="utf-8")
    assert load_phrasebook(path) == DEFAULT_PHRASEBOOK


def test_load_partial_phrasebook(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"titles": {"default": {"5": "Custom Seal"}}}), encoding="utf-8")
    book = load_phrasebook(str(path))
    assert book.titles.resolve("mirror_time", 5) == "Custom Seal"
    assert book.essence_sentence.resolve("mirror_time") == "{token}"


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_phrasebook(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_phrasebook(tmp_path / "nope.json")
