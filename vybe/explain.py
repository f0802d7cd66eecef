"""
Vybe Reading - Explain Builder

Debug side-channel: records the inputs and the template keys a reading was
resolved with. Derived from the finished reading; never feeds back into it.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from .constants import DEFAULT_KEY
from .types import CaptureInput, ExplainPayload, ExplainToken, VybeReading


def template_keys(motif: Optional[str], core: int) -> Dict[str, str]:
    """Keys as "{motif}:{core}"; essence is keyed by motif and resonance by core."""
    motif_key = motif or DEFAULT_KEY
    return {
        "title": f"{motif_key}:{core}",
        "energy": f"{motif_key}:{core}",
        "essence": motif_key,
        "resonance": str(core),
        "guidance": f"{motif_key}:{core}",
    }


def build_explain_payload(
    capture: CaptureInput,
    reading: VybeReading,
    motif: Optional[str],
) -> ExplainPayload:
    explain_input: Dict[str, Any] = {"raw": capture.raw}
    if capture.context is not None:
        explain_input["context"] = capture.context
    if capture.entry_no is not None:
        explain_input["entryNo"] = capture.entry_no

    core = reading.numerology.core_frequency
    return ExplainPayload(
        input=explain_input,
        tokens=tuple(
            ExplainToken(
                raw=t.raw,
                type=t.type,
                flags=t.flags,
                reduction=t.reduction,
                bucket=t.bucket,
            )
            for t in reading.numerology.tokens
        ),
        motifs=reading.numerology.notes,
        core_frequency=core,
        template_keys=template_keys(motif, core),
    )
