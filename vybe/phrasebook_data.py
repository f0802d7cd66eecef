"""
Vybe Reading - Bundled Phrasebook

Static prose tables, in the same shape as an external phrasebook JSON file
(see phrasebook.load_phrasebook). Read-only at run time.

Keys: motif name or "default", then core-frequency digit (or percent bucket /
master number for layered tables).
"""
from typing import Any, Dict

# =============================================================================
# TITLES
# =============================================================================

TITLES: Dict[str, Dict[str, str]] = {
    "default": {
        "1": "Seal (The First Light)",
        "2": "Seal (The Quiet Pairing)",
        "3": "Seal (The Open Voice)",
        "4": "Seal (The Cornerstone)",
        "5": "Seal (The Turning Wind)",
        "6": "Seal (The Hearth)",
        "7": "Seal (The Inner Lantern)",
        "8": "Seal (The Steady Harvest)",
        "9": "Seal (The Closing Circle)",
    },
    "mirror_time": {
        "1": "Seal (The Mirror of Beginnings)",
        "2": "Seal (The Mirror of Union)",
        "3": "Seal (The Mirror of Voice)",
        "4": "Seal (The Mirror of Ground)",
        "5": "Seal (The Mirror of Renewal)",
        "6": "Seal (The Mirror of Care)",
        "7": "Seal (The Mirror of Insight)",
        "8": "Seal (The Mirror of Return)",
        "9": "Seal (The Mirror of Release)",
    },
    "gateway_11": {
        "1": "Seal (Gateway of Intent)",
        "2": "Seal (Twin Gateway)",
        "4": "Seal (Alignment Gateway)",
        "6": "Seal (Heart Gateway)",
        "8": "Seal (Threshold of Plenty)",
    },
    "arrival": {
        "3": "Seal (The Road Spoken)",
        "5": "Seal (The Journey Turned)",
        "7": "Seal (The Long Road Home)",
        "8": "Seal (Home Frequency)",
        "9": "Seal (Journey Complete)",
    },
    "shift_555": {
        "1": "Seal (The Sudden Shift)",
        "3": "Seal (Change Spoken Aloud)",
        "5": "Seal (The Great Turning)",
        "7": "Seal (Change Within)",
    },
    "heart_6_stack": {
        "3": "Seal (The Tender Voice)",
        "6": "Seal (The Heart Stack)",
        "9": "Seal (The Caring Close)",
    },
    "builder_44_1144": {
        "1": "Seal (The Builder's Start)",
        "4": "Seal (The Builder's Code)",
        "8": "Seal (The Builder's Yield)",
    },
    "abundance_signature": {
        "7": "Seal (Quiet Abundance)",
        "8": "Seal (The Abundance Signature)",
        "9": "Seal (Abundance Shared)",
    },
    "percent_near_full": {
        "1": "Seal (The Full Charge)",
        "9": "Seal (Almost Whole)",
    },
    "progression": {
        "3": "Seal (The Counting Steps)",
        "6": "Seal (The Steady Sequence)",
        "9": "Seal (The Unbroken Line)",
    },
    "triple": {
        "3": "Seal (Threefold Voice)",
        "6": "Seal (Threefold Heart)",
        "9": "Seal (Threefold Close)",
    },
}

# =============================================================================
# THEMES
# =============================================================================

THEMES: Dict[str, Dict[str, list]] = {
    "default": {
        "1": ["Initiative", "Fresh Start", "Self-Trust"],
        "2": ["Partnership", "Patience", "Receptivity"],
        "3": ["Expression", "Play", "Connection"],
        "4": ["Structure", "Discipline", "Grounding"],
        "5": ["Change", "Freedom", "Movement"],
        "6": ["Care", "Home", "Responsibility"],
        "7": ["Reflection", "Study", "Inner Knowing"],
        "8": ["Abundance", "Authority", "Momentum"],
        "9": ["Completion", "Release", "Compassion"],
    },
    "mirror_time": {
        "3": ["Echo", "Dialogue", "Return"],
        "4": ["Symmetry", "Foundation", "Return"],
        "5": ["Transition", "Balance", "Return to Self"],
        "8": ["Reciprocity", "Balance", "Harvest"],
    },
    "gateway_11": {
        "2": ["Intuition", "Pairing", "Threshold"],
        "4": ["Awakening", "Confirmation", "Manifestation in Motion"],
        "8": ["Awakening", "Prosperity", "Threshold"],
    },
    "arrival": {
        "7": ["Homecoming", "Reflection", "Rest"],
        "8": ["Homecoming", "Grounded Wisdom", "Completion"],
        "9": ["Homecoming", "Release", "Integration"],
    },
    "shift_555": {
        "5": ["Change", "Momentum", "Trust the Turn"],
        "7": ["Change", "Inner Shift", "Trust the Turn"],
    },
    "heart_6_stack": {
        "6": ["Love", "Home", "Devotion"],
    },
    "builder_44_1144": {
        "4": ["Structure", "Craft", "Patience"],
    },
    "abundance_signature": {
        "8": ["Abundance", "Flow", "Receiving"],
    },
}

# =============================================================================
# LAYERED MEANING (per token type)
# =============================================================================

LAYERED: Dict[str, Dict[str, Dict[str, str]]] = {
    "time": {
        "1": {"essence": "Initiation energy — a first step taking shape.", "message": "Start before you feel ready."},
        "2": {"essence": "Pairing energy — two paths meeting.", "message": "Let cooperation carry part of the load."},
        "3": {"essence": "Conversation energy — words as bridges.", "message": "Mirrored initiation — what you put out returns."},
        "4": {"essence": "Foundation energy — the hour sets the frame.", "message": "Build the next small piece properly."},
        "5": {"essence": "Motion energy — the clock marks a turn.", "message": "Allow the plan to bend without breaking."},
        "6": {"essence": "Care energy — time spent on what you love.", "message": "Tend the people who are close right now."},
        "7": {"essence": "Reflective energy — a pause inside the day.", "message": "Step back and notice what repeats."},
        "8": {"essence": "Momentum energy — effort meeting reward.", "message": "Claim the result you have worked toward."},
        "9": {"essence": "Closing energy — a chapter winding down.", "message": "Finish cleanly and let it go."},
    },
    "percent": {
        "near_full": {"essence": "Near completion — the reserve is almost whole.", "message": "Carry what you have with confidence."},
        "seventies": {"essence": "Steady reserve — more than enough for the next stretch.", "message": "Pace yourself; the margin is real."},
        "88": {"essence": "Doubled abundance — the charge mirrors plenty.", "message": "Let resources circulate instead of hoarding them."},
        "1": {"essence": "Charge as a fresh start.", "message": "Begin with what is available."},
        "2": {"essence": "Charge held in balance.", "message": "Share the load."},
        "3": {"essence": "Charge as creative spark.", "message": "Spend a little on joy."},
        "4": {"essence": "Charge as a stable base.", "message": "Protect the base level."},
        "5": {"essence": "Charge in motion.", "message": "Expect it to fluctuate."},
        "6": {"essence": "Charge held for others.", "message": "Give, but keep enough for yourself."},
        "7": {"essence": "Charge in quiet reserve.", "message": "Rest replenishes more than you think."},
        "8": {"essence": "Charge as power on hand.", "message": "Use it deliberately."},
        "9": {"essence": "Charge near its cycle's end.", "message": "Plan the next refill."},
    },
    "temp": {
        "1": {"essence": "Temperature cue — a new climate beginning.", "message": "Adjust early rather than late."},
        "2": {"essence": "Temperature cue — mild and shared.", "message": "Meet others where they are."},
        "3": {"essence": "Temperature cue — a lively atmosphere.", "message": "Let warmth show in your words."},
        "4": {"essence": "Temperature cue — steady conditions.", "message": "Rely on routine today."},
        "5": {"essence": "Temperature cue — weather on the move.", "message": "Dress for change."},
        "6": {"essence": "Temperature cue — comfort and shelter.", "message": "Make the space pleasant for others."},
        "7": {"essence": "Temperature cue — cool, clear air for thinking.", "message": "Take the quiet reading seriously."},
        "8": {"essence": "Temperature cue — strong heat or strong cold.", "message": "Respect the intensity."},
        "9": {"essence": "Temperature cue — the season turning over.", "message": "Let the old season end."},
    },
    "distance": {
        "1": {"essence": "A short route toward something new.", "message": "The first mile counts most."},
        "2": {"essence": "A route travelled in company.", "message": "Share the road."},
        "3": {"essence": "A route full of conversation.", "message": "Say what you noticed on the way."},
        "4": {"essence": "A route built on routine.", "message": "Consistency is carrying you."},
        "5": {"essence": "Distance as freedom of movement.", "message": "Enjoy the change of scenery."},
        "6": {"essence": "A route home to people who matter.", "message": "Arrive present, not just on time."},
        "7": {"essence": "A long reflective stretch.", "message": "Let the road do some of the thinking."},
        "8": {"essence": "Distance covered with purpose.", "message": "Acknowledge how far you have come."},
        "9": {"essence": "The end of a journey.", "message": "Unpack and rest."},
    },
    "consumption": {
        "1": {"essence": "Efficient start — little spent, much gained.", "message": "Keep the lean habit."},
        "2": {"essence": "Balanced consumption.", "message": "Give and take are even."},
        "3": {"essence": "Consumption as expression.", "message": "Spend on what lights you up."},
        "4": {"essence": "Measured, disciplined use.", "message": "The budget is working."},
        "5": {"essence": "Variable consumption.", "message": "Watch for drift."},
        "6": {"essence": "Consumption for the household.", "message": "Spend where it nourishes."},
        "7": {"essence": "Quiet efficiency.", "message": "Review before the next trip."},
        "8": {"essence": "High output, high return.", "message": "Make the effort count."},
        "9": {"essence": "Consumption closing a cycle.", "message": "Refill and reset."},
    },
    "fuel": {
        "1": {"essence": "Fuel for a fresh start.", "message": "Go now while the tank is ready."},
        "2": {"essence": "Fuel held in balance.", "message": "Split the journey sensibly."},
        "3": {"essence": "Fuel as creative momentum.", "message": "Take the scenic route once."},
        "4": {"essence": "Fuel as a solid reserve.", "message": "Keep a margin."},
        "5": {"essence": "Fuel for movement and change.", "message": "Use it to get somewhere new."},
        "6": {"essence": "Fuel spent on others.", "message": "The lift you gave matters."},
        "7": {"essence": "Fuel for the long reflective drive.", "message": "Listen to the quiet."},
        "8": {"essence": "Fuel as stored power.", "message": "Direct it with intent."},
        "9": {"essence": "Fuel at journey's end.", "message": "Top up before the next cycle."},
    },
    "code": {
        "1": {"essence": "Code of initiative.", "message": "Lead the next step."},
        "2": {"essence": "Code of partnership.", "message": "Ask for help."},
        "3": {"essence": "Code of expression.", "message": "Say it plainly."},
        "4": {"essence": "Code of structure.", "message": "Follow the plan."},
        "5": {"essence": "Code of change.", "message": "Adapt; don't cling."},
        "6": {"essence": "Code of care.", "message": "Look after the details for someone."},
        "7": {"essence": "Code of insight.", "message": "Study before acting."},
        "8": {"essence": "Code of power.", "message": "Own your authority."},
        "9": {"essence": "Code of completion.", "message": "Close the loop."},
        "11": {"essence": "Master code — intuition switched on.", "message": "Trust the first impression."},
        "22": {"essence": "Master code — the builder's number.", "message": "Think big, lay bricks daily."},
        "33": {"essence": "Master code — the teacher's number.", "message": "Teach by example."},
    },
    "tagged-code": {
        "1": {"essence": "Labelled beginning.", "message": "Name the intention."},
        "3": {"essence": "Labelled message.", "message": "Read the sign literally once."},
        "5": {"essence": "Labelled change.", "message": "Something is being re-routed."},
        "7": {"essence": "Labelled insight.", "message": "Note the tag; it will return."},
        "9": {"essence": "Labelled completion.", "message": "File it and move on."},
        "11": {"essence": "Tagged master code — a marked threshold.", "message": "Pay attention to where you saw it."},
        "22": {"essence": "Tagged master code — the blueprint.", "message": "Draft the plan."},
        "33": {"essence": "Tagged master code — the guide.", "message": "Share what you know."},
    },
    "count": {
        "1": {"essence": "A tally restarting at one.", "message": "Every count begins again."},
        "3": {"essence": "Count as creative output.", "message": "Volume follows joy."},
        "4": {"essence": "Count as accumulated work.", "message": "Keep stacking."},
        "5": {"essence": "Count in flux.", "message": "Numbers move; so can you."},
        "6": {"essence": "Count of shared effort.", "message": "Credit the team."},
        "7": {"essence": "Count as a long record.", "message": "Review the history."},
        "8": {"essence": "Count as accumulated wealth.", "message": "Recognize the total."},
        "9": {"essence": "Count nearing a milestone.", "message": "Prepare to celebrate."},
        "11": {"essence": "Master count — a signal inside the number.", "message": "Read between the digits."},
        "22": {"essence": "Master count — mass built patiently.", "message": "Scale what works."},
        "33": {"essence": "Master count — service in volume.", "message": "Let the work serve others."},
    },
}

# =============================================================================
# ENERGY MESSAGE
# =============================================================================

ENERGY_MESSAGE: Dict[str, Dict[str, str]] = {
    "default": {
        "default": "The numbers are quiet today; let the moment speak for itself.",
        "1": "A new thread starts here — pick it up.",
        "2": "Soft energy; the right help arrives when you ask.",
        "3": "Expressive energy is high — share something true.",
        "4": "Steady energy — lay one solid brick.",
        "5": "Change is moving through — stay loose.",
        "6": "Warm energy — home and heart take priority.",
        "7": "Inward energy — reflection will answer what effort cannot.",
        "8": "Strong energy — act on what you know you deserve.",
        "9": "Closing energy — finish, forgive, and free up space.",
    },
    "mirror_time": {
        "default": "The mirror shows you your own rhythm — notice it.",
        "3": "What you say now echoes back — choose the words you want returned.",
        "4": "Symmetry steadies you; what you built is reflected back intact.",
        "5": "As you arrive home, so does your energy. The mirror closes — what you set in motion now grounds into your world.",
        "8": "What you gave is returning in kind.",
    },
    "gateway_11": {
        "default": "A threshold is open — notice who and what walks through.",
        "2": "Intuition is loud — trust the quiet yes.",
        "4": "The door is open — act with calm certainty.",
        "8": "The gateway opens onto plenty; step through without hesitation.",
    },
    "arrival": {
        "default": "You have arrived; let the journey settle.",
        "7": "The road was long; rest is part of arriving.",
        "8": "You've arrived within yourself; wisdom is grounded now.",
        "9": "The journey closes — everything you needed came with you.",
    },
    "shift_555": {
        "default": "A shift is underway — let it finish turning.",
        "5": "Big change, fast — hold the wheel lightly.",
    },
    "heart_6_stack": {
        "default": "Love is stacked in the numbers — give it somewhere to land.",
    },
    "builder_44_1144": {
        "default": "The builder's code is active — structure now pays later.",
    },
    "abundance_signature": {
        "default": "Abundance is signing its name — receive without apology.",
    },
    "percent_near_full": {
        "default": "You are nearly full — there is enough for what comes next.",
    },
    "progression": {
        "default": "Minute by minute the sequence climbs — keep the rhythm.",
    },
    "triple": {
        "default": "A triple repeat underlines the message — it is not a coincidence.",
    },
}

# =============================================================================
# ALIGNMENT SUMMARY
# =============================================================================

FOCUS_MAP: Dict[str, Dict[str, str]] = {
    "1": {"focus": "Initiative", "tone": "Bold", "guidance": "Take the first step."},
    "2": {"focus": "Partnership", "tone": "Gentle", "guidance": "Listen before you lead."},
    "3": {"focus": "Expression", "tone": "Joyful", "guidance": "Say it out loud."},
    "4": {"focus": "Foundation", "tone": "Steady", "guidance": "Build carefully."},
    "5": {"focus": "Change", "tone": "Freedom", "guidance": "Adapt; don't cling."},
    "6": {"focus": "Harmony", "tone": "Nurturing", "guidance": "Care for your circle."},
    "7": {"focus": "Insight", "tone": "Still", "guidance": "Study the pattern."},
    "8": {"focus": "Abundance", "tone": "Empowered", "guidance": "Receive and direct."},
    "9": {"focus": "Completion", "tone": "Compassionate", "guidance": "Release with thanks."},
    "11": {"focus": "Intuition", "tone": "Illuminated", "guidance": "Trust the inner signal."},
    "22": {"focus": "Master Builder", "tone": "Visionary", "guidance": "Turn vision into structure."},
    "33": {"focus": "Master Teacher", "tone": "Devoted", "guidance": "Serve through example."},
    "77": {"focus": "Reflection", "tone": "Contemplative", "guidance": "Pause and let wisdom settle."},
    "88": {"focus": "Prosperity", "tone": "Expansive", "guidance": "Let abundance circulate."},
    "111": {"focus": "Awakening", "tone": "Electric", "guidance": "Notice your thoughts; they are seeds."},
    "555": {"focus": "Transformation", "tone": "Dynamic", "guidance": "Let the old form go."},
    "1111": {"focus": "Alignment", "tone": "Luminous", "guidance": "Act on the confirmation."},
    "1144": {"focus": "Blueprint", "tone": "Grounded", "guidance": "Build on the plan you trust."},
}

# =============================================================================
# RESONANCE
# =============================================================================

RESONANCE: Dict[str, Dict[str, Dict[str, Any]]] = {
    "byCore": {
        "1": {"elements": ["Fire 🜂 (ignition)"], "chakras": ["Solar Plexus 💛"], "blurb": "Will ignites the first move."},
        "2": {"elements": ["Water 🜄 (receptivity)"], "chakras": ["Sacral 🧡"], "blurb": "Feeling flows toward connection."},
        "3": {"elements": ["Fire 🜂 (spark)", "Air 🜁 (voice)"], "chakras": ["Throat 💙"], "blurb": "Expression carried on breath."},
        "4": {"elements": ["Earth 🜃 (structure)"], "chakras": ["Root ❤️"], "blurb": "Stability rooted in the body."},
        "5": {"elements": ["Air 🜁 (movement)", "Earth 🜃 (stability)"], "chakras": ["Sacral 🧡", "Root ❤️"], "blurb": "Movement that lands somewhere solid."},
        "6": {"elements": ["Water 🜄 (care)", "Earth 🜃 (home)"], "chakras": ["Heart 💚"], "blurb": "Love given a place to live."},
        "7": {"elements": ["Air 🜁 (thought)", "Water 🜄 (depth)"], "chakras": ["Third Eye 💜"], "blurb": "Clear sight from a still mind."},
        "8": {"elements": ["Earth 🜃 (wealth)", "Fire 🜂 (drive)"], "chakras": ["Solar Plexus 💛", "Root ❤️"], "blurb": "Power made tangible."},
        "9": {"elements": ["Fire 🜂 (release)", "Water 🜄 (compassion)"], "chakras": ["Heart 💚", "Crown 🤍"], "blurb": "Completion softened by compassion."},
    },
    "byMotif": {
        "arrival": {"elements": ["Air 🜁 (clarity)", "Earth 🜃 (grounding)"], "chakras": ["Crown 🤍", "Root ❤️"], "blurb": "Divine awareness anchored into stability."},
        "heart_6_stack": {"elements": ["Water 🜄 (devotion)"], "chakras": ["Heart 💚"], "blurb": "The heart stacks its intention in threes."},
        "abundance_signature": {"elements": ["Earth 🜃 (harvest)"], "chakras": ["Solar Plexus 💛", "Root ❤️"], "blurb": "Plenty recognized and received."},
    },
}

# =============================================================================
# GUIDANCE ASPECT
# =============================================================================

GUIDANCE_ASPECT: Dict[str, Dict[str, Dict[str, str]]] = {
    "default": {
        "1": {"area": "Initiative & Self", "blurb": "Choose one thing and begin it today."},
        "2": {"area": "Relationships", "blurb": "Ask, listen, and meet halfway."},
        "3": {"area": "Creativity & Voice", "blurb": "Make something small and share it."},
        "4": {"area": "Work & Structure", "blurb": "Put the next piece of the routine in place."},
        "5": {"area": "Change & Freedom", "blurb": "Say yes to one unplanned thing."},
        "6": {"area": "Home & Care", "blurb": "Tend to the space and the people in it."},
        "7": {"area": "Study & Reflection", "blurb": "Give yourself an hour without input."},
        "8": {"area": "Resources & Power", "blurb": "Review what you have and direct it."},
        "9": {"area": "Release & Service", "blurb": "Let go of one thing that is finished."},
    },
    "mirror_time": {
        "3": {"area": "Dialogue & Echo", "blurb": "Repeat back what you heard before answering."},
        "5": {"area": "Grounding & Renewal", "blurb": "Settle what moved today into a steady rhythm."},
        "8": {"area": "Reciprocity", "blurb": "Notice what is returning to you."},
    },
    "gateway_11": {
        "2": {"area": "Intuition & Trust", "blurb": "Act on the quiet knowing."},
        "4": {"area": "Alignment & Manifestation", "blurb": "Name the intention, then take one concrete step."},
    },
    "arrival": {
        "7": {"area": "Rest & Reflection", "blurb": "Sit with the journey before the next one."},
        "8": {"area": "Completion & Integration", "blurb": "Unpack slowly; let what you learned find its shelf."},
        "9": {"area": "Closure", "blurb": "Mark the end of the trip on purpose."},
    },
    "shift_555": {
        "5": {"area": "Transition", "blurb": "Move with the change instead of bracing against it."},
    },
}

# =============================================================================
# ESSENCE SENTENCE
# =============================================================================

ESSENCE_SENTENCE: Dict[str, str] = {
    "default": "{token} — a moment worth noticing; its meaning unfolds as you move.",
    "mirror_time": "{token} — balance returns as movement finds its calm.",
    "gateway_11": "{token} — alignment confirmed; act with calm certainty.",
    "arrival": "{token} — wisdom grounded; you've arrived where peace meets purpose.",
    "shift_555": "{token} — the shift is here; let it carry you forward.",
    "heart_6_stack": "{token} — love stacked and steady; give it a home.",
    "builder_44_1144": "{token} — the builder's code; lay the next stone with care.",
    "abundance_signature": "{token} — abundance signed and sealed; receive it.",
    "percent_near_full": "{token} — nearly full; trust that there is enough.",
    "progression": "{token} — step after step, the sequence keeps its promise.",
    "triple": "{token} — said three times, the message is clear.",
}

# =============================================================================
# ANCHOR FRAME
# =============================================================================

ANCHOR_LABELS: Dict[str, str] = {
    "time": "time",
    "percent": "charge",
    "temp": "temperature",
    "distance": "distance",
    "consumption": "consumption",
    "fuel": "fuel",
    "count": "count",
    "code": "code",
    "tagged-code": "tag",
}

ANCHOR_TEMPLATES: Dict[str, Dict[str, str]] = {
    "time": {
        "default": "{token} — the moment the clock was noticed.",
        "mirror_time": "{token} — a mirrored time sequence — appears during moments of completion and grounding.",
        "gateway_11": "{token} — a gateway time, the ones lining up in a row.",
        "shift_555": "{token} — the fives gather at the turn of the hour.",
        "progression": "{token} — one step in a climbing minute sequence.",
    },
    "percent": {
        "default": "{token} charge remaining.",
        "percent_near_full": "{token} — the reserve is almost whole.",
        "abundance_signature": "{token} — the charge carries the doubled eight.",
    },
    "temp": {
        "default": "{token} in the air around you.",
    },
    "distance": {
        "default": "{token} travelled.",
        "arrival": "{token} — the distance that brought you home.",
    },
    "consumption": {
        "default": "{token} consumed along the way.",
        "arrival": "{token} — what the journey asked of you.",
    },
    "fuel": {
        "default": "{token} of fuel.",
        "arrival": "{token} — fuel spent on the way back.",
    },
    "count": {
        "default": "{token} counted.",
    },
    "code": {
        "default": "Code {token}.",
    },
    "tagged-code": {
        "default": "Tag {token}.",
    },
}

# =============================================================================
# PHRASEBOOK (external JSON shape)
# =============================================================================

PHRASEBOOK: Dict[str, Any] = {
    "titles": TITLES,
    "themes": THEMES,
    "layered": LAYERED,
    "energyMessage": ENERGY_MESSAGE,
    "alignmentRows": {"focusMap": FOCUS_MAP},
    "resonance": RESONANCE,
    "guidanceAspect": GUIDANCE_ASPECT,
    "essenceSentence": ESSENCE_SENTENCE,
    "anchorLabels": ANCHOR_LABELS,
    "anchorTemplates": {"byType": ANCHOR_TEMPLATES},
}
