"""Narrative helpers over Big Five traits: descriptions, behaviour, friction.

Emotional stability is read as ``100 - neuroticism`` throughout.
All functions are *pure*.
"""

from __future__ import annotations

from persona_lab.personality_types import BigFiveTraits


# ---------------------------------------------------------------------------
# Description table: trait → (low ≤30, moderate ≤70, high)
# ---------------------------------------------------------------------------
_DESCRIPTIONS: dict[str, tuple[str, str, str]] = {
    "openness": (
        "Low Openness: Prefers tradition and routine, values practicality over imagination. "
        "Speech is concrete, avoids abstract topics, and tends to resist change.",
        "Moderate Openness: Balances curiosity with practicality. Enjoys new experiences but also "
        "appreciates familiar routines. Speech mixes concrete and abstract, open to new ideas but not easily swayed.",
        "High Openness: Highly imaginative, creative, and curious. Seeks novelty and variety, enjoys abstract "
        "thinking and unconventional ideas. Speech is expressive, metaphorical, and often explores possibilities.",
    ),
    "conscientiousness": (
        "Low Conscientiousness: Spontaneous, sometimes careless, and may struggle with organization. "
        "Speech is informal, may forget details, and can be impulsive.",
        "Moderate Conscientiousness: Generally reliable and organized, but allows for flexibility. "
        "Speech is clear and usually well-structured, but not rigid.",
        "High Conscientiousness: Highly organized, disciplined, and goal-oriented. Plans ahead, values precision, "
        "and is very dependable. Speech is structured, detail-oriented, and careful.",
    ),
    "extraversion": (
        "Low Extraversion: Reserved, introspective, and prefers solitude or small groups. "
        "Speech is quiet, thoughtful, and may avoid drawing attention.",
        "Moderate Extraversion: Comfortable in both social and solitary settings. "
        "Speech is engaging but not dominating, adapts to the situation.",
        "High Extraversion: Outgoing, energetic, and thrives in social situations. "
        "Speech is lively, expressive, and often seeks to engage others.",
    ),
    "agreeableness": (
        "Low Agreeableness: Direct, sometimes critical, and values honesty over harmony. "
        "Speech can be blunt, argumentative, or skeptical.",
        "Moderate Agreeableness: Balances assertiveness with cooperation. "
        "Speech is generally polite and considerate, but can be firm when needed.",
        "High Agreeableness: Compassionate, trusting, and eager to help others. "
        "Speech is warm, supportive, and avoids conflict.",
    ),
    "emotional_stability": (
        "Low Emotional Stability: Prone to stress, anxiety, and mood swings. "
        "Speech may reveal worries, self-doubt, or emotional reactivity.",
        "Moderate Emotional Stability: Generally calm but can be affected by stress. "
        "Speech is balanced, with occasional expressions of concern or frustration.",
        "High Emotional Stability: Calm, resilient, and rarely upset by stress. "
        "Speech is steady, reassuring, and rarely shows emotional turmoil.",
    ),
}

BALANCED_PATTERN = (
    "Displays a balanced and adaptable set of behaviors, adjusting to different situations as needed."
)
NO_CONFLICT = "No major sources of conflict predicted; personalities are likely to be compatible."

_CONFLICT_GAP = 40

_CONFLICT_TEXT: dict[str, str] = {
    "openness": "Differences in openness may lead to disagreements about trying new things versus sticking to tradition.",
    "conscientiousness": "One character may see the other as too rigid or too careless, causing friction in planning or reliability.",
    "extraversion": "Social preferences may clash, with one preferring solitude and the other seeking constant interaction.",
    "agreeableness": "Disagreements may arise over directness versus harmony, or skepticism versus trust.",
    "emotional_stability": "One character may be seen as too sensitive or too stoic, leading to misunderstandings in emotional situations.",
}


def _narrative_values(traits: BigFiveTraits) -> dict[str, float]:
    return {
        "openness": traits.openness,
        "conscientiousness": traits.conscientiousness,
        "extraversion": traits.extraversion,
        "agreeableness": traits.agreeableness,
        "emotional_stability": 100 - traits.neuroticism,
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def describe_traits(traits: BigFiveTraits) -> dict[str, str]:
    """Low / moderate / high description for each trait."""
    descriptions: dict[str, str] = {}
    for name, value in _narrative_values(traits).items():
        low, moderate, high = _DESCRIPTIONS[name]
        if value <= 30:
            descriptions[name] = low
        elif value <= 70:
            descriptions[name] = moderate
        else:
            descriptions[name] = high
    return descriptions


def predict_behavior_patterns(traits: BigFiveTraits) -> list[str]:
    """Behavioural tendencies from trait combinations."""
    v = _narrative_values(traits)
    patterns: list[str] = []
    if v["openness"] > 70 and v["extraversion"] > 70:
        patterns.append("Seeks out novel social experiences and enjoys creative group activities.")
    if v["conscientiousness"] > 70 and v["agreeableness"] > 70:
        patterns.append("Highly dependable team player, often takes on responsibility and mediates conflicts.")
    if v["extraversion"] < 30 and v["openness"] < 30:
        patterns.append("Prefers familiar routines and quiet environments, avoids large gatherings and surprises.")
    if v["agreeableness"] < 30 and v["emotional_stability"] < 30:
        patterns.append("May react defensively or critically under stress, prone to interpersonal conflicts.")
    if v["openness"] > 70 and v["conscientiousness"] < 30:
        patterns.append("Has many creative ideas but struggles to follow through or organize them.")
    if v["conscientiousness"] > 70 and v["emotional_stability"] < 30:
        patterns.append("Driven to achieve but may become anxious or perfectionistic under pressure.")
    return patterns or [BALANCED_PATTERN]


def predict_conflict_sources(a: BigFiveTraits, b: BigFiveTraits) -> list[str]:
    """Friction points between two characters (gap > 40 on a trait)."""
    va = _narrative_values(a)
    vb = _narrative_values(b)
    conflicts = [
        _CONFLICT_TEXT[name]
        for name in _CONFLICT_TEXT
        if abs(va[name] - vb[name]) > _CONFLICT_GAP
    ]
    return conflicts or [NO_CONFLICT]
