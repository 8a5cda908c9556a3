"""Big Five → HEXACO conversion and honesty-humility insights.

All functions are *pure*.
"""

from __future__ import annotations

from persona_lab.personality_types import (
    BIG_FIVE_FIELDS,
    BigFiveTraits,
    HEXACOProfile,
    clamp_score,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_AGREEABLENESS_SHIFT = 10.0
_EMPATHY_WEIGHT = 0.2
_VILLAIN_AGREEABLENESS = 20.0
_VILLAIN_PENALTY = 30.0
_BASE_CONFIDENCE = 70.0
_EXTREME_BONUS = 5.0
_VILLAIN_HONESTY = 30.0


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------
def convert(traits: BigFiveTraits) -> HEXACOProfile:
    """Derive a HEXACO profile; E, C and O pass through unchanged."""
    return HEXACOProfile(
        honesty_humility=honesty_humility(traits),
        emotionality=emotionality(traits),
        extraversion=traits.extraversion,
        agreeableness=max(0.0, traits.agreeableness - _AGREEABLENESS_SHIFT),
        conscientiousness=traits.conscientiousness,
        openness=traits.openness,
        confidence=confidence(traits),
    )


def honesty_humility(traits: BigFiveTraits) -> float:
    """Mean of stability, agreeableness and conscientiousness.

    Agreeableness below 20 costs another 30 points (floored at 0).
    """
    stability = 100 - traits.neuroticism
    base = (stability + traits.agreeableness + traits.conscientiousness) / 3
    if traits.agreeableness < _VILLAIN_AGREEABLENESS:
        return max(0.0, base - _VILLAIN_PENALTY)
    return min(100.0, base)


def emotionality(traits: BigFiveTraits) -> float:
    """Neuroticism widened by an empathy share of agreeableness."""
    return min(100.0, traits.neuroticism + traits.agreeableness * _EMPATHY_WEIGHT)


def confidence(traits: BigFiveTraits) -> float:
    """70 + 5 per extreme (<20 or >80) source trait, capped at 100."""
    extremes = sum(1 for name in BIG_FIVE_FIELDS if _is_extreme(getattr(traits, name)))
    return clamp_score(_BASE_CONFIDENCE + extremes * _EXTREME_BONUS)


def _is_extreme(value: float) -> bool:
    return value < 20 or value > 80


# ---------------------------------------------------------------------------
# Honesty-humility insights
# ---------------------------------------------------------------------------
def detect_villain_potential(hexaco: HEXACOProfile) -> bool:
    """Low honesty-humility marks villain potential."""
    return hexaco.honesty_humility < _VILLAIN_HONESTY


def suggest_antagonist_archetype(hexaco: HEXACOProfile) -> str:
    """First matching antagonist archetype for *hexaco*."""
    h = hexaco.honesty_humility
    if h < 20 and hexaco.emotionality < 30:
        return "Calculating Mastermind"
    if h < 30 and hexaco.extraversion > 70:
        return "Charismatic Manipulator"
    if h < 30 and hexaco.agreeableness < 30:
        return "Ruthless Opportunist"
    if h < 30 and hexaco.emotionality > 70:
        return "Vengeful Schemer"
    return "Morally Ambiguous Character"


def predict_manipulation_behavior(hexaco: HEXACOProfile) -> list[str]:
    """Behaviour hints for manipulation and exploitation."""
    behaviors: list[str] = []
    if hexaco.honesty_humility < _VILLAIN_HONESTY:
        behaviors.append("Deceptive tactics")
        behaviors.append("Exploits trust for personal gain")
    if hexaco.agreeableness < 30:
        behaviors.append("Lack of empathy in social interactions")
    if hexaco.extraversion > 70:
        behaviors.append("Uses charm to influence others")
    if hexaco.emotionality < 30:
        behaviors.append("Cold, calculated decision-making")
    return behaviors
