"""Big Five → MBTI conversion.

Four independent threshold rules, one Big Five trait per MBTI axis.
All functions are *pure*.
"""

from __future__ import annotations

from persona_lab.personality_types import (
    MBTI_POLES,
    BigFiveTraits,
    MBTIDimensions,
    MBTIDimensionScore,
    MBTIProfile,
    clamp_score,
)


# ---------------------------------------------------------------------------
# Axis → source trait
# ---------------------------------------------------------------------------
_AXIS_SOURCES: dict[str, str] = {
    "EI": "extraversion",
    "SN": "openness",
    "TF": "agreeableness",
    "JP": "conscientiousness",
}

_MIDPOINT = 50.0
_CONFIDENCE_FLOOR = 20.0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def convert(traits: BigFiveTraits) -> MBTIProfile:
    """Derive an MBTI profile; a trait exactly at 50 takes the low pole."""
    scores: dict[str, MBTIDimensionScore] = {}
    for axis, source in _AXIS_SOURCES.items():
        value = getattr(traits, source)
        high, low = MBTI_POLES[axis]
        scores[axis] = MBTIDimensionScore(
            preference=high if value > _MIDPOINT else low,
            strength=_strength(value),
        )

    type_code = "".join(scores[axis].preference for axis in _AXIS_SOURCES)
    return MBTIProfile(
        type=type_code,
        dimensions=MBTIDimensions(**scores),
        confidence=conversion_confidence(traits),
    )


def conversion_confidence(traits: BigFiveTraits) -> float:
    """Mean axis strength + 20, capped at 100 (range 20–100)."""
    strengths = [_strength(getattr(traits, source)) for source in _AXIS_SOURCES.values()]
    return min(100.0, sum(strengths) / len(strengths) + _CONFIDENCE_FLOOR)


def to_big_five(mbti_type: str) -> dict[str, float]:
    """Approximate Big Five values for a type code.

    Neuroticism has no MBTI axis and is omitted.
    """
    code = mbti_type.strip().upper()
    if len(code) != 4:
        raise ValueError(f"MBTI type must have 4 letters, got {mbti_type!r}")
    result: dict[str, float] = {}
    for letter, (axis, source) in zip(code, _AXIS_SOURCES.items()):
        high, low = MBTI_POLES[axis]
        if letter not in (high, low):
            raise ValueError(f"letter {letter!r} is not a valid {axis} pole")
        result[source] = 75.0 if letter == high else 25.0
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _strength(value: float) -> float:
    return clamp_score(abs(value - _MIDPOINT) * 2)
