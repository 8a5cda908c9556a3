"""Dark Triad scoring and content advisory.

Two entry points produce a :class:`DarkTriadProfile`: :func:`convert` works
from Big Five directly (used by the unified pipeline) and
:func:`convert_from_hexaco` works from a HEXACO profile. Both derive
``overall_darkness`` and ``risk_level`` the same way.

All functions are *pure*.
"""

from __future__ import annotations

from persona_lab.personality_types import (
    BigFiveTraits,
    ContentAdvisory,
    DarkTriadProfile,
    HEXACOProfile,
    RiskLevel,
    clamp_score,
)


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------
# (upper bound exclusive, level) evaluated in order on overall darkness
_RISK_BANDS: list[tuple[float, RiskLevel]] = [
    (25.0, "LOW"),
    (50.0, "MODERATE"),
    (75.0, "HIGH"),
]

# (total score strictly above, advisory) evaluated in order
_ADVISORY_TIERS: list[tuple[float, ContentAdvisory]] = [
    (240.0, ContentAdvisory(
        warning_level="high",
        message="This character exhibits extreme dark personality traits",
        age_restriction=18,
    )),
    (180.0, ContentAdvisory(
        warning_level="medium",
        message="This character has strong dark personality traits",
        age_restriction=16,
    )),
    (120.0, ContentAdvisory(
        warning_level="low",
        message="This character has some dark personality traits",
        age_restriction=13,
    )),
]
_NO_ADVISORY = ContentAdvisory(
    warning_level="none",
    message="No significant dark personality traits detected",
    age_restriction=0,
)


# ---------------------------------------------------------------------------
# Big Five variant
# ---------------------------------------------------------------------------
def convert(traits: BigFiveTraits) -> DarkTriadProfile:
    """Derive Dark Triad scores directly from Big Five."""
    return _build(
        mach=machiavellianism(traits),
        narc=narcissism(traits),
        psych=psychopathy(traits),
        conf=confidence(traits),
    )


def machiavellianism(traits: BigFiveTraits) -> float:
    low_agreeableness = 100 - traits.agreeableness
    low_neuroticism = 100 - traits.neuroticism
    strategic_thinking = traits.openness * 0.3
    return min(100.0, low_agreeableness * 0.6 + low_neuroticism * 0.3 + strategic_thinking * 0.1)


def narcissism(traits: BigFiveTraits) -> float:
    low_agreeableness = (100 - traits.agreeableness) * 0.7
    low_neuroticism = (100 - traits.neuroticism) * 0.5
    return min(100.0, traits.extraversion * 0.5 + low_agreeableness * 0.3 + low_neuroticism * 0.2)


def psychopathy(traits: BigFiveTraits) -> float:
    very_low_agreeableness = (100 - traits.agreeableness) * 0.8
    low_neuroticism = (100 - traits.neuroticism) * 0.4
    low_conscientiousness = (100 - traits.conscientiousness) * 0.3
    return min(
        100.0,
        very_low_agreeableness * 0.6 + low_neuroticism * 0.25 + low_conscientiousness * 0.15,
    )


def confidence(traits: BigFiveTraits) -> float:
    """50 plus a bonus for each anti-social indicator."""
    bonus = 0.0
    if traits.agreeableness < 30:
        bonus += 20
    if traits.neuroticism < 30:
        bonus += 15
    if traits.conscientiousness < 30:
        bonus += 10
    return min(100.0, 50 + bonus)


# ---------------------------------------------------------------------------
# HEXACO variant
# ---------------------------------------------------------------------------
def convert_from_hexaco(hexaco: HEXACOProfile) -> DarkTriadProfile:
    """Derive Dark Triad scores from honesty-humility and its neighbours.

    Confidence is inherited from the HEXACO profile.
    """
    h = hexaco.honesty_humility
    return _build(
        mach=100 - (h * 0.8 + hexaco.agreeableness * 0.2),
        narc=(100 - h) * 0.7 + hexaco.extraversion * 0.3,
        psych=100 - (h * 0.6 + hexaco.emotionality * 0.4),
        conf=hexaco.confidence,
    )


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------
def overall_darkness(mach: float, narc: float, psych: float) -> float:
    """Mean of the three sub-scores."""
    return clamp_score((mach + narc + psych) / 3)


def risk_level(darkness: float) -> RiskLevel:
    """Fixed bands: <25 LOW, <50 MODERATE, <75 HIGH, else EXTREME."""
    for upper, level in _RISK_BANDS:
        if darkness < upper:
            return level
    return "EXTREME"


def evaluate_content(dark_triad: DarkTriadProfile) -> ContentAdvisory:
    """Classify *dark_triad* into a content warning tier with a minimum age."""
    total = dark_triad.machiavellianism + dark_triad.narcissism + dark_triad.psychopathy
    for threshold, advisory in _ADVISORY_TIERS:
        if total > threshold:
            return advisory
    return _NO_ADVISORY


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _build(mach: float, narc: float, psych: float, conf: float) -> DarkTriadProfile:
    mach = clamp_score(mach)
    narc = clamp_score(narc)
    psych = clamp_score(psych)
    darkness = overall_darkness(mach, narc, psych)
    return DarkTriadProfile(
        machiavellianism=mach,
        narcissism=narc,
        psychopathy=psych,
        overall_darkness=darkness,
        risk_level=risk_level(darkness),
        confidence=clamp_score(conf),
    )
