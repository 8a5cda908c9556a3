"""Big Five → TCI (Temperament & Character Inventory) conversion.

Temperament (biological, stable) and character (developmental, malleable) are
computed independently from the same Big Five vector and never read each
other. :func:`simulate_growth` only ever moves character traits.
"""

from __future__ import annotations

import logging

import numpy as np

from persona_lab.config import get_settings
from persona_lab.errors import InvalidInputError
from persona_lab.personality_types import (
    BigFiveTraits,
    TCICharacter,
    TCIGrowth,
    TCIProfile,
    TCITemperament,
    clamp_score,
)

logger = logging.getLogger(__name__)

_CONFIDENCE_FLOOR = 60.0


# ---------------------------------------------------------------------------
# Temperament engine
# ---------------------------------------------------------------------------
def convert_temperament(traits: BigFiveTraits) -> TCITemperament:
    o = traits.openness
    c = traits.conscientiousness
    e = traits.extraversion
    a = traits.agreeableness
    n = traits.neuroticism
    return TCITemperament(
        novelty_seeking_curiosity=clamp_score(o * 0.7 + e * 0.3),
        impulsiveness=clamp_score((100 - c) * 0.8 + n * 0.2),
        extravagance=clamp_score(e * 0.6 + (100 - c) * 0.4),
        disorderliness=clamp_score(100 - c),
        harm_avoidance=clamp_score(n * 0.7 + (100 - e) * 0.3),
        reward_dependence=clamp_score(e * 0.5 + a * 0.5),
        persistence=clamp_score(c * 0.8 + (100 - n) * 0.2),
    )


# ---------------------------------------------------------------------------
# Character engine
# ---------------------------------------------------------------------------
def convert_character(traits: BigFiveTraits) -> TCICharacter:
    stability = 100 - traits.neuroticism
    return TCICharacter(
        self_directedness=clamp_score(traits.conscientiousness * 0.6 + stability * 0.4),
        cooperativeness=clamp_score(traits.agreeableness * 0.8 + stability * 0.2),
        self_transcendence=clamp_score(traits.openness * 0.6 + traits.agreeableness * 0.4),
    )


# ---------------------------------------------------------------------------
# Combined profile
# ---------------------------------------------------------------------------
def convert(traits: BigFiveTraits) -> TCIProfile:
    return TCIProfile(
        temperament=convert_temperament(traits),
        character=convert_character(traits),
        confidence=confidence(traits),
    )


def confidence(traits: BigFiveTraits) -> float:
    """Flatter profiles score higher: 100 − population variance, floored at 60."""
    variance = float(np.var(np.array(traits.as_vector(), dtype=float)))
    return clamp_score(max(_CONFIDENCE_FLOOR, 100 - variance))


# ---------------------------------------------------------------------------
# Development simulation
# ---------------------------------------------------------------------------
def simulate_growth(
    profile: TCIProfile,
    time_span: float,
    rate: float | None = None,
) -> TCIGrowth:
    """Project character maturation over *time_span* units.

    Each character trait closes ``1 − (1 − rate) ** time_span`` of its gap to
    100. Temperament and confidence are carried over unchanged.

    Args:
        profile: Starting TCI profile.
        time_span: Elapsed time; must be non-negative.
        rate: Per-unit growth share in [0, 1]; defaults to the configured rate.

    Returns:
        TCIGrowth with the untouched initial profile and the developed one.

    Raises:
        InvalidInputError: If *time_span* is negative or NaN, or *rate* is outside [0, 1].
    """
    if not time_span >= 0:
        raise InvalidInputError(f"time_span must be >= 0, got {time_span}", fields=["time_span"])
    growth_rate = get_settings().growth_rate if rate is None else rate
    if not 0.0 <= growth_rate <= 1.0:
        raise InvalidInputError(f"rate must be within [0, 1], got {growth_rate}", fields=["rate"])

    share = 1.0 - (1.0 - growth_rate) ** time_span
    character = profile.character
    developed_character = TCICharacter(
        self_directedness=_grow(character.self_directedness, share),
        cooperativeness=_grow(character.cooperativeness, share),
        self_transcendence=_grow(character.self_transcendence, share),
    )
    logger.debug("Growth over %s units at rate %s closes %.3f of each gap", time_span, growth_rate, share)

    developed = profile.model_copy(update={"character": developed_character})
    return TCIGrowth(initial=profile, developed=developed, time_span=time_span)


def _grow(value: float, share: float) -> float:
    return clamp_score(value + (100 - value) * share)
