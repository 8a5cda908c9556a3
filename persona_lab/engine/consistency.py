"""Cross-system consistency scoring.

Two pairwise agreement measures (MBTI, HEXACO against the Big Five baseline)
and three coherence rules evaluated in fixed order. Low consistency is data,
never an error.

All functions are *pure*.
"""

from __future__ import annotations

import logging

from persona_lab.engine import mbti as mbti_converter
from persona_lab.personality_types import (
    BigFiveTraits,
    ConsistencyReport,
    DarkTriadProfile,
    HEXACOProfile,
    MBTIProfile,
    TCIProfile,
    UnifiedProfile,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rule messages & penalties
# ---------------------------------------------------------------------------
EXTRAVERSION_MISMATCH = "MBTI extraversion doesn't match Big Five extraversion"
HONESTY_DARKNESS_CONFLICT = "High honesty-humility conflicts with elevated dark triad scores"
DIRECTEDNESS_IMPULSIVENESS_CONFLICT = "High self-directedness conflicts with high impulsiveness"

_EXTRAVERSION_PENALTY = 10
_HONESTY_DARKNESS_PENALTY = 15
_DIRECTEDNESS_PENALTY = 10

# HEXACO factors with a Big Five counterpart
_SHARED_HEXACO_TRAITS: tuple[str, ...] = ("extraversion", "agreeableness", "conscientiousness", "openness")


# ---------------------------------------------------------------------------
# Pairwise measures
# ---------------------------------------------------------------------------
def mbti_consistency(traits: BigFiveTraits, mbti: MBTIProfile) -> float:
    """Percentage of type letters matching a fresh Big Five derivation."""
    derived = mbti_converter.convert(traits).type
    matches = sum(1 for actual, expected in zip(mbti.type, derived) if actual == expected)
    return matches / 4 * 100


def hexaco_consistency(traits: BigFiveTraits, hexaco: HEXACOProfile) -> float:
    """Mean closeness (100 − |Δ|) over the four shared factors."""
    total = sum(
        100 - abs(getattr(traits, name) - getattr(hexaco, name))
        for name in _SHARED_HEXACO_TRAITS
    )
    return total / len(_SHARED_HEXACO_TRAITS)


def overall_consistency(traits: BigFiveTraits, mbti: MBTIProfile, hexaco: HEXACOProfile) -> float:
    """Mean of the MBTI and HEXACO measures."""
    return (mbti_consistency(traits, mbti) + hexaco_consistency(traits, hexaco)) / 2


# ---------------------------------------------------------------------------
# Coherence report
# ---------------------------------------------------------------------------
def score(
    traits: BigFiveTraits,
    *,
    mbti: MBTIProfile | None = None,
    hexaco: HEXACOProfile | None = None,
    dark_triad: DarkTriadProfile | None = None,
    tci: TCIProfile | None = None,
) -> ConsistencyReport:
    """Score coherence between *traits* and whichever profiles are supplied.

    A rule is skipped when a profile it needs is missing. Rules run in fixed
    order, so warning order is deterministic.
    """
    findings = [
        finding
        for finding in (
            _rule_extraversion(traits, mbti),
            _rule_honesty_vs_darkness(hexaco, dark_triad),
            _rule_directedness_vs_impulsiveness(tci),
        )
        if finding is not None
    ]
    warnings = [message for message, _ in findings]
    overall = 100 - sum(penalty for _, penalty in findings)

    report = ConsistencyReport(
        overall_score=max(0, overall),
        warnings=warnings,
        is_consistent=not warnings,
        mbti_consistency=mbti_consistency(traits, mbti) if mbti is not None else None,
        hexaco_consistency=hexaco_consistency(traits, hexaco) if hexaco is not None else None,
    )
    if warnings:
        logger.info("Consistency %d with %d warning(s): %s", report.overall_score, len(warnings), warnings)
    return report


def score_unified(profile: UnifiedProfile) -> ConsistencyReport:
    """Re-score every derived profile held by *profile*."""
    return score(
        profile.big_five,
        mbti=profile.mbti,
        hexaco=profile.hexaco,
        dark_triad=profile.dark_triad,
        tci=profile.tci,
    )


# ---------------------------------------------------------------------------
# Rules: each returns (warning, penalty) when it fires
# ---------------------------------------------------------------------------
Finding = tuple[str, int]


def _rule_extraversion(traits: BigFiveTraits, mbti: MBTIProfile | None) -> Finding | None:
    """A: MBTI E/I letter must agree with extraversion > 50."""
    if mbti is None:
        return None
    if (mbti.type[0] == "E") != (traits.extraversion > 50):
        return EXTRAVERSION_MISMATCH, _EXTRAVERSION_PENALTY
    return None


def _rule_honesty_vs_darkness(
    hexaco: HEXACOProfile | None,
    dark_triad: DarkTriadProfile | None,
) -> Finding | None:
    """B: honesty-humility > 70 with mean dark triad > 50."""
    if hexaco is None or dark_triad is None:
        return None
    if hexaco.honesty_humility > 70 and dark_triad.mean_score() > 50:
        return HONESTY_DARKNESS_CONFLICT, _HONESTY_DARKNESS_PENALTY
    return None


def _rule_directedness_vs_impulsiveness(tci: TCIProfile | None) -> Finding | None:
    """C: self-directedness > 70 with impulsiveness > 70."""
    if tci is None:
        return None
    if tci.character.self_directedness > 70 and tci.temperament.impulsiveness > 70:
        return DIRECTEDNESS_IMPULSIVENESS_CONFLICT, _DIRECTEDNESS_PENALTY
    return None
