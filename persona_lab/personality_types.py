"""Personality model definitions for multi-system character profiles.

Defines the Big Five input vector, the four derived system profiles
(MBTI / HEXACO / Dark Triad / TCI) and the unified result with its
consistency report. Every model is frozen: profiles are values, not records.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# System / enum literals
# ---------------------------------------------------------------------------
PersonalitySystemType = Literal["BIG_FIVE", "MBTI", "HEXACO", "DARK_TRIAD", "TCI"]

ALL_SYSTEMS: tuple[PersonalitySystemType, ...] = ("BIG_FIVE", "MBTI", "HEXACO", "DARK_TRIAD", "TCI")
CONVERTIBLE_SYSTEMS: tuple[PersonalitySystemType, ...] = ("MBTI", "HEXACO", "DARK_TRIAD", "TCI")

BIG_FIVE_FIELDS: tuple[str, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)

MBTIType = Literal[
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
]
MBTIPreference = Literal["E", "I", "S", "N", "T", "F", "J", "P"]
RiskLevel = Literal["LOW", "MODERATE", "HIGH", "EXTREME"]
WarningLevel = Literal["none", "low", "medium", "high"]

# dimension key → (high pole, low pole)
MBTI_POLES: dict[str, tuple[str, str]] = {
    "EI": ("E", "I"),
    "SN": ("N", "S"),
    "TF": ("F", "T"),
    "JP": ("J", "P"),
}

MBTI_TYPES: tuple[str, ...] = (
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
)


def clamp_score(value: float) -> float:
    """Clamp *value* into the closed [0, 100] score range."""
    return max(0.0, min(100.0, float(value)))


Score = float

# ints are accepted; bools, numeric strings and non-finite values are not
TraitScore = Annotated[float, Field(ge=0, le=100, strict=True, allow_inf_nan=False)]

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


# ---------------------------------------------------------------------------
# Big Five (base system)
# ---------------------------------------------------------------------------
class BigFiveTraits(BaseModel):
    """The OCEAN vector; the sole input of every conversion."""

    model_config = _FROZEN

    openness: TraitScore
    conscientiousness: TraitScore
    extraversion: TraitScore
    agreeableness: TraitScore
    neuroticism: TraitScore

    def as_vector(self) -> list[float]:
        """Trait values in canonical OCEAN field order."""
        return [getattr(self, name) for name in BIG_FIVE_FIELDS]


# ---------------------------------------------------------------------------
# MBTI
# ---------------------------------------------------------------------------
class MBTIDimensionScore(BaseModel):
    """Chosen pole and preference strength for one MBTI axis."""

    model_config = _FROZEN

    preference: MBTIPreference
    strength: Score = Field(..., ge=0, le=100)


class MBTIDimensions(BaseModel):
    """The four MBTI axes in fixed EI·SN·TF·JP order."""

    model_config = _FROZEN

    EI: MBTIDimensionScore
    SN: MBTIDimensionScore
    TF: MBTIDimensionScore
    JP: MBTIDimensionScore


class MBTIProfile(BaseModel):
    """Four-letter MBTI type with per-axis strengths."""

    model_config = _FROZEN

    type: MBTIType
    dimensions: MBTIDimensions
    confidence: Score = Field(..., ge=0, le=100)

    @model_validator(mode="after")
    def _letters_match_dimensions(self) -> MBTIProfile:
        for index, (key, poles) in enumerate(MBTI_POLES.items()):
            preference = getattr(self.dimensions, key).preference
            if preference not in poles:
                raise ValueError(f"{key} preference must be one of {poles}, got {preference!r}")
            if self.type[index] != preference:
                raise ValueError(
                    f"type letter {self.type[index]!r} does not match {key} preference {preference!r}"
                )
        return self


# ---------------------------------------------------------------------------
# HEXACO
# ---------------------------------------------------------------------------
class HEXACOProfile(BaseModel):
    """Six-factor profile; honesty-humility has no Big Five analogue."""

    model_config = _FROZEN

    honesty_humility: Score = Field(..., ge=0, le=100, alias="honestyHumility")
    emotionality: Score = Field(..., ge=0, le=100)
    extraversion: Score = Field(..., ge=0, le=100)
    agreeableness: Score = Field(..., ge=0, le=100)
    conscientiousness: Score = Field(..., ge=0, le=100)
    openness: Score = Field(..., ge=0, le=100)
    confidence: Score = Field(..., ge=0, le=100)


# ---------------------------------------------------------------------------
# Dark Triad
# ---------------------------------------------------------------------------
class DarkTriadProfile(BaseModel):
    """Machiavellianism / narcissism / psychopathy with aggregate risk."""

    model_config = _FROZEN

    machiavellianism: Score = Field(..., ge=0, le=100)
    narcissism: Score = Field(..., ge=0, le=100)
    psychopathy: Score = Field(..., ge=0, le=100)
    overall_darkness: Score = Field(..., ge=0, le=100, alias="overallDarkness")
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    confidence: Score = Field(..., ge=0, le=100)

    def mean_score(self) -> float:
        return (self.machiavellianism + self.narcissism + self.psychopathy) / 3


class ContentAdvisory(BaseModel):
    """Content warning tier derived from a Dark Triad profile."""

    model_config = _FROZEN

    warning_level: WarningLevel = Field(..., alias="warningLevel")
    message: str
    age_restriction: int = Field(..., ge=0, alias="ageRestriction")


# ---------------------------------------------------------------------------
# TCI
# ---------------------------------------------------------------------------
class TCITemperament(BaseModel):
    """Biologically-framed, stable traits."""

    model_config = _FROZEN

    novelty_seeking_curiosity: Score = Field(..., ge=0, le=100, alias="noveltySeekingCuriosity")
    impulsiveness: Score = Field(..., ge=0, le=100)
    extravagance: Score = Field(..., ge=0, le=100)
    disorderliness: Score = Field(..., ge=0, le=100)
    harm_avoidance: Score = Field(..., ge=0, le=100, alias="harmAvoidance")
    reward_dependence: Score = Field(..., ge=0, le=100, alias="rewardDependence")
    persistence: Score = Field(..., ge=0, le=100)


class TCICharacter(BaseModel):
    """Developmentally-framed, malleable traits."""

    model_config = _FROZEN

    self_directedness: Score = Field(..., ge=0, le=100, alias="selfDirectedness")
    cooperativeness: Score = Field(..., ge=0, le=100)
    self_transcendence: Score = Field(..., ge=0, le=100, alias="selfTranscendence")


class TCIProfile(BaseModel):
    """Temperament and character computed independently from one Big Five vector."""

    model_config = _FROZEN

    temperament: TCITemperament
    character: TCICharacter
    confidence: Score = Field(..., ge=0, le=100)


class TCIGrowth(BaseModel):
    """Before / after pair produced by a growth simulation."""

    model_config = _FROZEN

    initial: TCIProfile
    developed: TCIProfile
    time_span: float = Field(..., ge=0, alias="timeSpan")


# ---------------------------------------------------------------------------
# Unified result
# ---------------------------------------------------------------------------
class ConsistencyReport(BaseModel):
    """Cross-system coherence: score, ordered warnings and pairwise measures."""

    model_config = _FROZEN

    overall_score: int = Field(..., ge=0, le=100, alias="overallScore")
    warnings: list[str] = Field(default_factory=list)
    is_consistent: bool = Field(..., alias="isConsistent")
    mbti_consistency: Score | None = Field(default=None, ge=0, le=100, alias="mbtiConsistency")
    hexaco_consistency: Score | None = Field(default=None, ge=0, le=100, alias="hexacoConsistency")


class UnifiedProfile(BaseModel):
    """All five representations of one character plus their consistency."""

    model_config = _FROZEN

    big_five: BigFiveTraits = Field(..., alias="bigFive")
    mbti: MBTIProfile
    hexaco: HEXACOProfile
    dark_triad: DarkTriadProfile = Field(..., alias="darkTriad")
    tci: TCIProfile
    consistency: ConsistencyReport


# ---------------------------------------------------------------------------
# System metadata
# ---------------------------------------------------------------------------
class PersonalitySystemConfig(BaseModel):
    """Descriptive metadata for one personality system."""

    model_config = _FROZEN

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=5)
    strengths: list[str] = Field(default_factory=list, min_length=1)
    best_for: list[str] = Field(default_factory=list, min_length=1, alias="bestFor")
    research_basis: str = Field(..., min_length=5, alias="researchBasis")


PERSONALITY_SYSTEMS: dict[str, PersonalitySystemConfig] = {
    "BIG_FIVE": PersonalitySystemConfig(
        name="Big Five (Ocean Model)",
        description="The foundational five-factor model of personality psychology",
        strengths=["Scientifically validated", "Cross-cultural reliability", "Comprehensive coverage"],
        best_for=["General character creation", "Psychological accuracy", "Base personality framework"],
        research_basis="Decades of peer-reviewed research across cultures",
    ),
    "MBTI": PersonalitySystemConfig(
        name="Myers-Briggs Type Indicator",
        description="Cognitive function-based personality typing system",
        strengths=["Mass market appeal", "Detailed behavioral descriptions", "Strong user engagement"],
        best_for=["Character dialogue patterns", "Decision-making styles", "Social interactions"],
        research_basis="Based on Jungian cognitive functions with modern adaptations",
    ),
    "HEXACO": PersonalitySystemConfig(
        name="HEXACO Six-Factor Model",
        description="Enhanced personality model with Honesty-Humility factor",
        strengths=["Superior villain creation", "Cross-cultural validity", "Moral dimension"],
        best_for=["Antagonist development", "Morally complex characters", "Cultural authenticity"],
        research_basis="Extensive cross-cultural research identifying universal personality factors",
    ),
    "DARK_TRIAD": PersonalitySystemConfig(
        name="Dark Triad Personality",
        description="Machiavellianism, Narcissism, and Psychopathy assessment",
        strengths=["Compelling antagonists", "Psychological authenticity", "Unique market position"],
        best_for=["Complex villains", "Antihero development", "Psychological thrillers"],
        research_basis="Clinical and forensic psychology research on antisocial traits",
    ),
    "TCI": PersonalitySystemConfig(
        name="Temperament & Character Inventory",
        description="Separates biological temperament from learned character traits",
        strengths=["Character development arcs", "Biological vs learned distinction", "Growth potential"],
        best_for=["Character evolution", "Educational applications", "Therapeutic contexts"],
        research_basis="Neurobiological research on personality development and plasticity",
    ),
}


# ---------------------------------------------------------------------------
# Character archetype → recommended systems
# ---------------------------------------------------------------------------
CHARACTER_SYSTEM_RECOMMENDATIONS: dict[str, tuple[PersonalitySystemType, ...]] = {
    "hero": ("MBTI", "TCI"),
    "villain": ("HEXACO", "DARK_TRIAD"),
    "antihero": ("DARK_TRIAD", "HEXACO", "TCI"),
    "mentor": ("TCI", "MBTI"),
    "comic_relief": ("MBTI", "BIG_FIVE"),
    "love_interest": ("MBTI", "TCI"),
    "antagonist": ("HEXACO", "DARK_TRIAD"),
    "sidekick": ("MBTI", "BIG_FIVE"),
    "complex_character": ("HEXACO", "DARK_TRIAD", "TCI"),
}
DEFAULT_RECOMMENDATION: tuple[PersonalitySystemType, ...] = ("BIG_FIVE", "MBTI")


def get_system_config(system: str) -> PersonalitySystemConfig | None:
    """Look up system metadata by system name."""
    return PERSONALITY_SYSTEMS.get(system)
