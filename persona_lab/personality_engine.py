"""Multi-system personality engine.

Validates a Big Five vector, runs the four converters, assembles a
:class:`UnifiedProfile` and attaches the cross-system consistency report.
The engine holds only read-only settings and adapters, so one instance can be
shared freely across threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
import logging
from typing import Any

from pydantic import BaseModel

from persona_lab.config import EngineSettings, get_settings
from persona_lab.engine import consistency, dark_triad, hexaco, mbti, tci
from persona_lab.engine.adapters import ProfileAdapter, apply_adapters
from persona_lab.engine.comparison import ProfileComparison
from persona_lab.engine.comparison import compare as compare_profiles
from persona_lab.engine.validation import (
    ProfileValidationResult,
    big_five_problems,
    invalid_big_five_fields,
)
from persona_lab.engine.validation import validate_profile as validate_system_profile
from persona_lab.errors import InvalidInputError, UnsupportedSystemError
from persona_lab.personality_types import (
    CHARACTER_SYSTEM_RECOMMENDATIONS,
    CONVERTIBLE_SYSTEMS,
    DEFAULT_RECOMMENDATION,
    BigFiveTraits,
    PersonalitySystemType,
    UnifiedProfile,
)

logger = logging.getLogger(__name__)

TraitsInput = BigFiveTraits | Mapping[str, Any]

_CONVERTERS: dict[str, Callable[[BigFiveTraits], BaseModel]] = {
    "MBTI": mbti.convert,
    "HEXACO": hexaco.convert,
    "DARK_TRIAD": dark_triad.convert,
    "TCI": tci.convert,
}


class PersonalityEngine:
    """Orchestrates conversion of one Big Five vector into every system."""

    def __init__(
        self,
        settings: EngineSettings | None = None,
        adapters: Iterable[ProfileAdapter] | None = None,
    ):
        """Initialize with optional settings and pre-conversion adapters."""
        self.settings = settings or get_settings()
        self.adapters: tuple[ProfileAdapter, ...] = tuple(adapters or ())

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    @staticmethod
    def validate(traits: Any) -> bool:
        """True when all five fields are present, numeric and within [0, 100]."""
        return not big_five_problems(traits)

    def ensure_valid(self, traits: Any) -> BigFiveTraits:
        """Return *traits* as a model or raise naming every violated field.

        Raises:
            InvalidInputError: Missing, non-numeric or out-of-range fields.
        """
        problems = big_five_problems(traits)
        if problems:
            logger.warning("Rejected Big Five input: %s", problems)
            raise InvalidInputError(
                f"Invalid Big Five traits: {'; '.join(problems)}",
                fields=invalid_big_five_fields(traits),
            )
        if isinstance(traits, BigFiveTraits):
            return traits
        return BigFiveTraits.model_validate(dict(traits))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def generate_all(self, traits: TraitsInput) -> UnifiedProfile:
        """Convert *traits* into every system and score their coherence.

        Raises:
            InvalidInputError: Validation failed; no partial result is produced.
        """
        big_five = self._prepare(traits)
        mbti_profile = mbti.convert(big_five)
        hexaco_profile = hexaco.convert(big_five)
        dark_triad_profile = dark_triad.convert(big_five)
        tci_profile = tci.convert(big_five)

        report = consistency.score(
            big_five,
            mbti=mbti_profile,
            hexaco=hexaco_profile,
            dark_triad=dark_triad_profile,
            tci=tci_profile,
        )
        logger.debug(
            "Unified profile: type=%s darkness=%.1f consistency=%d",
            mbti_profile.type,
            dark_triad_profile.overall_darkness,
            report.overall_score,
        )
        return UnifiedProfile(
            big_five=big_five,
            mbti=mbti_profile,
            hexaco=hexaco_profile,
            dark_triad=dark_triad_profile,
            tci=tci_profile,
            consistency=report,
        )

    generate_all_systems = generate_all

    def convert_to(self, target_system: str, traits: TraitsInput) -> BaseModel:
        """Convert *traits* into a single target system.

        Raises:
            UnsupportedSystemError: *target_system* is not MBTI, HEXACO, DARK_TRIAD or TCI.
            InvalidInputError: Validation failed.
        """
        converter = _CONVERTERS.get(target_system)
        if converter is None:
            raise UnsupportedSystemError(target_system)
        return converter(self._prepare(traits))

    # ------------------------------------------------------------------
    # Collaborator contracts
    # ------------------------------------------------------------------
    def validate_profile(self, system: str, data: Any) -> ProfileValidationResult:
        return validate_system_profile(system, data)

    def compare(self, profiles: Sequence[TraitsInput]) -> ProfileComparison:
        return compare_profiles(profiles, threshold=self.settings.similarity_threshold)

    @staticmethod
    def recommended_systems(character_type: str) -> list[PersonalitySystemType]:
        """Systems suited to a narrative archetype (case-insensitive)."""
        key = character_type.strip().lower()
        return list(CHARACTER_SYSTEM_RECOMMENDATIONS.get(key, DEFAULT_RECOMMENDATION))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _prepare(self, traits: TraitsInput) -> BigFiveTraits:
        big_five = self.ensure_valid(traits)
        if self.adapters:
            big_five = apply_adapters(big_five, self.adapters)
        return big_five


# ---------------------------------------------------------------------------
# Module-level facade
# ---------------------------------------------------------------------------
def _default_engine() -> PersonalityEngine:
    return PersonalityEngine()


def validate(traits: Any) -> bool:
    return PersonalityEngine.validate(traits)


def generate_all_systems(traits: TraitsInput) -> UnifiedProfile:
    return _default_engine().generate_all(traits)


def convert_to(target_system: str, traits: TraitsInput) -> BaseModel:
    return _default_engine().convert_to(target_system, traits)


def validate_profile(system: str, data: Any) -> ProfileValidationResult:
    return validate_system_profile(system, data)


def compare(profiles: Sequence[TraitsInput]) -> ProfileComparison:
    return _default_engine().compare(profiles)


def recommended_systems(character_type: str) -> list[PersonalitySystemType]:
    return PersonalityEngine.recommended_systems(character_type)


def supported_targets() -> tuple[PersonalitySystemType, ...]:
    """Systems accepted by :func:`convert_to`."""
    return CONVERTIBLE_SYSTEMS
