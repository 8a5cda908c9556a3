"""Multi-system personality conversion for character authoring."""

from .errors import InvalidInputError, MalformedProfileError, PersonaLabError, UnsupportedSystemError
from .personality_engine import (
    PersonalityEngine,
    compare,
    convert_to,
    generate_all_systems,
    recommended_systems,
    validate,
    validate_profile,
)
from .personality_types import BigFiveTraits, ConsistencyReport, UnifiedProfile

__all__ = [
    "BigFiveTraits",
    "ConsistencyReport",
    "InvalidInputError",
    "MalformedProfileError",
    "PersonaLabError",
    "PersonalityEngine",
    "UnifiedProfile",
    "UnsupportedSystemError",
    "compare",
    "convert_to",
    "generate_all_systems",
    "recommended_systems",
    "validate",
    "validate_profile",
]
