"""Structural validation of per-system profile payloads.

Validation problems are returned as data (``is_valid=False`` plus error
strings). :func:`require_valid_profile` is the raising variant.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from math import isfinite
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from persona_lab.config import get_settings
from persona_lab.errors import MalformedProfileError, UnsupportedSystemError
from persona_lab.personality_types import (
    ALL_SYSTEMS,
    BIG_FIVE_FIELDS,
    BigFiveTraits,
    DarkTriadProfile,
    HEXACOProfile,
    MBTIProfile,
    TCIProfile,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class ProfileValidationResult(BaseModel):
    """Outcome of a structural check; warnings never affect validity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Field tables (wire names)
# ---------------------------------------------------------------------------
HEXACO_FIELDS: tuple[str, ...] = (
    "honestyHumility",
    "emotionality",
    "extraversion",
    "agreeableness",
    "conscientiousness",
    "openness",
)
DARK_TRIAD_FIELDS: tuple[str, ...] = ("machiavellianism", "narcissism", "psychopathy")

_PROFILE_MODELS: dict[str, type[BaseModel]] = {
    "BIG_FIVE": BigFiveTraits,
    "MBTI": MBTIProfile,
    "HEXACO": HEXACOProfile,
    "DARK_TRIAD": DarkTriadProfile,
    "TCI": TCIProfile,
}

# system → (low, high) typical population range; None means unbounded
_TYPICAL_RANGES: dict[str, tuple[float | None, float | None]] = {
    "BIG_FIVE": (5.0, 95.0),
    "HEXACO": (10.0, 90.0),
    "DARK_TRIAD": (None, 80.0),
    "TCI": (10.0, 90.0),
}


# ---------------------------------------------------------------------------
# Big Five rule (shared with the orchestrator)
# ---------------------------------------------------------------------------
def big_five_problems(data: Any) -> list[str]:
    """Every missing, non-numeric or out-of-range Big Five field, in OCEAN order.

    The :class:`BigFiveTraits` model is the only rule; its validation errors
    are rephrased here.
    """
    if not isinstance(data, (BigFiveTraits, Mapping)):
        return ["Big Five traits must be a mapping of trait name to value"]
    return list(_big_five_errors(data).values())


def invalid_big_five_fields(data: Any) -> list[str]:
    """Names of the Big Five fields that fail validation."""
    if not isinstance(data, (BigFiveTraits, Mapping)):
        return list(BIG_FIVE_FIELDS)
    return list(_big_five_errors(data))


def _big_five_errors(data: BigFiveTraits | Mapping[str, Any]) -> dict[str, str]:
    if isinstance(data, BigFiveTraits):
        return {}
    try:
        BigFiveTraits.model_validate(dict(data))
    except ValidationError as e:
        found: dict[str, str] = {}
        for err in e.errors():
            name = str(err["loc"][0]) if err["loc"] else ""
            if name in BIG_FIVE_FIELDS and name not in found:
                found[name] = _trait_message(name, err["type"], data.get(name))
        return {name: found[name] for name in BIG_FIVE_FIELDS if name in found}
    return {}


def _trait_message(name: str, error_type: str, value: Any) -> str:
    if error_type == "missing" or value is None:
        return f"{name} is missing"
    if error_type in ("greater_than_equal", "less_than_equal"):
        return f"{name} must be within [0, 100], got {value:g}"
    return f"{name} must be a number"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def validate_profile(system: str, data: Any) -> ProfileValidationResult:
    """Check *data* against the structural rules of *system*.

    Raises:
        UnsupportedSystemError: If *system* is not a known personality system.
    """
    if system not in ALL_SYSTEMS:
        raise UnsupportedSystemError(system)

    payload = _as_payload(data)
    if system == "BIG_FIVE":
        errors = big_five_problems(payload)
    elif system == "MBTI":
        errors = _mbti_errors(payload)
    elif system == "HEXACO":
        errors = _numeric_errors(payload, HEXACO_FIELDS, "HEXACO")
    elif system == "DARK_TRIAD":
        errors = _numeric_errors(payload, DARK_TRIAD_FIELDS, "Dark Triad")
    else:
        errors = _tci_errors(payload)

    warnings: list[str] = []
    if not errors and get_settings().outlier_warnings:
        warnings = outlier_warnings(system, payload)

    if errors:
        logger.debug("%s profile rejected: %s", system, errors)
    return ProfileValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def require_valid_profile(system: str, data: Any) -> BaseModel:
    """Validate *data* and parse it into the system's profile model.

    Raises:
        UnsupportedSystemError: Unknown *system*.
        MalformedProfileError: Structural or model validation failed.
    """
    result = validate_profile(system, data)
    if not result.is_valid:
        raise MalformedProfileError(system, result.errors)
    model = _PROFILE_MODELS[system]
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(_as_payload(data))
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise MalformedProfileError(system, errors) from e


def outlier_warnings(system: str, data: Any) -> list[str]:
    """Notes for values outside typical population ranges."""
    payload = _as_payload(data)
    if not isinstance(payload, Mapping) or system not in _TYPICAL_RANGES:
        return []
    low, high = _TYPICAL_RANGES[system]
    warnings: list[str] = []

    if system == "BIG_FIVE":
        warnings.extend(_range_notes(payload, BIG_FIVE_FIELDS, "Trait", low, high))
    elif system == "HEXACO":
        warnings.extend(_range_notes(payload, HEXACO_FIELDS, "Trait", low, high))
    elif system == "DARK_TRIAD":
        for name in DARK_TRIAD_FIELDS:
            value = payload.get(name)
            if _is_number(value) and high is not None and value > high:
                warnings.append(f"Trait '{name}' is unusually high ({value:g}). Typical max is {high:g}.")
    else:
        for section, label in (("temperament", "Temperament"), ("character", "Character")):
            block = payload.get(section)
            if isinstance(block, Mapping):
                warnings.extend(_range_notes(block, tuple(block.keys()), label, low, high))
    return warnings


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_payload(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and isfinite(value)


def _is_score(value: Any) -> bool:
    return _is_number(value) and 0 <= value <= 100


def _mbti_errors(payload: Any) -> list[str]:
    if not isinstance(payload, Mapping):
        return ["MBTI profile must be a mapping"]
    errors: list[str] = []
    type_code = payload.get("type")
    if not isinstance(type_code, str) or len(type_code) != 4:
        errors.append("Invalid MBTI type string.")
    if not isinstance(payload.get("dimensions"), Mapping):
        errors.append("Missing or invalid MBTI dimensions.")
    return errors


def _numeric_errors(payload: Any, fields: tuple[str, ...], label: str) -> list[str]:
    if not isinstance(payload, Mapping):
        return [f"{label} profile must be a mapping"]
    bad = [name for name in fields if not _is_score(payload.get(name))]
    if bad:
        return [f"Invalid {label} profile values: {', '.join(bad)}."]
    return []


def _tci_errors(payload: Any) -> list[str]:
    if not isinstance(payload, Mapping):
        return ["TCI profile must be a mapping"]
    if not isinstance(payload.get("temperament"), Mapping) or not isinstance(payload.get("character"), Mapping):
        return ["Missing temperament or character in TCI profile."]
    return []


def _range_notes(
    payload: Mapping[str, Any],
    fields: tuple[str, ...],
    label: str,
    low: float | None,
    high: float | None,
) -> list[str]:
    notes: list[str] = []
    for name in fields:
        value = payload.get(name)
        if not _is_number(value):
            continue
        if (low is not None and value < low) or (high is not None and value > high):
            notes.append(
                f"{label} '{name}' is an outlier ({value:g}). Typical range is {low:g}-{high:g}."
            )
    return notes
