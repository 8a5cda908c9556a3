"""Error taxonomy for the personality conversion engine.

All errors are local, synchronous and non-retryable.
"""

from __future__ import annotations


class PersonaLabError(ValueError):
    """Base class for engine errors."""

    def __init__(self, message: str, *, system: str | None = None) -> None:
        super().__init__(message)
        self.system = system


class InvalidInputError(PersonaLabError):
    """Big Five vector is missing fields or holds out-of-range values."""

    def __init__(self, message: str, *, fields: list[str] | None = None) -> None:
        super().__init__(message, system="BIG_FIVE")
        self.fields = list(fields or [])


class UnsupportedSystemError(PersonaLabError):
    """Requested conversion target or validation system is not supported."""

    def __init__(self, system: str) -> None:
        super().__init__(f"Personality system '{system}' is not supported", system=system)


class MalformedProfileError(PersonaLabError):
    """A non-Big-Five profile failed structural validation."""

    def __init__(self, system: str, errors: list[str]) -> None:
        detail = "; ".join(errors) if errors else "unknown structural error"
        super().__init__(f"Malformed {system} profile: {detail}", system=system)
        self.errors = list(errors)
