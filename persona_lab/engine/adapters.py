"""Post-processing hooks applied to Big Five input before conversion.

Adapters are optional and pluggable; the conversion formulas never depend on
them. :class:`CulturalAdapter` carries two illustrative culture rules.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Protocol, runtime_checkable

from persona_lab.personality_types import BigFiveTraits, clamp_score

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileAdapter(Protocol):
    """Anything that maps a Big Five vector to an adjusted one."""

    def adapt(self, traits: BigFiveTraits) -> BigFiveTraits: ...


# culture code → {trait: multiplier}
CULTURE_MULTIPLIERS: dict[str, dict[str, float]] = {
    "JP": {"conscientiousness": 1.1},
    "US": {"extraversion": 1.1},
}


class CulturalAdapter:
    """Scale named traits for a culture code; unknown cultures pass through."""

    def __init__(self, culture: str):
        self.culture = culture.strip().upper()

    def adapt(self, traits: BigFiveTraits) -> BigFiveTraits:
        multipliers = CULTURE_MULTIPLIERS.get(self.culture)
        if not multipliers:
            return traits
        update = {
            name: clamp_score(round(getattr(traits, name) * factor))
            for name, factor in multipliers.items()
        }
        logger.debug("Cultural adaptation %s: %s", self.culture, update)
        return traits.model_copy(update=update)

    def __repr__(self) -> str:
        return f"CulturalAdapter({self.culture!r})"


def apply_adapters(traits: BigFiveTraits, adapters: Iterable[ProfileAdapter]) -> BigFiveTraits:
    """Run *adapters* in order, each receiving the previous output."""
    result = traits
    for adapter in adapters:
        result = adapter.adapt(result)
    return result
