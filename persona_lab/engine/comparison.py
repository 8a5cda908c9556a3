"""Big Five profile comparison by cosine similarity.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from persona_lab.config import get_settings
from persona_lab.errors import InvalidInputError
from persona_lab.personality_types import BigFiveTraits

logger = logging.getLogger(__name__)

DISSIMILAR_CONFLICT = "Some profiles are highly dissimilar (cosine similarity < {threshold:g})."


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class ProfileComparison(BaseModel):
    """Pairwise similarity matrix (diagonal left at 0) with summary stats."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pairwise_similarities: list[list[float]] = Field(..., alias="pairwiseSimilarities")
    min_similarity: float = Field(..., alias="minSimilarity")
    max_similarity: float = Field(..., alias="maxSimilarity")
    avg_similarity: float = Field(..., alias="avgSimilarity")
    conflicts: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def cosine_similarity(a: BigFiveTraits, b: BigFiveTraits) -> float:
    """Cosine of the angle between two OCEAN vectors; 0 if either is all-zero."""
    va = np.array(a.as_vector(), dtype=float)
    vb = np.array(b.as_vector(), dtype=float)
    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


def compare(
    profiles: Sequence[BigFiveTraits | Mapping[str, float]],
    threshold: float | None = None,
) -> ProfileComparison:
    """Compare two or more Big Five profiles.

    Args:
        profiles: Big Five models or mappings with the five OCEAN keys.
        threshold: Minimum acceptable similarity; defaults to the configured value.

    Returns:
        ProfileComparison with the full symmetric matrix and a conflict entry
        when the least similar pair falls below *threshold*.

    Raises:
        InvalidInputError: Fewer than two profiles, or a profile fails validation.
    """
    if len(profiles) < 2:
        raise InvalidInputError("At least two profiles are required for comparison.")
    limit = get_settings().similarity_threshold if threshold is None else threshold
    parsed = [_as_traits(p, index) for index, p in enumerate(profiles)]

    n = len(parsed)
    matrix = np.zeros((n, n), dtype=float)
    pair_scores: list[float] = []
    for i in range(n):
        for j in range(i + 1, n):
            sim = cosine_similarity(parsed[i], parsed[j])
            matrix[i, j] = matrix[j, i] = sim
            pair_scores.append(sim)

    min_sim = min(pair_scores)
    conflicts: list[str] = []
    if min_sim < limit:
        conflicts.append(DISSIMILAR_CONFLICT.format(threshold=limit))
        logger.info("Profile comparison below threshold: min=%.3f threshold=%s", min_sim, limit)

    return ProfileComparison(
        pairwise_similarities=matrix.tolist(),
        min_similarity=min_sim,
        max_similarity=max(pair_scores),
        avg_similarity=float(np.mean(pair_scores)),
        conflicts=conflicts,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_traits(profile: BigFiveTraits | Mapping[str, float], index: int) -> BigFiveTraits:
    if isinstance(profile, BigFiveTraits):
        return profile
    try:
        return BigFiveTraits.model_validate(dict(profile))
    except (ValidationError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Profile {index} is not a valid Big Five vector: {e}") from e
