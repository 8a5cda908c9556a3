"""Tests for persona_lab/engine/comparison.py."""

import pytest

from persona_lab.engine.comparison import compare, cosine_similarity
from persona_lab.errors import InvalidInputError
from persona_lab.personality_engine import PersonalityEngine
from persona_lab.personality_types import BigFiveTraits


def _traits(o=50, c=50, e=50, a=50, n=50) -> BigFiveTraits:
    return BigFiveTraits(openness=o, conscientiousness=c, extraversion=e, agreeableness=a, neuroticism=n)


class TestCosineSimilarity:
    def test_identical(self):
        """Same vector → similarity 1."""
        t = _traits(10, 20, 30, 40, 50)
        assert cosine_similarity(t, t) == pytest.approx(1.0)

    def test_orthogonal(self):
        """Disjoint traits → similarity 0."""
        assert cosine_similarity(_traits(100, 0, 0, 0, 0), _traits(0, 100, 0, 0, 0)) == pytest.approx(0.0)

    def test_zero_vector(self):
        """All-zero vector → 0 instead of division by zero."""
        assert cosine_similarity(_traits(0, 0, 0, 0, 0), _traits()) == 0.0

    def test_scale_invariant(self):
        """Only the direction of the vector matters."""
        assert cosine_similarity(_traits(10, 20, 30, 40, 50), _traits(20, 40, 60, 80, 100)) == pytest.approx(1.0)


class TestCompare:
    def test_similar_pair(self):
        """One pair → min, max and avg coincide; diagonal stays 0."""
        result = compare([_traits(), _traits(60, 55, 45, 50, 50)], threshold=0.7)
        assert result.conflicts == []
        assert result.pairwise_similarities[0][0] == 0
        assert result.pairwise_similarities[0][1] == pytest.approx(result.pairwise_similarities[1][0])
        assert result.min_similarity == result.max_similarity == result.avg_similarity

    def test_dissimilar_pair(self):
        """Min below threshold → one conflict entry."""
        result = compare([_traits(100, 0, 0, 0, 0), _traits(0, 100, 0, 0, 0)], threshold=0.7)
        assert result.min_similarity == pytest.approx(0.0)
        assert result.conflicts == ["Some profiles are highly dissimilar (cosine similarity < 0.7)."]

    def test_threshold_is_strict(self):
        """Similarity equal to the threshold is not a conflict."""
        result = compare([_traits(100, 0, 0, 0, 0), _traits(0, 100, 0, 0, 0)], threshold=0.0)
        assert result.conflicts == []

    def test_three_profiles(self):
        """Full symmetric matrix with summary stats."""
        profiles = [_traits(100, 0, 0, 0, 0), _traits(0, 100, 0, 0, 0), _traits(100, 100, 0, 0, 0)]
        result = compare(profiles, threshold=0.5)
        matrix = result.pairwise_similarities
        assert len(matrix) == 3
        for i in range(3):
            assert matrix[i][i] == 0
            for j in range(3):
                assert matrix[i][j] == pytest.approx(matrix[j][i])
        assert result.max_similarity == pytest.approx(2 ** -0.5)
        assert result.min_similarity == pytest.approx(0.0)
        assert result.avg_similarity == pytest.approx(2 * 2 ** -0.5 / 3)
        assert len(result.conflicts) == 1

    def test_mappings_accepted(self):
        raw = {"openness": 50, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50}
        result = compare([raw, dict(raw)], threshold=0.7)
        assert result.min_similarity == pytest.approx(1.0)

    def test_invalid_mapping_rejected(self):
        """Out-of-range mapping → InvalidInputError naming its index."""
        bad = {"openness": 120, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50}
        with pytest.raises(InvalidInputError, match="Profile 1"):
            compare([_traits(), bad])

    @pytest.mark.parametrize("field, value", [("extraversion", True), ("openness", "50")])
    def test_coercible_values_rejected(self, field, value):
        """Comparison applies the same Big Five rule as validate()."""
        raw = {"openness": 50, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50}
        raw[field] = value
        assert not PersonalityEngine.validate(raw)
        with pytest.raises(InvalidInputError, match="Profile 0"):
            compare([raw, _traits(60, 40, 50, 50, 50)])

    @pytest.mark.parametrize("profiles", [[], [_traits()]])
    def test_needs_two_profiles(self, profiles):
        """Fewer than two profiles → InvalidInputError."""
        with pytest.raises(InvalidInputError, match="At least two"):
            compare(profiles)

    def test_wire_names(self):
        dumped = compare([_traits(), _traits()], threshold=0.7).model_dump(by_alias=True)
        assert set(dumped) == {"pairwiseSimilarities", "minSimilarity", "maxSimilarity", "avgSimilarity", "conflicts"}
