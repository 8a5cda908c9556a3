"""Tests for persona_lab/engine/validation.py."""

from unittest.mock import patch

from pydantic import ValidationError
import pytest

from persona_lab.config import EngineSettings
from persona_lab.engine import dark_triad, hexaco, mbti, tci
from persona_lab.engine.validation import (
    big_five_problems,
    invalid_big_five_fields,
    outlier_warnings,
    require_valid_profile,
    validate_profile,
)
from persona_lab.errors import MalformedProfileError, UnsupportedSystemError
from persona_lab.personality_types import BigFiveTraits, HEXACOProfile, MBTIProfile


def _raw(**overrides):
    values = {"openness": 50, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50}
    values.update(overrides)
    return values


NEUTRAL = BigFiveTraits(**_raw())


class TestBigFiveProblems:
    def test_valid(self):
        assert big_five_problems(_raw()) == []
        assert big_five_problems(NEUTRAL) == []

    def test_every_problem_reported(self):
        """All offending fields reported in OCEAN order."""
        data = _raw(openness=120, extraversion="high", agreeableness=True)
        del data["neuroticism"]
        assert big_five_problems(data) == [
            "openness must be within [0, 100], got 120",
            "extraversion must be a number",
            "agreeableness must be a number",
            "neuroticism is missing",
        ]
        assert invalid_big_five_fields(data) == ["openness", "extraversion", "agreeableness", "neuroticism"]

    def test_non_finite_rejected(self):
        assert big_five_problems(_raw(openness=float("nan"))) == ["openness must be a number"]

    @pytest.mark.parametrize(
        "data",
        [_raw(), _raw(openness="50"), _raw(extraversion=True), _raw(agreeableness=1e9), _raw(neuroticism=0)],
    )
    def test_agrees_with_model(self, data):
        """Problems are reported exactly when the model rejects the mapping."""
        try:
            BigFiveTraits.model_validate(data)
            rejected = False
        except ValidationError:
            rejected = True
        assert bool(big_five_problems(data)) == rejected

    def test_not_a_mapping(self):
        """Non-mapping input → every field invalid."""
        assert big_five_problems([50, 50, 50, 50, 50])
        assert invalid_big_five_fields("nope") == [
            "openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism"
        ]


class TestValidateProfile:
    def test_big_five(self):
        assert validate_profile("BIG_FIVE", _raw()).is_valid
        result = validate_profile("BIG_FIVE", _raw(neuroticism=-1))
        assert not result.is_valid
        assert result.errors == ["neuroticism must be within [0, 100], got -1"]

    def test_mbti(self):
        """Only the type string and dimensions block are checked."""
        assert validate_profile("MBTI", mbti.convert(NEUTRAL)).is_valid
        assert validate_profile("MBTI", {"type": "INTJ", "dimensions": {}}).is_valid
        result = validate_profile("MBTI", {"type": "INT"})
        assert result.errors == ["Invalid MBTI type string.", "Missing or invalid MBTI dimensions."]

    def test_hexaco(self):
        """Wire names are checked, out-of-range values listed."""
        payload = hexaco.convert(NEUTRAL).model_dump(by_alias=True)
        assert validate_profile("HEXACO", payload).is_valid
        payload["honestyHumility"] = 120
        result = validate_profile("HEXACO", payload)
        assert result.errors == ["Invalid HEXACO profile values: honestyHumility."]

    def test_dark_triad(self):
        """Missing and non-numeric sub-scores are both reported."""
        assert validate_profile("DARK_TRIAD", {"machiavellianism": 10, "narcissism": 20, "psychopathy": 30}).is_valid
        result = validate_profile("DARK_TRIAD", {"machiavellianism": 10, "narcissism": "x"})
        assert result.errors == ["Invalid Dark Triad profile values: narcissism, psychopathy."]

    def test_tci(self):
        """Both sections must be present."""
        assert validate_profile("TCI", tci.convert(NEUTRAL)).is_valid
        result = validate_profile("TCI", {"temperament": {}})
        assert result.errors == ["Missing temperament or character in TCI profile."]

    @pytest.mark.parametrize("system", ["ENNEAGRAM", "mbti", ""])
    def test_unknown_system(self, system):
        """System names are exact."""
        with pytest.raises(UnsupportedSystemError) as exc_info:
            validate_profile(system, {})
        assert exc_info.value.system == system


class TestOutliers:
    def test_big_five_outlier(self):
        """Valid but extreme → warning only."""
        result = validate_profile("BIG_FIVE", _raw(openness=2))
        assert result.is_valid
        assert result.warnings == ["Trait 'openness' is an outlier (2). Typical range is 5-95."]

    def test_dark_triad_high(self):
        warnings = outlier_warnings("DARK_TRIAD", {"machiavellianism": 85, "narcissism": 20, "psychopathy": 30})
        assert warnings == ["Trait 'machiavellianism' is unusually high (85). Typical max is 80."]

    def test_tci_outlier(self):
        profile = tci.convert(BigFiveTraits(**_raw(conscientiousness=0)))
        warnings = outlier_warnings("TCI", profile)
        assert any("disorderliness" in w for w in warnings)

    def test_invalid_profiles_get_no_warnings(self):
        """Outliers are reported only for valid data."""
        result = validate_profile("BIG_FIVE", _raw(openness=2, neuroticism=200))
        assert result.warnings == []

    def test_warnings_can_be_disabled(self):
        """PERSONA_LAB_OUTLIER_WARNINGS=false suppresses notes."""
        with patch(
            "persona_lab.engine.validation.get_settings",
            return_value=EngineSettings(outlier_warnings=False),
        ):
            result = validate_profile("BIG_FIVE", _raw(openness=2))
        assert result.is_valid
        assert result.warnings == []


class TestRequireValidProfile:
    def test_parses_payload(self):
        payload = hexaco.convert(NEUTRAL).model_dump(by_alias=True)
        assert isinstance(require_valid_profile("HEXACO", payload), HEXACOProfile)

    def test_returns_model_unchanged(self):
        """Model input comes back as-is."""
        profile = mbti.convert(NEUTRAL)
        assert require_valid_profile("MBTI", profile) is profile

    def test_structural_failure(self):
        with pytest.raises(MalformedProfileError) as exc_info:
            require_valid_profile("MBTI", {"type": "INT"})
        assert exc_info.value.system == "MBTI"
        assert "Invalid MBTI type string." in exc_info.value.errors

    def test_model_failure(self):
        """Structurally fine but unparseable → MalformedProfileError."""
        with pytest.raises(MalformedProfileError, match="MBTI"):
            require_valid_profile("MBTI", {"type": "INTJ", "dimensions": {}})

    def test_dark_triad_round_trip(self):
        profile = dark_triad.convert(NEUTRAL)
        parsed = require_valid_profile("DARK_TRIAD", profile.model_dump(by_alias=True))
        assert parsed == profile

    def test_mbti_payload(self):
        parsed = require_valid_profile("MBTI", mbti.convert(NEUTRAL).model_dump(by_alias=True))
        assert isinstance(parsed, MBTIProfile)
        assert parsed.type == "ISTP"
