"""
Example: Generating every personality system for one character

This example converts a Big Five vector into MBTI, HEXACO, Dark Triad and TCI
profiles, prints the consistency report, and shows the content advisory and
archetype recommendations.

Optional environment variables (a local .env file is loaded too):
   PERSONA_LAB_LOG_LEVEL=DEBUG
   PERSONA_LAB_SIMILARITY_THRESHOLD=0.7
"""

import json

from dotenv import load_dotenv

load_dotenv()

from persona_lab.config import configure_logging
from persona_lab.engine.dark_triad import evaluate_content
from persona_lab.engine.hexaco import suggest_antagonist_archetype
from persona_lab.personality_engine import PersonalityEngine
from persona_lab.personality_types import BigFiveTraits


villain = BigFiveTraits(
    openness=80,
    conscientiousness=80,
    extraversion=20,
    agreeableness=10,
    neuroticism=15,
)

engine = PersonalityEngine()

if __name__ == "__main__":
    configure_logging()
    profile = engine.generate_all(villain)

    print("=" * 50)
    print(f"MBTI: {profile.mbti.type} (confidence {profile.mbti.confidence:.0f}%)")
    print(f"Antagonist archetype: {suggest_antagonist_archetype(profile.hexaco)}")
    advisory = evaluate_content(profile.dark_triad)
    print(f"Content advisory: {advisory.warning_level} ({advisory.age_restriction}+)")
    print(f"Recommended systems for a villain: {engine.recommended_systems('villain')}")
    print("=" * 50)
    print(json.dumps(profile.model_dump(by_alias=True), indent=2))
