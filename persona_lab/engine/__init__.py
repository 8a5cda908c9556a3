"""Per-system conversion and cross-system analysis engine.

Sub-modules:
- mbti            – Big Five → MBTI type and axis strengths
- hexaco          – Big Five → HEXACO, honesty-humility insights
- dark_triad      – Big Five / HEXACO → Dark Triad, content advisory
- tci             – temperament & character engines, growth simulation
- consistency     – cross-system coherence scoring
- comparison      – Big Five cosine-similarity comparison
- validation      – per-system structural validation
- trait_insights  – trait descriptions, behaviour and friction predictions
- adapters        – pluggable pre-conversion adjustments
"""
