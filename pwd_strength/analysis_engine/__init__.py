"""
Analysis engine package: password sections, scoring, and the evaluation pipeline.
"""

from pwd_strength.analysis_engine.features import CharacterProfile, extract_profile
from pwd_strength.analysis_engine.models import (
    PasswordEvaluation,
    PasswordScore,
    PasswordStrength,
    SectionOutcome,
    SectionStatus,
)
from pwd_strength.analysis_engine.pipeline import (
    EvaluationState,
    PasswordEvaluator,
    evaluate_password_strength,
    evaluate_password_strength_async,
)
from pwd_strength.analysis_engine.scorer import compute_score
from pwd_strength.analysis_engine.sections import (
    BlacklistSection,
    LengthSection,
    PatternSection,
    Section,
    VarietySection,
    build_sections,
)

__all__ = [
    "CharacterProfile",
    "extract_profile",
    "PasswordEvaluation",
    "PasswordScore",
    "PasswordStrength",
    "SectionOutcome",
    "SectionStatus",
    "EvaluationState",
    "PasswordEvaluator",
    "evaluate_password_strength",
    "evaluate_password_strength_async",
    "compute_score",
    "BlacklistSection",
    "LengthSection",
    "PatternSection",
    "Section",
    "VarietySection",
    "build_sections",
]
