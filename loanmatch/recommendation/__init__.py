"""Recommendation engine: rule-based matching of quiz answers to loan products."""

from loanmatch.recommendation.engine import generate_recommendations
from loanmatch.recommendation.scoring import calculate_match_score, estimate_interest_rate
from loanmatch.schemas.recommendation import (
    NormalizedProfile,
    ProfileAnswers,
    Recommendation,
    ScoreBreakdown,
)

__all__ = [
    "generate_recommendations",
    "calculate_match_score",
    "estimate_interest_rate",
    "ProfileAnswers",
    "NormalizedProfile",
    "Recommendation",
    "ScoreBreakdown",
]
