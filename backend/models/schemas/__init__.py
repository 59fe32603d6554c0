"""Pydantic contracts shared by the recommendation pipeline stages."""

from models.schemas.plan import Plan, WeekPlan
from models.schemas.profile import UserProfile
from models.schemas.recommendation import Recommendation, RecommendationSet
from models.schemas.role import FitMetrics, RoleDefinition, RoleSkill, ScoredRole

__all__ = [
    "UserProfile",
    "RoleSkill",
    "RoleDefinition",
    "FitMetrics",
    "ScoredRole",
    "WeekPlan",
    "Plan",
    "Recommendation",
    "RecommendationSet",
]
