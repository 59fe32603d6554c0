"""Fit scoring: 60% cosine similarity + 40% role-coverage overlap."""

import math
from collections.abc import Sequence
from typing import NamedTuple

from config import settings
from models.schemas.role import FitMetrics, RoleDefinition, ScoredRole
from services.similarity import build_role_vector, build_user_vector, cosine_scores, overlap_ratio
from services.skill_normalizer import canonical_skill

# Explanations cite this methodology, so the weights are not tunable per request
COSINE_WEIGHT = settings.cosine_weight
OVERLAP_WEIGHT = settings.overlap_weight


class SkillPartition(NamedTuple):
    overlap: list[str]
    gap: list[str]


def fit_score(cosine_value: float, overlap_value: float) -> int:
    """round(100 * (0.6*cosine + 0.4*overlap)), clamped to 0-100."""
    raw = COSINE_WEIGHT * (cosine_value or 0.0) + OVERLAP_WEIGHT * (overlap_value or 0.0)
    # Half-up rounding; Python's round() would send 84.5 to 84
    pct = math.floor(raw * 100 + 0.5)
    return min(100, max(0, pct))


def partition_skills(user_skills: list[str], role: RoleDefinition) -> SkillPartition:
    """Split role skills (catalog order) into ones the user has and gaps."""
    user_set = {canonical_skill(s) for s in user_skills}
    overlap: list[str] = []
    gap: list[str] = []
    seen: set[str] = set()
    for skill in role.skills:
        key = canonical_skill(skill.name)
        if key in seen:
            continue
        seen.add(key)
        if key in user_set:
            overlap.append(skill.name)
        else:
            gap.append(skill.name)
    return SkillPartition(overlap=overlap, gap=gap)


def score_roles(user_skills: list[str], roles: Sequence[RoleDefinition]) -> list[ScoredRole]:
    """Score every role against a user's normalized skills, in catalog order."""
    cosines = cosine_scores(
        build_user_vector(user_skills),
        [build_role_vector(role) for role in roles],
    )
    return [_scored(user_skills, role, cos) for role, cos in zip(roles, cosines)]


def score_role(user_skills: list[str], role: RoleDefinition) -> ScoredRole:
    """Score one catalog role against a user's normalized skills."""
    return score_roles(user_skills, [role])[0]


def _scored(user_skills: list[str], role: RoleDefinition, cos: float) -> ScoredRole:
    ratio = overlap_ratio(user_skills, role)
    partition = partition_skills(user_skills, role)
    return ScoredRole(
        role=role,
        score=fit_score(cos, ratio),
        overlap_skills=partition.overlap,
        gap_skills=partition.gap,
        metrics=FitMetrics(cosine=cos, overlap_ratio=ratio),
    )
