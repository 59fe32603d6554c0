"""Sparse skill vectors and the similarity signals behind fit scores."""

import logging

import numpy as np
from sklearn.feature_extraction import DictVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from models.schemas.role import RoleDefinition
from services.skill_normalizer import canonical_skill

logger = logging.getLogger(__name__)

SkillVector = dict[str, float]


def build_user_vector(skills: list[str]) -> SkillVector:
    """Weight 1.0 for every canonical user skill."""
    vec: SkillVector = {}
    for skill in skills:
        key = canonical_skill(skill)
        if key:
            vec[key] = 1.0
    return vec


def build_role_vector(role: RoleDefinition) -> SkillVector:
    """Role-declared weight for every canonical role skill."""
    vec: SkillVector = {}
    for skill in role.skills:
        vec[canonical_skill(skill.name)] = skill.weight or 1.0
    return vec


def _magnitude(vec: SkillVector) -> float:
    return float(np.sqrt(sum(v * v for v in vec.values())))


def cosine_scores(user: SkillVector, roles: list[SkillVector]) -> list[float]:
    """Cosine of the user vector against every role vector, in [0, 1].

    One vocabulary is fitted over the user and all roles together. A role
    (or user) vector with zero magnitude scores 0.0.
    """
    if not roles:
        return []
    if _magnitude(user) == 0:
        return [0.0] * len(roles)

    matrix = DictVectorizer(sparse=True).fit_transform([user, *roles])
    scores = sklearn_cosine(matrix[0:1], matrix[1:])[0]
    return [
        float(np.clip(score, 0.0, 1.0)) if _magnitude(role) > 0 else 0.0
        for score, role in zip(scores, roles)
    ]


def cosine(a: SkillVector, b: SkillVector) -> float:
    """Cosine similarity over the union of keys, in [0, 1].

    Returns 0.0 when either vector has zero magnitude.
    """
    return cosine_scores(a, [b])[0]


def overlap_ratio(user_skills: list[str], role: RoleDefinition) -> float:
    """Share of the role's distinct skills the user already has.

    The denominator is the role's skill count, never the user's.
    """
    role_set = {canonical_skill(s.name) for s in role.skills}
    if not role_set:
        return 0.0
    user_set = {canonical_skill(s) for s in user_skills}
    return len(role_set & user_set) / len(role_set)
