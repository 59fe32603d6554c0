"""Rank catalog roles against a profile and keep the best K."""

import logging
from collections.abc import Sequence

from models.schemas.profile import UserProfile
from models.schemas.role import RoleDefinition, ScoredRole
from services.errors import EmptyCatalogError
from services.fit_scorer import score_roles

logger = logging.getLogger(__name__)

TOP_K = 3


def rank_roles(
    profile: UserProfile,
    catalog: Sequence[RoleDefinition],
    k: int = TOP_K,
) -> list[ScoredRole]:
    """Score every role and return the top k by score, descending.

    sorted() is stable, so ties keep catalog order and the first-declared
    role wins.
    """
    if not catalog:
        raise EmptyCatalogError()

    scored = score_roles(profile.skills, catalog)
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)[:k]
    logger.info(
        "Ranked %d roles, top: %s",
        len(scored),
        ", ".join(f"{s.role.role_id}={s.score}" for s in ranked),
    )
    return ranked


def rank_top3(profile: UserProfile, catalog: Sequence[RoleDefinition]) -> list[ScoredRole]:
    return rank_roles(profile, catalog, k=TOP_K)
