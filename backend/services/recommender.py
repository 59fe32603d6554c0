"""Recommendation pipeline entry point.

    profile + catalog
      ├─ rank_top3()                   → top ScoredRoles (deterministic)
      └─ per role, concurrently:
           GenerationOrchestrator      → why + plan (LLM or fallback)
           validate_recommendation()   → Recommendation
                       ↓
         RecommendationSet (ranked by fitScore, descending)
"""

import asyncio
import logging
from collections.abc import Sequence

from config import settings
from models.schemas.plan import Plan
from models.schemas.profile import UserProfile
from models.schemas.recommendation import MAX_SKILLS_LISTED, Recommendation, RecommendationSet
from models.schemas.role import RoleDefinition, ScoredRole
from services.fallback_plan import build_plan, build_why
from services.gemini_client import GenerativeBackend
from services.generation import GenerationOrchestrator
from services.role_ranker import rank_top3
from services.schema_validator import validate_recommendation

logger = logging.getLogger(__name__)


def _candidate(scored: ScoredRole, why: str, plan: Plan) -> dict:
    return {
        "roleId": scored.role.role_id,
        "title": scored.role.title,
        "fitScore": scored.score,
        "why": why,
        "overlapSkills": scored.overlap_skills[:MAX_SKILLS_LISTED],
        "gapSkills": scored.gap_skills[:MAX_SKILLS_LISTED],
        "plan": plan,
    }


async def _recommend_role(
    orchestrator: GenerationOrchestrator,
    profile: UserProfile,
    scored: ScoredRole,
) -> Recommendation:
    content = await orchestrator.generate(profile, scored)
    result = validate_recommendation(_candidate(scored, content.why, content.plan))
    if result:
        if content.degraded:
            logger.info(
                "Recommendation %s degraded (plan=%s, why_generated=%s)",
                scored.role.role_id, content.plan_source.value, content.why_generated,
            )
        return result.value

    logger.warning(
        "Recommendation %s failed validation (%s), rebuilding from fallback",
        scored.role.role_id, result.reason,
    )
    fallback = _candidate(
        scored,
        build_why(scored.role.title, scored.overlap_skills, scored.gap_skills),
        build_plan(scored.role.title, scored.gap_skills, profile),
    )
    return Recommendation.model_validate(fallback)


async def recommend(
    profile: UserProfile,
    catalog: Sequence[RoleDefinition],
    backends: Sequence[GenerativeBackend] = (),
    model_version: str | None = None,
) -> RecommendationSet:
    """Recommend up to three roles with explanations and 4-week plans.

    Raises EmptyCatalogError for an empty catalog. Generation failures never
    escape: they degrade to the deterministic fallback per role.
    """
    ranked = rank_top3(profile, catalog)
    orchestrator = GenerationOrchestrator(backends)

    recommendations = await asyncio.gather(
        *(_recommend_role(orchestrator, profile, scored) for scored in ranked)
    )
    return RecommendationSet(
        recommendations=list(recommendations),
        model_version=model_version or settings.model_version,
    )
