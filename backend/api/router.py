import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_generative_backends, get_role_catalog
from config import settings
from models.requests import RecommendRequest
from models.responses import FairnessResponse, HealthResponse
from models.schemas.recommendation import RecommendationSet
from models.schemas.role import RoleDefinition
from services.gemini_client import GenerativeBackend
from services.prompt_builder import FAIRNESS_DISCLAIMER
from services.recommender import recommend

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(catalog: tuple[RoleDefinition, ...] = Depends(get_role_catalog)):
    return HealthResponse(
        status="ok",
        gemini_configured=bool(settings.gemini_api_key),
        roles=len(catalog),
    )


@router.get("/roles", response_model=list[RoleDefinition])
async def list_roles(catalog: tuple[RoleDefinition, ...] = Depends(get_role_catalog)):
    return list(catalog)


@router.get("/fairness", response_model=FairnessResponse)
async def fairness():
    return FairnessResponse(disclaimer=FAIRNESS_DISCLAIMER)


@router.post("/recommend", response_model=RecommendationSet)
async def recommend_roles(
    body: RecommendRequest,
    catalog: tuple[RoleDefinition, ...] = Depends(get_role_catalog),
    backends: list[GenerativeBackend] = Depends(get_generative_backends),
):
    logger.info(
        "Recommendation requested: %d skills, %d interests",
        len(body.profile.skills), len(body.profile.interests),
    )
    return await recommend(body.profile, catalog, backends)
