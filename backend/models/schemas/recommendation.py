"""Final output contract of the recommendation pipeline."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel

from models.schemas.plan import Plan, require_text

MAX_SKILLS_LISTED = 20
WHY_MIN_LENGTH = 10
WHY_MAX_LENGTH = 600


class Recommendation(BaseModel):
    """One recommended role with its explanation and learning plan."""
    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    role_id: Annotated[StrictStr, Field(min_length=1, max_length=50)]
    title: Annotated[StrictStr, Field(min_length=1, max_length=100), AfterValidator(require_text)]
    fit_score: int = Field(ge=0, le=100)
    why: Annotated[
        StrictStr,
        Field(min_length=WHY_MIN_LENGTH, max_length=WHY_MAX_LENGTH),
        AfterValidator(require_text),
    ]
    overlap_skills: list[StrictStr] = Field(default=[], max_length=MAX_SKILLS_LISTED)
    gap_skills: list[StrictStr] = Field(default=[], max_length=MAX_SKILLS_LISTED)
    plan: Plan


class RecommendationSet(BaseModel):
    """Up to three recommendations, ranked by fit score descending."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    recommendations: list[Recommendation] = Field(min_length=1, max_length=3)
    model_version: str = "v1.0"
