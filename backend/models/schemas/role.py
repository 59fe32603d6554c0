"""Role catalog entries and their per-request scores."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.schemas.plan import require_text


class RoleSkill(BaseModel):
    """A skill expected by a role, with its weight in the role vector."""
    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1, max_length=50), AfterValidator(require_text)]
    weight: float = Field(default=1.0, gt=0)


class RoleDefinition(BaseModel):
    """A static catalog role. Read-only for the lifetime of the process."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    role_id: Annotated[str, Field(min_length=1, max_length=50), AfterValidator(require_text)]
    title: Annotated[str, Field(min_length=1, max_length=100), AfterValidator(require_text)]
    description: str = ""
    skills: tuple[RoleSkill, ...] = ()


class FitMetrics(BaseModel):
    """Raw similarity signals behind a fit score (informational only)."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    cosine: float = Field(ge=0.0, le=1.0)
    overlap_ratio: float = Field(ge=0.0, le=1.0)


class ScoredRole(BaseModel):
    """A catalog role scored against one user profile."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    role: RoleDefinition
    score: int = Field(ge=0, le=100)
    overlap_skills: list[str] = []  # role skill names, catalog order
    gap_skills: list[str] = []
    metrics: FitMetrics
