"""User profile contract: the sanitized input to the pipeline."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from services.skill_normalizer import normalize_skills


class UserProfile(BaseModel):
    """A sanitized user profile.

    Unknown keys are dropped on input, so sensitive attributes such as
    gender, caste, religion or college tier never reach the pipeline.
    """
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(min_length=1, max_length=80)
    education: str = Field(min_length=1, max_length=40)
    skills: list[str] = Field(min_length=1, max_length=50)
    interests: list[str] = Field(min_length=1, max_length=20)
    weekly_time: int = Field(ge=1, le=40)
    budget: Literal["free", "low", "any"] = "free"
    language: Literal["en", "hi"] = "en"

    @field_validator("skills")
    @classmethod
    def _normalize_skills(cls, value: list[str]) -> list[str]:
        skills = normalize_skills(value)
        if not skills:
            raise ValueError("at least one non-empty skill is required")
        return skills

    @field_validator("interests")
    @classmethod
    def _clean_interests(cls, value: list[str]) -> list[str]:
        interests = [i.lower().strip() for i in value if i and i.strip()]
        if not interests:
            raise ValueError("at least one non-empty interest is required")
        return interests
