"""Learning plan contract: exactly four weekly entries, weeks 1-4."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

WEEK_NUMBERS = (1, 2, 3, 4)
MAX_TEXT_LENGTH = 200


def require_text(value: str) -> str:
    # Checked on the trimmed value; the stored value is left untouched
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


NonBlankStr = Annotated[StrictStr, AfterValidator(require_text)]
BoundedText = Annotated[StrictStr, Field(max_length=MAX_TEXT_LENGTH), AfterValidator(require_text)]


class WeekPlan(BaseModel):
    """One week of a learning plan."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    week: StrictInt = Field(ge=1, le=4)
    topics: list[NonBlankStr] = Field(min_length=1, max_length=10)
    practice: list[NonBlankStr] = Field(min_length=1, max_length=8)
    assessment: BoundedText
    project: BoundedText


class Plan(BaseModel):
    """A 4-week learning plan. Week numbers form exactly the set {1, 2, 3, 4}."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    weeks: list[WeekPlan] = Field(min_length=4, max_length=4)

    @field_validator("weeks")
    @classmethod
    def _check_week_numbers(cls, weeks: list[WeekPlan]) -> list[WeekPlan]:
        numbers = [w.week for w in weeks]
        if set(numbers) != set(WEEK_NUMBERS):
            raise ValueError(f"week numbers must be exactly 1, 2, 3, 4 (got {numbers})")
        return weeks
