"""Schema gate for generated plans and assembled recommendations.

Validation never repairs a candidate: a failure carries a readable reason
and the offending field so the caller can choose retry or fallback.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from models.schemas.plan import Plan
from models.schemas.recommendation import Recommendation


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    value: Any = None
    reason: str = ""
    field: str = ""

    def __bool__(self) -> bool:
        return self.valid


def _format_loc(loc: tuple) -> str:
    """('weeks', 2, 'topics') -> 'weeks[2].topics'."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "<root>"


def _validate(model: type[BaseModel], candidate: Any) -> ValidationResult:
    if isinstance(candidate, model):
        return ValidationResult(valid=True, value=candidate)
    if not isinstance(candidate, dict):
        return ValidationResult(
            valid=False,
            reason=f"expected a JSON object, got {type(candidate).__name__}",
            field="<root>",
        )

    try:
        value = model.model_validate(candidate)
    except ValidationError as e:
        first = e.errors()[0]
        field = _format_loc(tuple(first["loc"]))
        reason = f"{field}: {first['msg']}"
        if e.error_count() > 1:
            reason += f" (+{e.error_count() - 1} more)"
        return ValidationResult(valid=False, reason=reason, field=field)
    return ValidationResult(valid=True, value=value)


def validate_plan(candidate: Any) -> ValidationResult:
    """Check a candidate plan: 4 weeks, numbers {1,2,3,4}, bounded fields."""
    return _validate(Plan, candidate)


def validate_recommendation(candidate: Any) -> ValidationResult:
    """Check a full recommendation, including its nested plan."""
    return _validate(Recommendation, candidate)
