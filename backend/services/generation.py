"""Generation orchestrator: LLM plan + explanation per role, with fallback.

Plan states per role:

    ATTEMPT_STANDARD --valid--> ACCEPTED
          | invalid (correction prompt) / backend error (plan prompt again)
          v
    ATTEMPT_STRICT   --valid--> ACCEPTED
          | invalid / backend error
          v
    FALLBACK ------------------> ACCEPTED   (deterministic, cannot fail)

The explanation gets one generative attempt and otherwise falls back to the
template sentence, independently of the plan's path.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from models.schemas.plan import Plan
from models.schemas.profile import UserProfile
from models.schemas.recommendation import WHY_MAX_LENGTH, WHY_MIN_LENGTH
from models.schemas.role import ScoredRole
from services.errors import BackendError
from services.fallback_plan import build_plan, build_why
from services.gemini_client import ChatMessage, GenerativeBackend, parse_json_object
from services.prompt_builder import build_explain_prompt, build_plan_prompt, build_retry_prompt
from services.schema_validator import validate_plan

logger = logging.getLogger(__name__)


class PlanSource(str, Enum):
    STANDARD = "standard"
    STRICT = "strict"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AttemptResult:
    plan: Plan | None
    raw: str = ""
    reason: str = ""


@dataclass(frozen=True)
class GeneratedContent:
    why: str
    plan: Plan
    plan_source: PlanSource
    why_generated: bool

    @property
    def degraded(self) -> bool:
        return self.plan_source is PlanSource.FALLBACK or not self.why_generated


class GenerationOrchestrator:
    """Runs the two-strike plan escalation and the explanation call for a role.

    backends is an ordered strategy list: the first backend serves the
    standard attempt, the second (if any) the strict retry. With no backends
    both outputs come straight from the deterministic fallback.
    """

    def __init__(self, backends: Sequence[GenerativeBackend] = ()) -> None:
        self._backends = list(backends)

    @property
    def standard_backend(self) -> GenerativeBackend | None:
        return self._backends[0] if self._backends else None

    @property
    def strict_backend(self) -> GenerativeBackend | None:
        if len(self._backends) > 1:
            return self._backends[1]
        return self.standard_backend

    async def _attempt(
        self, backend: GenerativeBackend, messages: list[ChatMessage]
    ) -> AttemptResult:
        try:
            raw = await backend.generate(messages)
        except BackendError as e:
            return AttemptResult(plan=None, reason=str(e))

        try:
            candidate = parse_json_object(raw)
        except ValueError as e:
            return AttemptResult(plan=None, raw=raw, reason=str(e))

        result = validate_plan(candidate)
        if not result:
            return AttemptResult(plan=None, raw=raw, reason=result.reason)
        return AttemptResult(plan=result.value, raw=raw)

    async def generate_plan(self, profile: UserProfile, scored: ScoredRole) -> tuple[Plan, PlanSource]:
        role_id = scored.role.role_id
        standard = self.standard_backend

        if standard is not None:
            first = await self._attempt(standard, build_plan_prompt(profile, scored))
            if first.plan is not None:
                return first.plan, PlanSource.STANDARD
            logger.warning("Plan for %s rejected on standard attempt: %s", role_id, first.reason)

            # Nothing to correct after a backend error, so resend the full plan request
            if first.raw:
                retry_messages = build_retry_prompt(first.raw, first.reason)
            else:
                retry_messages = build_plan_prompt(profile, scored)
            second = await self._attempt(self.strict_backend, retry_messages)
            if second.plan is not None:
                return second.plan, PlanSource.STRICT
            logger.warning("Plan for %s rejected on strict attempt: %s", role_id, second.reason)

        logger.warning("Using deterministic fallback plan for %s", role_id)
        plan = build_plan(scored.role.title, scored.gap_skills, profile)
        return plan, PlanSource.FALLBACK

    async def generate_why(self, profile: UserProfile, scored: ScoredRole) -> tuple[str, bool]:
        role = scored.role
        backend = self.standard_backend

        if backend is not None:
            try:
                text = (await backend.generate(build_explain_prompt(profile, scored))).strip()
            except BackendError as e:
                logger.warning("Explanation for %s failed: %s", role.role_id, e)
            else:
                if WHY_MIN_LENGTH <= len(text) <= WHY_MAX_LENGTH:
                    return text, True
                logger.warning(
                    "Explanation for %s rejected: %d chars (allowed %d-%d)",
                    role.role_id, len(text), WHY_MIN_LENGTH, WHY_MAX_LENGTH,
                )

        return build_why(role.title, scored.overlap_skills, scored.gap_skills), False

    async def generate(self, profile: UserProfile, scored: ScoredRole) -> GeneratedContent:
        """Explanation and plan for one role; they run concurrently and fail independently."""
        (why, why_generated), (plan, plan_source) = await asyncio.gather(
            self.generate_why(profile, scored),
            self.generate_plan(profile, scored),
        )
        return GeneratedContent(
            why=why,
            plan=plan,
            plan_source=plan_source,
            why_generated=why_generated,
        )
