"""Shared test configuration, fixtures and fake generative backends."""

import json

import pytest

from models.schemas.profile import UserProfile
from models.schemas.role import RoleDefinition
from services.errors import BackendError


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the live Gemini API (needs GEMINI_API_KEY)"
    )


def make_plan_dict(**week_overrides) -> dict:
    """A schema-valid plan as a plain dict, optionally overriding week fields."""
    weeks = [
        {
            "week": n,
            "topics": [f"Topic {n}"],
            "practice": [f"Practice {n}"],
            "assessment": f"Quiz for week {n}",
            "project": "Capstone build" if n == 4 else f"Mini project {n}",
        }
        for n in (1, 2, 3, 4)
    ]
    for key, value in week_overrides.items():
        weeks[0][key] = value
    return {"weeks": weeks}


class FakeBackend:
    """Replays scripted replies; an Exception instance in the script is raised."""

    def __init__(self, replies, name: str = "fake"):
        self.name = name
        self._replies = list(replies)
        self.calls: list[list] = []

    async def generate(self, messages):
        self.calls.append(list(messages))
        if not self._replies:
            raise BackendError("no scripted reply left")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class RoutingBackend:
    """Answers explanation prompts and plan prompts from separate scripts."""

    def __init__(self, why=None, plans=None, name: str = "routing"):
        self.name = name
        self._why = why
        self._plans = list(plans or [])
        self.plan_calls = 0
        self.why_calls = 0

    async def generate(self, messages):
        if "career advisor" in messages[0].content:
            self.why_calls += 1
            if isinstance(self._why, Exception):
                raise self._why
            if self._why is None:
                raise BackendError("explanation unavailable")
            return self._why
        self.plan_calls += 1
        if not self._plans:
            raise BackendError("plan unavailable")
        reply = self._plans.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def valid_plan_json() -> str:
    return json.dumps(make_plan_dict())


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        name="Asha",
        education="B.Tech",
        skills=["JavaScript", "HTML", "CSS"],
        interests=["Web", "Design"],
        weekly_time=8,
        budget="free",
        language="en",
    )


def _role(role_id: str, title: str, *skills: str | tuple[str, float]) -> RoleDefinition:
    return RoleDefinition(
        role_id=role_id,
        title=title,
        description=f"{title} role",
        skills=[
            {"name": s, "weight": 1.0} if isinstance(s, str) else {"name": s[0], "weight": s[1]}
            for s in skills
        ],
    )


@pytest.fixture
def frontend_role() -> RoleDefinition:
    return _role("frontend_developer", "Frontend Developer",
                 "JavaScript", "HTML", "CSS", "React", "TypeScript")


@pytest.fixture
def catalog(frontend_role) -> tuple[RoleDefinition, ...]:
    return (
        _role("data_analyst", "Data Analyst", "SQL", "Excel", "Statistics", "Python"),
        frontend_role,
        _role("uiux_designer", "UI/UX Designer", "Figma", "CSS", "Prototyping"),
        _role("backend_developer", "Backend Developer", "Node.js", "SQL", "JavaScript", "REST APIs"),
        _role("devops_engineer", "DevOps Engineer", "Docker", "Kubernetes", "Linux"),
    )


@pytest.fixture
def role_factory():
    return _role
