"""Shared dependencies for API routes."""

from models.schemas.role import RoleDefinition
from services.catalog import get_catalog
from services.gemini_client import GenerativeBackend, build_backends


def get_role_catalog() -> tuple[RoleDefinition, ...]:
    return get_catalog()


def get_generative_backends() -> list[GenerativeBackend]:
    return build_backends()
