"""Role catalog source: loaded once from JSON, immutable afterwards."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from config import settings
from models.schemas.role import RoleDefinition

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(tuple[RoleDefinition, ...])


def load_catalog(path: Path | str) -> tuple[RoleDefinition, ...]:
    """Parse and validate a roles JSON file. Invalid files raise at load time."""
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    roles = _catalog_adapter.validate_python(data)

    ids = [r.role_id for r in roles]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate roleId in {path}: {', '.join(duplicates)}")

    logger.info("Loaded %d roles from %s", len(roles), path)
    return roles


@lru_cache(maxsize=1)
def get_catalog() -> tuple[RoleDefinition, ...]:
    """The process-wide catalog from settings.catalog_path."""
    return load_catalog(settings.catalog_path)
