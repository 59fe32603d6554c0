import os
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "services" / "data" / "roles.json"


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Generation settings: first model is tried first, strict model on retry
    gemini_model: str = "gemini-2.5-flash"
    gemini_strict_model: str = "gemini-2.5-pro"
    generation_timeout_s: float = 15.0
    generation_temperature: float = 0.3
    generation_max_output_tokens: int = 2048

    # Scoring policy: 60% cosine + 40% overlap ratio
    cosine_weight: float = 0.6
    overlap_weight: float = 0.4

    catalog_path: Path = DEFAULT_CATALOG_PATH
    model_version: str = "v1.0"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
