"""Google Gemini API wrapper: the generative text backend.

Any SDK failure, timeout or empty reply is raised as BackendError so the
generation orchestrator can treat it like a validation failure.
"""

import asyncio
import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from google import genai
from google.genai import types

from config import settings
from services.errors import BackendError

logger = logging.getLogger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class GenerativeBackend(Protocol):
    name: str

    async def generate(self, messages: Sequence[ChatMessage]) -> str: ...


_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


class GeminiBackend:
    """One Gemini model behind the GenerativeBackend protocol."""

    def __init__(
        self,
        client: genai.Client,
        model: str,
        timeout_s: float = 15.0,
        temperature: float = 0.3,
        max_output_tokens: int = 2048,
    ) -> None:
        self._client = client
        self._model = model
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self.name = model

    async def generate(self, messages: Sequence[ChatMessage]) -> str:
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        contents = [
            types.Content(
                role="model" if m.role == "assistant" else "user",
                parts=[types.Part(text=m.content)],
            )
            for m in messages
            if m.role != "system"
        ]
        config = types.GenerateContentConfig(
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
            system_instruction=system or None,
        )

        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._model,
                    contents=contents,
                    config=config,
                ),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError as e:
            raise BackendError(f"Gemini {self._model} timed out after {self._timeout_s}s") from e
        except Exception as e:
            raise BackendError(f"Gemini {self._model} API error: {e}") from e

        text = (response.text or "").strip()
        if not text:
            raise BackendError(f"Empty response from Gemini {self._model}")
        return text


def build_backends() -> list[GenerativeBackend]:
    """Standard model first, stricter model for the retry. Empty without a key."""
    client = get_client()
    if client is None:
        return []
    return [
        GeminiBackend(
            client,
            model,
            timeout_s=settings.generation_timeout_s,
            temperature=settings.generation_temperature,
            max_output_tokens=settings.generation_max_output_tokens,
        )
        for model in (settings.gemini_model, settings.gemini_strict_model)
    ]


_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def clean_json_text(raw: str) -> str:
    """Strip markdown fences and surrounding prose, keeping the outermost {...}."""
    if not raw:
        return ""
    text = _FENCE.sub("", raw).strip()
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return text
    return text[start:end + 1]


def parse_json_object(raw: str) -> Any:
    """Clean an LLM reply and parse it as JSON. Raises ValueError on failure."""
    cleaned = clean_json_text(raw)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e.msg} at position {e.pos}") from e
    except RecursionError as e:
        raise ValueError("invalid JSON: nested too deeply") from e
