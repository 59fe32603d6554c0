import asyncio
from types import SimpleNamespace

import pytest

from services.errors import BackendError
from services.gemini_client import ChatMessage, GeminiBackend, clean_json_text, parse_json_object


class _FakeModels:
    def __init__(self, text=None, error=None, delay=0.0):
        self._text = text
        self._error = error
        self._delay = delay
        self.kwargs = None

    async def generate_content(self, **kwargs):
        self.kwargs = kwargs
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error:
            raise self._error
        return SimpleNamespace(text=self._text)


def _client(models: _FakeModels):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


MESSAGES = [
    ChatMessage(role="system", content="Return JSON."),
    ChatMessage(role="user", content="Plan please."),
]


class TestCleanJsonText:
    def test_strips_code_fences(self):
        assert clean_json_text('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_surrounding_prose(self):
        assert clean_json_text('Sure! {"a": {"b": 2}} Hope it helps') == '{"a": {"b": 2}}'

    def test_empty(self):
        assert clean_json_text("") == ""

    def test_parse_json_object(self):
        assert parse_json_object('```\n{"weeks": []}\n```') == {"weeks": []}

    def test_parse_json_object_invalid(self):
        with pytest.raises(ValueError, match="invalid JSON"):
            parse_json_object("no json here")

    def test_parse_json_object_too_deep(self):
        depth = 100_000
        with pytest.raises(ValueError, match="nested too deeply"):
            parse_json_object('{"weeks": ' + "[" * depth + "]" * depth + "}")


class TestGeminiBackend:
    @pytest.mark.asyncio
    async def test_returns_text_and_maps_system_prompt(self):
        models = _FakeModels(text='  {"ok": true}  ')
        backend = GeminiBackend(_client(models), "gemini-test", timeout_s=1.0)

        assert await backend.generate(MESSAGES) == '{"ok": true}'
        assert models.kwargs["model"] == "gemini-test"
        assert models.kwargs["config"].system_instruction == "Return JSON."
        assert [c.role for c in models.kwargs["contents"]] == ["user"]

    @pytest.mark.asyncio
    async def test_empty_text_raises(self):
        backend = GeminiBackend(_client(_FakeModels(text=None)), "gemini-test")
        with pytest.raises(BackendError, match="Empty response"):
            await backend.generate(MESSAGES)

    @pytest.mark.asyncio
    async def test_api_error_raises_backend_error(self):
        backend = GeminiBackend(_client(_FakeModels(error=RuntimeError("quota"))), "gemini-test")
        with pytest.raises(BackendError, match="quota"):
            await backend.generate(MESSAGES)

    @pytest.mark.asyncio
    async def test_timeout_raises_backend_error(self):
        models = _FakeModels(text="late", delay=1.0)
        backend = GeminiBackend(_client(models), "gemini-test", timeout_s=0.01)
        with pytest.raises(BackendError, match="timed out"):
            await backend.generate(MESSAGES)
