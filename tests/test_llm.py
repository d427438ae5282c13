"""Unit tests for the LLM provider layer."""
from types import SimpleNamespace

import pytest
from google.genai import errors

from licitagov.llm import (
    ChatMessage,
    GeminiProvider,
    LLMAuthenticationError,
    LLMError,
    LLMProvider,
    create_llm_provider,
)


def fake_response(*texts: str, usage=None):
    parts = [SimpleNamespace(text=t) for t in texts]
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
        usage_metadata=usage,
        text="".join(texts),
    )


def stub_client(provider: GeminiProvider, result=None, error: Exception | None = None) -> list[dict]:
    """Replace the SDK client with one that records calls."""
    calls: list[dict] = []

    async def generate_content(**kwargs):
        calls.append(kwargs)
        if error is not None:
            raise error
        return result

    provider._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return calls


class TestLLMProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestProviderFactory:
    """Tests for create_llm_provider."""

    def test_creates_gemini(self):
        provider = create_llm_provider("Gemini", api_key="fake-key", model="gemini-x")

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-x"

    def test_requires_api_key(self):
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider("gemini")

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("openai", api_key="x")


class TestGeminiProvider:
    """Tests for GeminiProvider with a stubbed SDK client."""

    @pytest.fixture
    def provider(self):
        return GeminiProvider(api_key="fake-key", model="gemini-default")

    def test_convert_messages(self, provider):
        system, contents = provider._convert_messages([
            ChatMessage(role="system", content="Você é o LicitaGov AI"),
            ChatMessage(role="user", content="Pergunta"),
            ChatMessage(role="assistant", content="Resposta"),
        ])

        assert system == "Você é o LicitaGov AI"
        assert [c.role for c in contents] == ["user", "model"]
        assert contents[0].parts[0].text == "Pergunta"

    @pytest.mark.asyncio
    async def test_chat_completion(self, provider):
        usage = SimpleNamespace(prompt_token_count=10, candidates_token_count=3, total_token_count=13)
        calls = stub_client(provider, fake_response("Olá, ", "mundo", usage=usage))

        response = await provider.chat_completion(
            [ChatMessage(role="system", content="sys"), ChatMessage(role="user", content="oi")],
            temperature=0.3,
            max_tokens=5,
        )

        assert response.content == "Olá, mundo"
        assert response.model == "gemini-default"
        assert response.usage == {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13}
        config = calls[0]["config"]
        assert calls[0]["model"] == "gemini-default"
        assert config.system_instruction == "sys"
        assert config.temperature == 0.3
        assert config.max_output_tokens == 5

    @pytest.mark.asyncio
    async def test_model_override(self, provider):
        calls = stub_client(provider, fake_response("ok"))

        response = await provider.chat_completion([ChatMessage(role="user", content="oi")], model="gemini-pro")

        assert calls[0]["model"] == "gemini-pro"
        assert response.model == "gemini-pro"

    @pytest.mark.asyncio
    async def test_empty_candidates_give_empty_content(self, provider):
        stub_client(provider, SimpleNamespace(candidates=[], usage_metadata=None, text=None))

        response = await provider.chat_completion([ChatMessage(role="user", content="oi")])

        assert response.content == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [401, 403])
    async def test_auth_errors(self, provider, code):
        error = errors.ClientError(code, {"error": {"code": code, "message": "denied", "status": "PERMISSION_DENIED"}})
        stub_client(provider, error=error)

        with pytest.raises(LLMAuthenticationError) as exc_info:
            await provider.chat_completion([ChatMessage(role="user", content="oi")])

        assert exc_info.value.status_code == code

    @pytest.mark.asyncio
    async def test_invalid_key_reported_as_400(self, provider):
        error = errors.ClientError(400, {"error": {
            "code": 400,
            "message": "API key not valid. Please pass a valid API key.",
            "status": "INVALID_ARGUMENT",
        }})
        stub_client(provider, error=error)

        with pytest.raises(LLMAuthenticationError):
            await provider.chat_completion([ChatMessage(role="user", content="oi")])

    @pytest.mark.asyncio
    async def test_server_error(self, provider):
        error = errors.ServerError(503, {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}})
        stub_client(provider, error=error)

        with pytest.raises(LLMError) as exc_info:
            await provider.chat_completion([ChatMessage(role="user", content="oi")])

        assert not isinstance(exc_info.value, LLMAuthenticationError)
        assert exc_info.value.status_code == 503


class TestGeminiIntegration:
    """Integration tests against the live Gemini API."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_live_completion(self, api_keys):
        if not api_keys["gemini"]:
            pytest.skip("GEMINI_API_KEY not set")

        async with GeminiProvider(api_key=api_keys["gemini"]) as provider:
            response = await provider.chat_completion([ChatMessage(role="user", content="Ping")], max_tokens=5)

        assert isinstance(response.content, str)
