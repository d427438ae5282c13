"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from licitagov.config import Settings
from licitagov.drafting import DocumentForm, DocumentType
from licitagov.drafts import DraftLibrary, create_key_value_store
from licitagov.gateway import ModelGateway
from licitagov.llm import ChatMessage, LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """LLM provider returning a canned reply or raising a canned error."""

    def __init__(self, content: str = "", error: Exception | None = None, model: str = "fake-model"):
        self.content = content
        self.error = error
        self._model = model
        self.calls: list[dict[str, Any]] = []
        self.closed = False
        self.release: asyncio.Event | None = None

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=model or self._model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"gemini": os.getenv("GEMINI_API_KEY")}


@pytest.fixture
def settings():
    return Settings(
        api_key="fake-key",
        chat_model="chat-model",
        draft_model="draft-model",
        chat_temperature=0.3,
        store_backend="memory",
    )


@pytest.fixture
def fake_provider():
    return FakeProvider(content="|||THOUGHT|||Art. 75|||RESPONSE|||Resposta final")


@pytest.fixture
def gateway(fake_provider, settings):
    return ModelGateway(fake_provider, settings, system_instruction="INSTRUÇÃO DE SISTEMA")


@pytest.fixture
def memory_store():
    return create_key_value_store("memory")


@pytest.fixture
def library(memory_store):
    return DraftLibrary(memory_store)


@pytest.fixture
def filled_form():
    """A form with every text field populated."""
    return DocumentForm(
        doc_type=DocumentType.TR,
        cnpj="00.394.544/0001-85",
        orgao="Ministério da Saúde",
        setor="Departamento de Compras",
        objeto="Aquisição de 50 caixas de lápis",
        justificativa="Reposição do estoque anual",
        processo="23000.000123/2024-01",
        numero_edital="01/2024",
        codigo_contratante="250005",
        cep="70058-900",
        endereco="Esplanada dos Ministérios, Bloco G",
        numero="100",
        complemento="Sala 3",
        bairro="Zona Cívico-Administrativa",
        cidade="Brasília",
        uf="DF",
        valor_estimado="12.500,00",
        vigencia="12",
        prazo_entrega="30",
    )
