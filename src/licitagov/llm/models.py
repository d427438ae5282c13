from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One message of a model request."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class LLMResponse(BaseModel):
    """Completion returned by a provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text, empty when the model returned nothing")
    model: str = Field(description="Model that answered")
    usage: dict[str, int] | None = None


def single_turn(prompt: str, system_instruction: str | None = None) -> list[ChatMessage]:
    """Messages for a stateless request: optional system instruction plus one user turn."""
    messages = []
    if system_instruction is not None:
        messages.append(ChatMessage(role="system", content=system_instruction))
    messages.append(ChatMessage(role="user", content=prompt))
    return messages
