"""Data models for the model gateway.

Hides the fixed user-facing failure texts and the per-request state record.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RequestState(str, Enum):
    """Lifecycle of a single gateway request (terminal after one round)."""

    IDLE = "idle"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Why a request failed."""

    AUTHENTICATION = "authentication"  # credential missing or rejected
    TRANSIENT = "transient"  # network or model error
    EMPTY = "empty"  # completion came back without text


class FailureMessages(BaseModel):
    """Fixed texts returned in place of a completion."""

    model_config = ConfigDict(frozen=True)

    authentication: str
    transient: str
    empty: str


CHAT_FAILURES = FailureMessages(
    authentication="Erro de Autenticação: Verifique se a API_KEY foi configurada corretamente no servidor.",
    transient="Erro ao consultar o assistente. Verifique sua conexão ou tente novamente mais tarde.",
    empty="Não foi possível gerar uma resposta no momento.",
)

DRAFT_FAILURES = FailureMessages(
    authentication="Erro de Autenticação: A chave API não é válida para este modelo.",
    transient="Erro ao gerar a minuta. Tente novamente.",
    empty="Não foi possível gerar a minuta.",
)


class GatewayRequest(BaseModel):
    """State of one prompt sent through the gateway."""

    prompt: str
    model: str
    state: RequestState = RequestState.IDLE
    text: str | None = Field(default=None, description="Completion or failure message once terminal")
    failure: FailureKind | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state in (RequestState.SUCCEEDED, RequestState.FAILED)

    def start(self) -> None:
        if self.state is not RequestState.IDLE:
            raise RuntimeError(f"Request already {self.state.value}")
        self.state = RequestState.SENDING

    def succeed(self, text: str) -> None:
        self.state = RequestState.SUCCEEDED
        self.text = text

    def fail(self, kind: FailureKind, message: str) -> None:
        self.state = RequestState.FAILED
        self.failure = kind
        self.text = message


class HealthStatus(BaseModel):
    """Result of the API connection check."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
