"""Model gateway: the only path from the application to the hosted model."""

from .gateway import ModelGateway
from .models import (
    CHAT_FAILURES,
    DRAFT_FAILURES,
    FailureKind,
    FailureMessages,
    GatewayRequest,
    HealthStatus,
    RequestState,
)

__all__ = [
    "CHAT_FAILURES",
    "DRAFT_FAILURES",
    "FailureKind",
    "FailureMessages",
    "GatewayRequest",
    "HealthStatus",
    "ModelGateway",
    "RequestState",
]
