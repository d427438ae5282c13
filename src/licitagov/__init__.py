"""
LicitaGov: an AI assistant for Brazilian public procurement (Lei 14.133/2021).

Chat with a procurement specialist model, draft TR/ETP/edital minutas from a
structured form, and browse the reference material the assistant relies on.
"""

__version__ = "0.1.0"

from .chat import ChatSession, Message
from .drafting import DocumentForm, DocumentGenerator, DocumentType, build_document_prompt
from .gateway import ModelGateway
from .parsing import ThoughtResponse, split_thought

__all__ = [
    "ChatSession",
    "DocumentForm",
    "DocumentGenerator",
    "DocumentType",
    "Message",
    "ModelGateway",
    "ThoughtResponse",
    "build_document_prompt",
    "split_thought",
]
