"""Document drafting: form model, prompt serializer, generator session and export."""

from .export import ExportedFile, ExportFormat, draft_filename, export_doc, export_draft, export_txt
from .generator import DocumentGenerator
from .models import (
    REQUIRED_FIELDS,
    CriterioJulgamento,
    DocumentForm,
    DocumentType,
    Modalidade,
    ModoDisputa,
    UnidadeVigencia,
    ValorStatus,
)
from .serializer import PLACEHOLDERS, build_document_prompt

__all__ = [
    "PLACEHOLDERS",
    "REQUIRED_FIELDS",
    "CriterioJulgamento",
    "DocumentForm",
    "DocumentGenerator",
    "DocumentType",
    "ExportFormat",
    "ExportedFile",
    "Modalidade",
    "ModoDisputa",
    "UnidadeVigencia",
    "ValorStatus",
    "build_document_prompt",
    "draft_filename",
    "export_doc",
    "export_draft",
    "export_txt",
]
