"""Export of generated drafts as downloadable files.

Two formats: plain text and a minimal HTML document that Word opens as
a ``.doc``.
"""

import html
import re
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ExportFormat(str, Enum):
    TXT = "txt"
    DOC = "doc"


class ExportedFile(BaseModel):
    """A file ready to be written or offered for download."""

    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str
    data: bytes


_WORD_TEMPLATE = """
<html xmlns:o='urn:schemas-microsoft-com:office:office' xmlns:w='urn:schemas-microsoft-com:office:word' xmlns='http://www.w3.org/TR/REC-html40'>
<head><meta charset='utf-8'><title>{title}</title></head>
<body style="font-family: Arial, sans-serif; line-height: 1.5;">
  {body}
</body>
</html>
"""


def draft_filename(doc_type: str, fmt: ExportFormat, today: date | None = None) -> str:
    """Build ``Minuta_<tipo>_<dd-mm-aaaa>.<ext>``.

    Whitespace becomes ``_`` and path separators become ``-`` so the name
    is a single path component.
    """
    today = today or date.today()
    safe_type = re.sub(r"\s+", "_", doc_type).replace("/", "-")
    return f"Minuta_{safe_type}_{today.strftime('%d-%m-%Y')}.{fmt.value}"


def export_txt(content: str) -> bytes:
    return content.encode("utf-8")


def export_doc(content: str, title: str) -> bytes:
    """Wrap the draft in Word-compatible HTML, one ``<br>`` per line break."""
    body = html.escape(content, quote=False).replace("\n", "<br>")
    return _WORD_TEMPLATE.format(title=html.escape(title), body=body).encode("utf-8")


def export_draft(content: str, doc_type: str, fmt: ExportFormat, today: date | None = None) -> ExportedFile:
    """Produce the exported file for a draft."""
    if fmt is ExportFormat.DOC:
        data = export_doc(content, doc_type)
        mime_type = "application/msword"
    else:
        data = export_txt(content)
        mime_type = "text/plain"
    return ExportedFile(
        filename=draft_filename(doc_type, fmt, today),
        mime_type=mime_type,
        data=data,
    )
