"""Document generator session.

Holds the form, the generated minuta and the loading flag for one user.
"""

import logging
from datetime import date

from ..drafts import DraftLibrary, SavedDraft
from ..errors import IncompleteFormError, SessionBusyError
from ..gateway import ModelGateway
from .export import ExportedFile, ExportFormat, export_draft
from .models import DocumentForm
from .serializer import build_document_prompt

logger = logging.getLogger(__name__)


class DocumentGenerator:
    """Form-to-minuta workflow.

    Hidden design decisions:
    - When a request may be submitted (required fields, one request at a time)
    - How a generated minuta is saved, reopened and exported
    """

    def __init__(
        self,
        gateway: ModelGateway,
        library: DraftLibrary,
        form: DocumentForm | None = None
    ):
        self._gateway = gateway
        self._library = library
        self.form = form or DocumentForm()
        self.content = ""
        self._is_generating = False

    @property
    def is_generating(self) -> bool:
        return self._is_generating

    @property
    def can_submit(self) -> bool:
        return self.form.is_complete and not self._is_generating

    @property
    def library(self) -> DraftLibrary:
        return self._library

    def build_prompt(self) -> str:
        return build_document_prompt(self.form)

    async def generate(self) -> str:
        """Ask the model for a minuta built from the current form.

        Raises:
            IncompleteFormError: If required fields are blank
            SessionBusyError: If a generation is already running
        """
        missing = self.form.missing_required_fields()
        if missing:
            raise IncompleteFormError(missing)
        if self._is_generating:
            raise SessionBusyError("A minuta is already being generated")

        self._is_generating = True
        try:
            prompt = self.build_prompt()
            logger.debug("Drafting %s (%d prompt chars)", self.form.doc_type.value, len(prompt))
            self.content = await self._gateway.generate_draft_text(prompt)
        finally:
            self._is_generating = False
        return self.content

    def edit(self, content: str) -> None:
        """Replace the generated text with the user's revision."""
        self.content = content

    async def save_draft(self) -> SavedDraft:
        if not self.content:
            raise ValueError("Nothing to save: generate or open a minuta first")
        return await self._library.save(self.form.doc_type.value, self.form.objeto, self.content)

    def open_draft(self, draft_id: str) -> SavedDraft:
        """Load a saved draft's text into the editor."""
        draft = self._library.get(draft_id)
        self.content = draft.content
        return draft

    def export(self, fmt: ExportFormat, today: date | None = None) -> ExportedFile:
        return export_draft(self.content, self.form.doc_type.value, fmt, today)
