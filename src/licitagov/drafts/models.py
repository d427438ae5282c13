"""Data models for saved drafts."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field, TypeAdapter

# Same rendering as the pt-BR locale string: "19/10/2026, 14:03:22"
DRAFT_DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"
TITLE_OBJECT_LENGTH = 30


class SavedDraft(BaseModel):
    """A generated minuta kept in the draft history."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    type: str = Field(description="Document type label")
    content: str
    date: str = Field(description="Creation time, pt-BR formatted")

    @classmethod
    def create(cls, doc_type: str, objeto: str, content: str, now: datetime | None = None) -> "SavedDraft":
        now = now or datetime.now()
        return cls(
            title=f"{doc_type}: {objeto[:TITLE_OBJECT_LENGTH]}...",
            type=doc_type,
            content=content,
            date=now.strftime(DRAFT_DATE_FORMAT),
        )


DraftList = TypeAdapter(list[SavedDraft])
