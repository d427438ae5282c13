"""Domain exceptions raised by the session objects."""


class LicitaGovError(Exception):
    """Base class for application errors."""


class SessionBusyError(LicitaGovError):
    """A model request is already in flight for this session."""


class IncompleteFormError(LicitaGovError):
    """The document form is missing required fields."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Campos obrigatórios não preenchidos: {', '.join(missing)}")
        self.missing = missing


class DraftNotFoundError(LicitaGovError):
    """No saved draft has the requested id."""

    def __init__(self, draft_id: str):
        super().__init__(f"Rascunho não encontrado: {draft_id}")
        self.draft_id = draft_id


class ConfigurationError(LicitaGovError):
    """An environment setting has an unusable value."""
