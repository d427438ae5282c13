"""Provider-independent error types.

Providers translate their SDK exceptions into these so that callers never
need to import a vendor SDK to tell an auth failure from a network failure.
"""


class LLMError(Exception):
    """Generation failed for a reason other than credentials."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LLMAuthenticationError(LLMError):
    """The API key is missing, invalid or lacks permission (401/403)."""
