class BookmarkValidationError(ValueError):
    """A manually entered bookmark is missing a field or has an unusable URL."""


class ImportRejectedError(ValueError):
    """The import payload is not a JSON array of bookmarks."""


class DraftCorruptedError(ValueError):
    """The cached draft could not be read back as form fields."""


class OperationInProgressError(RuntimeError):
    """An identical request is still being processed."""


class StoreUnavailableError(RuntimeError):
    """The configured store location does not exist."""


class SummaryError(RuntimeError):
    """The summarization service could not produce a summary."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class MissingCredentialError(SummaryError):
    """No API key is configured for the language model."""

    def __init__(self, message: str = "Missing OPENAI_API_KEY"):
        super().__init__(message, status_code=500)
