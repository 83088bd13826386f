
"""Stylist error base class."""
from typing import Optional


class StylistError(Exception):

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised before any network call when the request input is unusable (e.g. a short API key)."""
class ValidationError(StylistError):
    def __init__(self, message: str):
        super().__init__(message, 400)

"""Raised when the completion service answers with a non-2xx status or cannot be reached.
        Attributes:
            upstream_status: HTTP status returned by the service (None on network failure)
            body: raw response body text (empty on network failure)
"""
class TransportError(StylistError):
    def __init__(self, message: str, upstream_status: Optional[int] = None, body: str = ""):
        super().__init__(message, 502)
        self.upstream_status = upstream_status
        self.body = body

"""Raised when the model reply cannot be turned into a SuggestionBatch."""
class ExtractionError(StylistError):
    def __init__(self, message: str = "Failed to parse suggestions from the AI response.", raw_text: str = ""):
        super().__init__(message, 422)
        self.raw_text = raw_text[:500]

"""Raised when the reply parses as JSON but does not match the SuggestionBatch shape."""
class SchemaMismatchError(ExtractionError):
    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message, raw_text)
