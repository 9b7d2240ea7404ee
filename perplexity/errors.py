"""Exceptions raised by the Perplexity client.

Every failure surfaces from the call that produced it; the client never
retries or recovers on its own.
"""
from typing import Any, List, Optional


class PerplexityError(Exception):
    """Base class for all client errors."""
    pass


class SerializationError(PerplexityError):
    """The outgoing request could not be encoded as a valid payload."""
    pass


class TransportError(PerplexityError):
    """No response was obtained (connection, DNS, TLS or timeout failure)."""
    pass


class APIError(PerplexityError):
    """The API answered with a non-200 status.

    Attributes:
        status_code (int): HTTP status of the response
        body (str): Response body decoded as text
        content (bytes): Raw response body
    """

    def __init__(self, message: str, status_code: int, content: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.content = content
        self.body = content.decode("utf-8", errors="replace")


class ValidationError(PerplexityError):
    """The API rejected the request with a structured 422 body."""

    def __init__(self, detail: Optional[List[Any]] = None):
        self.detail = list(detail or [])
        super().__init__(f"validation error: {self._summary()}")

    def _summary(self) -> str:
        if not self.detail:
            return "no detail"
        parts = []
        for item in self.detail:
            loc = ".".join(str(token) for token in item.loc)
            parts.append(f"{loc}: {item.msg} ({item.type})" if loc else f"{item.msg} ({item.type})")
        return "; ".join(parts)


class DecodingError(PerplexityError):
    """A 200 response body did not match the chat completion shape."""
    pass


class ResponseError(PerplexityError):
    """A decoded response does not satisfy an accessor's precondition."""
    pass


class NotSingleChoiceError(ResponseError):
    def __init__(self, count: int):
        super().__init__(f"expected exactly 1 choice in response, got {count}")
        self.count = count


class IncompleteChoiceError(ResponseError):
    def __init__(self):
        super().__init__("choice is not complete")
