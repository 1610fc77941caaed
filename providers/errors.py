"""Exceptions raised by the chat-completion client.

Every failure of a completion call is terminal: nothing is retried and no
partial message is returned. Callers that want a retry policy catch
``CompletionError`` and decide for themselves.
"""
from typing import Optional


class CompletionError(Exception):
    """Base class for all chat-completion failures."""
    pass


class ConfigurationError(CompletionError, ValueError):
    """Raised when the client cannot be constructed from its configuration."""
    pass


class SerializationError(CompletionError):
    """Raised when the request document cannot be built or serialized."""
    pass


class InvalidURLError(CompletionError):
    """Raised when the completions URL cannot be built from the base URL."""
    pass


class TransportError(CompletionError):
    """Raised on connect, TLS, timeout or read failures."""
    pass


class ResponseDecodeError(CompletionError):
    """Raised when the response body is not a valid response document."""
    pass


class RemoteError(CompletionError):
    """Error reported by the remote service.

    ``str()`` of the exception is exactly the message the service returned
    (empty when the service sent none).
    """

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        self.message = message or ""
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ChoiceCountError(CompletionError):
    """Raised when a response does not carry exactly one choice."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"unexpected number of choices in response: {count}")
