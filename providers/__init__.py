"""Chat-completion provider client.

Exposes the OpenAI-compatible ``CompletionClient``, its data model and the
exceptions it raises.
"""
from providers.errors import (
    ChoiceCountError,
    CompletionError,
    ConfigurationError,
    InvalidURLError,
    RemoteError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)
from providers.openai_client import CompletionClient, build_messages, new_client
from providers.schema import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    FunctionCall,
    FunctionDefinition,
    Message,
    Schema,
)

__all__ = [
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChoiceCountError",
    "CompletionClient",
    "CompletionError",
    "ConfigurationError",
    "FunctionCall",
    "FunctionDefinition",
    "InvalidURLError",
    "Message",
    "RemoteError",
    "ResponseDecodeError",
    "Schema",
    "SerializationError",
    "TransportError",
    "build_messages",
    "new_client",
]
