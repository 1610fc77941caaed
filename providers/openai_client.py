"""Chat-completion client for OpenAI-compatible HTTP APIs.

A call builds the request document from a system prompt, a user prompt, the
conversation history and the advertised functions, posts it once and returns
the single choice's message. Every failure is raised as a ``CompletionError``;
nothing is retried.
"""
import uuid
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from config.schema import OpenAIConfig
from logging_manager import NullLogger
import provider_client
from providers.errors import (
    ChoiceCountError,
    ConfigurationError,
    InvalidURLError,
    RemoteError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)
from providers.schema import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    FunctionLike,
    Message,
    MessageLike,
)
from utils.provider_resolver import (
    completions_url,
    is_default_base,
    resolve_base_url,
    validate_base_url,
)


DEFAULT_MODEL = "gpt-3.5-turbo-0613"
SUCCESS_STATUS = 200


def build_messages(system: str, user: str, history: Iterable[MessageLike] = ()) -> List[Any]:
    """Return ``[system] + history + [user]`` with history left untouched."""
    return [
        Message(role="system", content=system),
        *(history or ()),
        Message(role="user", content=user),
    ]


class CompletionClient:
    """Client for one chat-completion endpoint.

    Holds only immutable settings, so a single instance can serve calls from
    several threads at once.

    Args:
        config: endpoint settings; unset values fall back to the defaults.
        log: Loguru-style logger used for per-call tracing. ``None`` disables
            logging.

    Raises:
        ConfigurationError: when the base URL is unusable, the key is
            malformed, or no key is given for the default OpenAI base.
    """

    def __init__(self, config: Optional[OpenAIConfig] = None, log=None):
        config = config or OpenAIConfig()

        self._base_url = resolve_base_url(config.base_url)
        self._api_key = self._normalize_key(config.api_key)
        self._model = config.model or DEFAULT_MODEL
        self._timeout = config.timeout

        try:
            validate_base_url(self._base_url)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        self._validate_credentials()

        if log is None:
            log = NullLogger()
        self._log = log.bind(client="OpenAI")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def model(self) -> str:
        return self._model

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def has_key(self) -> bool:
        return self._api_key is not None

    @staticmethod
    def _normalize_key(key: Optional[str]) -> Optional[str]:
        if key is None:
            return None
        key = key.strip()
        if not key:
            return None
        if any(ch.isspace() or not ch.isprintable() for ch in key):
            raise ConfigurationError("OPENAI_API_KEY must not contain whitespace or control characters")
        if not key.isascii():
            raise ConfigurationError("OPENAI_API_KEY must be ASCII")
        return key

    def _validate_credentials(self) -> None:
        # Self-hosted compatible endpoints may run without auth; OpenAI does not.
        if self._api_key is None and is_default_base(self._base_url):
            raise ConfigurationError("OPENAI_API_KEY must be supplied if using openai service")

    def _headers(self) -> Mapping[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def complete(self,
                 system: str,
                 user: str,
                 history: Iterable[MessageLike] = (),
                 functions: Iterable[FunctionLike] = ()) -> Message:
        """Request one completion and return the assistant's message.

        Args:
            system: content of the leading system message, may be empty.
            user: content of the final user message.
            history: prior messages placed between the two, unchanged.
            functions: function definitions advertised to the model. When
                empty the ``functions`` field is left out of the request.

        Returns:
            Message: the message of the only choice in the response.

        Raises:
            SerializationError: the request document could not be built.
            InvalidURLError: the completions URL could not be built.
            TransportError: the request failed on the network.
            ResponseDecodeError: the body is not a response document.
            RemoteError: non-200 status or an error reported by the service.
            ChoiceCountError: the response did not hold exactly one choice.
        """
        log = self._log.bind(request_id=str(uuid.uuid4()), model=self._model)
        log.debug("called completion", content=user)

        try:
            request = ChatCompletionRequest(
                model=self._model,
                messages=build_messages(system, user, history),
                functions=list(functions or ()),
            )
            body = request.to_json()
        except (ValidationError, PydanticSerializationError) as e:
            log.error("failed to marshal request", error=str(e))
            raise SerializationError(f"failed to serialize completion request: {e}") from e
        log.debug("request data", request=body)

        try:
            url = completions_url(self._base_url)
        except ValueError as e:
            log.error("failed to create url for chat completion", error=str(e))
            raise InvalidURLError("failed to create url for chat completion") from e

        try:
            status, content = provider_client.post_json(url, body.encode("utf-8"), self._headers(), timeout=self._timeout)
        except TransportError as e:
            log.error("failed to call OpenAI service", error=str(e))
            raise

        log.debug("completion response", status=status, content=content.decode("utf-8", errors="replace"))

        try:
            response = ChatCompletionResponse.from_json(content)
        except ValidationError as e:
            log.error("failed to unmarshal OpenAI response", status=status, error=str(e))
            raise ResponseDecodeError(f"failed to decode completion response: {e}") from e

        if status != SUCCESS_STATUS or response.error_message:
            err = RemoteError(response.error_message, status_code=status)
            log.error("response status is not success", status=status, error=str(err))
            raise err

        if len(response.choices) != 1:
            err = ChoiceCountError(len(response.choices))
            log.error("unexpected number of choices in response", choices=err.count)
            raise err

        message = response.choices[0].message
        log.debug("request completed successfully", result=message.model_dump(exclude_none=True))
        return message


def new_client(log=None, environ: Optional[Mapping[str, str]] = None) -> CompletionClient:
    """Build a client from OPENAI_API_BASE, OPENAI_API_KEY and OPENAI_API_MODEL.

    Raises:
        ConfigurationError: see ``CompletionClient``.
    """
    return CompletionClient(OpenAIConfig.from_env(environ), log=log)
