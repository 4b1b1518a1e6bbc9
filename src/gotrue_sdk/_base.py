"""Base HTTP client for GoTrue API operations.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, NamedTuple, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig
from .exceptions import (
    ConfigurationError,
    ConstructionError,
    DecodeError,
    NetworkError,
    TimeoutError as AuthTimeoutError,
    TransportError,
    ValidationError,
    translate_error,
    unreadable_body_error,
)

logger = logging.getLogger(__name__)

USER_AGENT = "GoTrue-Python-SDK/1.0.0"

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: dict[str, Any] | None = None
    params: dict[str, Any] | None = None
    timeout: float | None = None
    expect_redirect: bool = False


def require(value: Any, field: str) -> None:
    """Reject a request before sending it when ``field`` is empty.

    Raises:
        ValidationError: If ``value`` is None or empty.

    """
    if not value:
        msg = f"{field} is required"
        raise ValidationError(msg, field)


def json_body(request: BaseModel) -> dict[str, Any]:
    """Serialize a request model, leaving out unset and path/query fields."""
    return request.model_dump(mode="json", exclude_none=True)


def decode_model(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a successful response body into ``model``.

    Raises:
        DecodeError: If the body is not valid JSON for ``model``.

    """
    try:
        return model.model_validate_json(response.content)
    except PydanticValidationError as e:
        msg = f"cannot decode {model.__name__} from response body"
        raise DecodeError(msg, response.status_code, e.errors()) from e


def decode_list(response: httpx.Response, model: type[ModelT]) -> list[ModelT]:
    """Decode a successful response body holding a JSON array of ``model``.

    Raises:
        DecodeError: If the body is not a JSON array of ``model``.

    """
    try:
        return TypeAdapter(list[model]).validate_json(response.content)  # type: ignore[valid-type]
    except PydanticValidationError as e:
        msg = f"cannot decode list of {model.__name__} from response body"
        raise DecodeError(msg, response.status_code, e.errors()) from e


class BaseClient:
    """Request pipeline shared by every endpoint.

    Builds the request from the immutable :class:`ClientConfig`, sends it once,
    and resolves the response into a decoded value or an
    :class:`~gotrue_sdk.exceptions.APIError`.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize base HTTP client.

        Args:
            config: Connection settings; never modified by the client

        """
        self.config = config

    def _transport(self) -> httpx.AsyncClient:
        if self.config.http_client is None:
            msg = "no HTTP client configured"
            raise ConfigurationError(msg)
        return self.config.http_client

    def build_request(
        self,
        method: str,
        endpoint: str,
        *,
        config: RequestConfig | None = None,
    ) -> httpx.Request:
        """Build an outgoing request for ``endpoint``.

        The ``apikey`` header is always set. The bearer token is attached only
        when one is configured.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path, appended to the base URL
            config: Request configuration

        Returns:
            The request, ready to send.

        Raises:
            ConstructionError: If base URL and path do not form an absolute
                http(s) URL.

        """
        if config is None:
            config = RequestConfig()

        raw_url = f"{self.config.base_url}{endpoint}"
        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            msg = f"invalid request URL {raw_url!r}: {e}"
            raise ConstructionError(msg, raw_url) from e
        if url.scheme not in ("http", "https") or not url.host:
            msg = f"invalid request URL {raw_url!r}: expected an absolute http(s) URL"
            raise ConstructionError(msg, raw_url)

        headers = {
            "apikey": self.config.api_key,
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"

        return self._transport().build_request(
            method,
            url,
            params=config.params,
            json=config.json_data,
            headers=headers,
            timeout=(
                config.timeout
                if config.timeout is not None
                else httpx.USE_CLIENT_DEFAULT
            ),
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` once without following redirects.

        The returned response is unread; :meth:`resolve` reads and closes it.

        Raises:
            AuthTimeoutError: If the request times out
            NetworkError: For any other transport failure

        """
        logger.debug("%s %s", request.method, request.url.path)
        try:
            return await self._transport().send(
                request, stream=True, follow_redirects=False
            )
        except httpx.TimeoutException as e:
            raise AuthTimeoutError(f"Request timeout: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

    async def resolve(
        self,
        response: httpx.Response,
        parser: Callable[[httpx.Response], T],
        *,
        expect_redirect: bool = False,
    ) -> T:
        """Turn a response into the endpoint's result, closing it afterwards.

        Args:
            response: Response returned by :meth:`send`
            parser: Decoder applied to a successful, fully read response
            expect_redirect: Treat a 3xx response with a Location header as
                success

        Returns:
            Whatever ``parser`` returns.

        Raises:
            APIError: For any non-success status
            DecodeError: If ``parser`` rejects the body

        """
        try:
            status = response.status_code
            logger.debug(
                "%s %s -> %d",
                response.request.method,
                response.request.url.path,
                status,
            )

            if 200 <= status < 300 or (expect_redirect and response.is_redirect):
                await self._read_body(response)
                return parser(response)

            try:
                body = await response.aread()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise unreadable_body_error(status, e) from e
            raise translate_error(status, body)
        finally:
            await response.aclose()

    @staticmethod
    async def _read_body(response: httpx.Response) -> bytes:
        try:
            return await response.aread()
        except httpx.TimeoutException as e:
            raise AuthTimeoutError(f"Request timeout: {e}") from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(f"failed to read response body: {e}") from e

    async def make_parsed_request(
        self,
        method: str,
        endpoint: str,
        parser: Callable[[httpx.Response], T],
        *,
        config: RequestConfig | None = None,
    ) -> T:
        """Make an HTTP request and hand the read response to ``parser``.

        For endpoints whose result comes from headers or a redirect target as
        well as the body. Non-success statuses still raise.
        """
        if config is None:
            config = RequestConfig()

        request = self.build_request(method, endpoint, config=config)
        response = await self.send(request)
        return await self.resolve(
            response, parser, expect_redirect=config.expect_redirect
        )

    async def make_request(
        self,
        method: str,
        endpoint: str,
        response_model: type[ModelT],
        *,
        config: RequestConfig | None = None,
    ) -> ModelT:
        """Make an HTTP request and decode the JSON body into ``response_model``.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            response_model: Pydantic model of the success body
            config: Request configuration

        Returns:
            The decoded response.

        """
        return await self.make_parsed_request(
            method,
            endpoint,
            parser=lambda r: decode_model(r, response_model),
            config=config,
        )

    async def make_list_request(
        self,
        method: str,
        endpoint: str,
        item_model: type[ModelT],
        *,
        config: RequestConfig | None = None,
    ) -> list[ModelT]:
        """Make an HTTP request whose success body is a JSON array."""
        return await self.make_parsed_request(
            method,
            endpoint,
            parser=lambda r: decode_list(r, item_model),
            config=config,
        )

    async def make_empty_request(
        self,
        method: str,
        endpoint: str,
        *,
        config: RequestConfig | None = None,
    ) -> None:
        """Make an HTTP request whose success body is ignored."""
        await self.make_parsed_request(
            method, endpoint, parser=lambda r: None, config=config
        )

    async def make_bytes_request(
        self,
        method: str,
        endpoint: str,
        *,
        config: RequestConfig | None = None,
    ) -> bytes:
        """Make an HTTP request expecting a raw byte response."""
        return await self.make_parsed_request(
            method, endpoint, parser=lambda r: r.content, config=config
        )


def segment(value: str) -> str:
    """Escape ``value`` for use as a single URL path segment."""
    return quote(value, safe="")
