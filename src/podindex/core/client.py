"""HTTP transport for the PodcastIndex API.

Owns the base URL, authentication headers and timeout. Callers hand it a
`Request` (path plus ordered query parameters) and the pydantic model to
decode the JSON body into.
"""

import hashlib
import json
import logging
import time
from dataclasses import dataclass, field
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from podindex.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class QueryParameter:
    """A single query parameter. A value of None marks a flag (`?pretty`)."""

    name: str
    value: str | None = None

    def encode(self) -> str:
        key = quote(self.name, safe="")
        if self.value is None:
            return key
        return f"{key}={quote(self.value, safe='')}"


@dataclass(frozen=True)
class Request:
    """A GET request against the API: path and query parameters in send order."""

    path: str
    query: tuple[QueryParameter, ...] = field(default_factory=tuple)

    @property
    def query_string(self) -> str:
        return "&".join(param.encode() for param in self.query)

    @property
    def url(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{self.query_string}"


class APIClient:
    """
    Async PodcastIndex API client.

    A single instance can be shared by any number of concurrent callers; it
    holds no per-request state. Every `send` is exactly one HTTP attempt.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()

        if not self._settings.is_configured:
            logger.warning("PodcastIndex API credentials not configured")

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=self._settings.timeout,
        )

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def _get_headers(self) -> dict[str, str]:
        """Build auth headers. The signature is tied to the current second."""
        auth_date = str(int(time.time()))
        digest = hashlib.sha1(
            (self._settings.api_key + self._settings.api_secret + auth_date).encode()
        ).hexdigest()
        return {
            "User-Agent": self._settings.user_agent,
            "X-Auth-Key": self._settings.api_key,
            "X-Auth-Date": auth_date,
            "Authorization": digest,
        }

    async def send(self, request: Request, model: type[ModelT]) -> ModelT:
        """
        Perform a GET for `request` and decode the body into `model`.

        Raises:
            httpx.HTTPStatusError: non-2xx response
            httpx.RequestError: connection, timeout and other transport errors
            json.JSONDecodeError: body is not JSON
            pydantic.ValidationError: body does not match `model`
        """
        logger.debug(f"GET {request.url}")
        try:
            response = await self._client.get(request.url, headers=self._get_headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"PodcastIndex API HTTP error for {request.path}: {e}")
            raise
        except httpx.RequestError as e:
            logger.error(f"PodcastIndex API request error for {request.path}: {e}")
            raise

        try:
            return model.model_validate(response.json())
        except json.JSONDecodeError as e:
            logger.error(f"Non-JSON PodcastIndex response for {request.path}: {e}")
            raise
        except ValidationError as e:
            logger.error(f"Unexpected PodcastIndex response for {request.path}: {e}")
            raise
