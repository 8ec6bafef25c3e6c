import json
import logging
from types import TracebackType
from typing import Any, Self
from urllib.parse import parse_qsl

import aiohttp

from authflow.core.exceptions import UnhandledTransportError
from authflow.core.settings import settings
from authflow.oauth.types import ApiResponse, HttpMethod, RequestDefinition

logger = logging.getLogger(__name__)


def decode_body(text: str, content_type: str) -> dict[str, Any]:
    """Decode a provider response body into a mapping.

    Token endpoints answer with JSON, but some still send
    ``application/x-www-form-urlencoded`` or ``text/plain`` bodies.
    """
    if not text.strip():
        return {}
    if "json" in content_type or text.lstrip().startswith(("{", "[")):
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data
    if "=" in text:
        return dict(parse_qsl(text, keep_blank_values=True))
    raise ValueError(f"undecodable {content_type or 'untyped'} body")


class OAuthHttpClient:
    """Outbound transport for one flow invocation. Every call is attempted once."""

    def __init__(self, provider: str, timeout: float | None = None):
        self._provider = provider
        self._timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.http_timeout_seconds
        )
        self._client: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> Self:
        self._client = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _get_client(self) -> aiohttp.ClientSession:
        if self._client is None or self._client.closed:
            self._client = aiohttp.ClientSession(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.closed:
            await self._client.close()
            self._client = None

    async def post_form(self, url: str, form: dict[str, str]) -> ApiResponse:
        return await self._send(
            "post",
            url,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": "application/json",
            },
            data=form,
        )

    async def execute(self, request: RequestDefinition) -> ApiResponse:
        headers = {"Accept": "application/json", **request.headers}
        kwargs: dict[str, Any] = {"headers": headers}
        if request.body is not None and request.method == HttpMethod.POST:
            kwargs["json"] = request.body
        return await self._send(request.method.value.lower(), request.url, **kwargs)

    async def _send(self, method: str, url: str, **kwargs: Any) -> ApiResponse:
        client = await self._get_client()
        logger.debug(f"{self._provider}: {method.upper()} {url}")
        try:
            async with client.request(method, url, **kwargs) as response:
                text = await response.text()
                content_type = response.headers.get("Content-Type", "")
                status = response.status
                headers = {k: v for k, v in response.headers.items()}
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"{self._provider}: request to {url} failed: {e!r}")
            raise UnhandledTransportError(self._provider, url, repr(e)) from e

        try:
            data = decode_body(text, content_type)
        except ValueError as e:
            logger.warning(
                f"{self._provider}: could not decode response from {url} (status {status})"
            )
            raise UnhandledTransportError(self._provider, url, str(e)) from e

        return ApiResponse(status_code=status, data=data, headers=headers)
