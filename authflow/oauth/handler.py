import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import urlencode

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from authflow.core.exceptions import (
    OAuthError,
    ProfileNormalizationError,
    ProviderDeniedError,
    TokenExchangeError,
    UnhandledTransportError,
)
from authflow.core.settings import settings
from authflow.oauth.base import ProviderProfile
from authflow.oauth.client import OAuthHttpClient
from authflow.oauth.config import ConfigLayer, resolve_config, template_context
from authflow.oauth.registry import oauth_provider_registry
from authflow.oauth.types import (
    NormalizedUser,
    OAuthSuccess,
    OAuthTokens,
    ProviderConfig,
)

logger = logging.getLogger(__name__)

SuccessHandler = Callable[[Request, OAuthSuccess], Response | Awaitable[Response]]
ErrorHandler = Callable[[Request, OAuthError], Response | Awaitable[Response]]
ClientFactory = Callable[[str], OAuthHttpClient]


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


def canonical_redirect_uri(request: Request, config: ProviderConfig) -> str:
    if config.redirect_url:
        return config.redirect_url
    return str(request.url).split("?")[0]


def build_authorization_url(
    profile: ProviderProfile, config: ProviderConfig, redirect_uri: str
) -> str:
    params = {
        "client_id": config.client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "prompt": "consent",
    }
    if config.scope:
        params["scope"] = profile.scope_separator.join(config.scope)
    params.update(profile.authorization_params)
    separator = "&" if "?" in config.authorization_url else "?"
    return f"{config.authorization_url}{separator}{urlencode(params)}"


class ProviderFlowHandler:
    """Runs the authorization-code flow of one provider for one request at a time.

    Both legs hit the same route: without ``code`` the browser is redirected to
    the provider, with ``code`` the tokens and profile are fetched and handed
    to ``on_success``. Nothing is kept between the two legs.
    """

    def __init__(
        self,
        profile: ProviderProfile,
        on_success: SuccessHandler,
        on_error: ErrorHandler | None = None,
        config: ConfigLayer = None,
        runtime_config: ConfigLayer = None,
        client_factory: ClientFactory = OAuthHttpClient,
    ):
        self._profile = profile
        self._on_success = on_success
        self._on_error = on_error
        self._config = config
        self._runtime_config = (
            runtime_config
            if runtime_config is not None
            else settings.provider_config(profile.name)
        )
        self._client_factory = client_factory

    @property
    def provider(self) -> str:
        return self._profile.name

    async def __call__(self, request: Request) -> Response:
        return await self.handle(request)

    async def handle(self, request: Request) -> Response:
        try:
            return await self._run(request)
        except OAuthError as e:
            logger.warning(
                "%s login failed: code=%s status=%d message=%s",
                self.provider,
                e.code,
                e.status_code,
                e.message,
            )
            if self._on_error is None:
                raise
            return await _resolve(self._on_error(request, e))

    async def _run(self, request: Request) -> Response:
        config = resolve_config(self._profile, self._config, self._runtime_config)

        query = dict(request.query_params)
        if query.get("error"):
            raise ProviderDeniedError(self.provider, query)

        redirect_uri = canonical_redirect_uri(request, config)
        code = query.get("code")
        if not code:
            logger.debug(f"{self.provider}: redirecting to authorization URL")
            return RedirectResponse(
                url=build_authorization_url(self._profile, config, redirect_uri),
                status_code=302,
            )

        async with self._client_factory(self.provider) as client:
            tokens = await self._exchange_code(client, config, code, redirect_uri)
            raw_profile = await self._fetch_profile(client, config, tokens.access_token)

        user = self._normalize(raw_profile)
        logger.info(f"{self.provider}: login succeeded for user {user.id}")
        return await _resolve(
            self._on_success(request, OAuthSuccess(user=user, tokens=tokens))
        )

    async def _exchange_code(
        self,
        client: OAuthHttpClient,
        config: ProviderConfig,
        code: str,
        redirect_uri: str,
    ) -> OAuthTokens:
        logger.debug(f"{self.provider}: exchanging authorization code for tokens")
        response = await client.post_form(
            config.token_url,
            {
                "code": code,
                "redirect_uri": redirect_uri,
                "client_id": config.client_id,
                "client_secret": config.client_secret,
                "grant_type": "authorization_code",
            },
        )
        data = response.data
        if data.get("error") or not data.get("access_token"):
            raise TokenExchangeError(self.provider, data)
        try:
            return OAuthTokens.model_validate(data)
        except ValidationError as e:
            raise TokenExchangeError(self.provider, data) from e

    async def _fetch_profile(
        self, client: OAuthHttpClient, config: ProviderConfig, access_token: str
    ) -> dict[str, Any]:
        logger.debug(f"{self.provider}: fetching user profile")
        request = self._profile.profile_request.build(
            template_context(config), access_token
        )
        response = await client.execute(request)
        if not response.is_success:
            raise UnhandledTransportError(
                self.provider,
                request.url,
                f"profile endpoint answered {response.status_code}",
            )
        return response.data

    def _normalize(self, raw_profile: dict[str, Any]) -> NormalizedUser:
        try:
            user = self._profile.normalize(raw_profile)
        except (KeyError, IndexError, TypeError, AttributeError, ValidationError) as e:
            raise ProfileNormalizationError(self.provider, raw_profile, str(e)) from e
        user.raw_data = raw_profile
        return user


def oauth_handler(
    provider: str | ProviderProfile,
    *,
    on_success: SuccessHandler,
    on_error: ErrorHandler | None = None,
    config: ConfigLayer = None,
    runtime_config: ConfigLayer = None,
    client_factory: ClientFactory = OAuthHttpClient,
) -> Callable[[Request], Awaitable[Response]]:
    profile = (
        provider
        if isinstance(provider, ProviderProfile)
        else oauth_provider_registry.require(provider)
    )
    handler = ProviderFlowHandler(
        profile,
        on_success=on_success,
        on_error=on_error,
        config=config,
        runtime_config=runtime_config,
        client_factory=client_factory,
    )
    return handler.handle
