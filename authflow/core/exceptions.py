from typing import Any


class AppException(Exception):
    def __init__(self, code: str, message: str, status_code: int = 400):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundException(AppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status_code=404)


class OAuthError(AppException):
    """Structured failure of one OAuth flow invocation.

    ``data`` carries the diagnostic payload handed to the error continuation:
    the raw callback query, the raw token response or the raw profile.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        provider: str,
        data: dict[str, Any] | None = None,
    ):
        super().__init__(code, message, status_code)
        self.provider = provider
        self.data = data or {}


class ConfigurationError(OAuthError):
    def __init__(self, provider: str, message: str):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=message,
            status_code=500,
            provider=provider,
        )


class ProviderDeniedError(OAuthError):
    def __init__(self, provider: str, query: dict[str, Any]):
        super().__init__(
            code="PROVIDER_DENIED",
            message=f"{provider} login failed: {query.get('error') or 'Unknown error'}",
            status_code=401,
            provider=provider,
            data=query,
        )


class TokenExchangeError(OAuthError):
    def __init__(self, provider: str, tokens: dict[str, Any]):
        super().__init__(
            code="OAUTH_TOKEN_EXCHANGE_FAILED",
            message=f"{provider} login failed: {tokens.get('error') or 'Unknown error'}",
            status_code=401,
            provider=provider,
            data=tokens,
        )


class ProfileNormalizationError(OAuthError):
    def __init__(self, provider: str, profile: dict[str, Any], reason: str):
        super().__init__(
            code="OAUTH_USER_INFO_FAILED",
            message=f"{provider} returned an unexpected profile payload: {reason}",
            status_code=502,
            provider=provider,
            data=profile,
        )


class UnhandledTransportError(AppException):
    """Network or decoding failure talking to a provider. Never classified further."""

    def __init__(self, provider: str, url: str, message: str, status_code: int = 502):
        super().__init__(
            code="OAUTH_TRANSPORT_ERROR",
            message=f"{provider} request to {url} failed: {message}",
            status_code=status_code,
        )
        self.provider = provider
        self.url = url


class ProviderNotFoundError(NotFoundException):
    def __init__(self, provider: str):
        super().__init__(
            code="PROVIDER_NOT_FOUND",
            message=f"OAuth provider '{provider}' not found or not supported",
        )
