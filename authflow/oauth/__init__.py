from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.client import OAuthHttpClient
from authflow.oauth.config import resolve_config
from authflow.oauth.handler import ProviderFlowHandler, oauth_handler
from authflow.oauth.registry import oauth_provider_registry
from authflow.oauth.types import (
    NormalizedUser,
    OAuthSuccess,
    OAuthTokens,
    ProviderConfig,
)

__all__ = [
    "ProfileRequest",
    "ProviderProfile",
    "ProviderConfig",
    "ProviderFlowHandler",
    "NormalizedUser",
    "OAuthHttpClient",
    "OAuthSuccess",
    "OAuthTokens",
    "oauth_handler",
    "oauth_provider_registry",
    "resolve_config",
]
