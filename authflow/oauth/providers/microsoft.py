from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_microsoft_user(raw: dict[str, Any]) -> NormalizedUser:
    return NormalizedUser(
        id=raw["id"],
        name=raw.get("displayName"),
        email=raw.get("mail"),
        display_name=raw.get("givenName"),
    )


microsoft_profile = ProviderProfile(
    name="microsoft",
    authorization_url="https://login.microsoftonline.com/{tenant}/oauth2/v2.0/authorize",
    token_url="https://login.microsoftonline.com/{tenant}/oauth2/v2.0/token",
    profile_request=ProfileRequest(url="https://graph.microsoft.com/v1.0/me"),
    normalize=normalize_microsoft_user,
    scope=["User.Read"],
    config_defaults={"tenant": "common"},
)
