from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_oidc_user(raw: dict[str, Any]) -> NormalizedUser:
    """Map a standard OpenID Connect userinfo document."""
    return NormalizedUser(
        id=raw["sub"],
        name=raw.get("name"),
        email=raw.get("email"),
        avatar=raw.get("picture"),
        display_name=raw.get("nickname") or raw.get("preferred_username"),
    )


auth0_profile = ProviderProfile(
    name="auth0",
    authorization_url="https://{domain}/authorize",
    token_url="https://{domain}/oauth/token",
    profile_request=ProfileRequest(url="https://{domain}/userinfo"),
    normalize=normalize_oidc_user,
    scope=["openid", "profile"],
    email_scope=["email"],
)
