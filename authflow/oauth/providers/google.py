from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_google_user(raw: dict[str, Any]) -> NormalizedUser:
    return NormalizedUser(
        id=raw["sub"],
        name=raw.get("name"),
        email=raw.get("email"),
        avatar=raw.get("picture"),
        display_name=raw.get("given_name"),
    )


google_profile = ProviderProfile(
    name="google",
    authorization_url="https://accounts.google.com/o/oauth2/v2/auth",
    token_url="https://oauth2.googleapis.com/token",
    profile_request=ProfileRequest(
        url="https://www.googleapis.com/oauth2/v3/userinfo",
    ),
    normalize=normalize_google_user,
    scope=["openid", "profile"],
    email_scope=["email"],
)
