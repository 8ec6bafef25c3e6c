from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_github_user(raw: dict[str, Any]) -> NormalizedUser:
    return NormalizedUser(
        id=raw["id"],
        name=raw.get("name"),
        email=raw.get("email"),
        avatar=raw.get("avatar_url"),
        display_name=raw.get("login"),
    )


github_profile = ProviderProfile(
    name="github",
    authorization_url="https://github.com/login/oauth/authorize",
    token_url="https://github.com/login/oauth/access_token",
    profile_request=ProfileRequest(
        url="https://api.github.com/user",
        headers={"User-Agent": "Github-OAuth-{client_id}"},
    ),
    normalize=normalize_github_user,
    email_scope=["user:email"],
)
