from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_twitch_user(raw: dict[str, Any]) -> NormalizedUser:
    # Helix wraps the authenticated user in a one-element list
    user = raw["data"][0]
    return NormalizedUser(
        id=user["id"],
        name=user.get("login"),
        email=user.get("email"),
        avatar=user.get("profile_image_url"),
        display_name=user.get("display_name"),
    )


twitch_profile = ProviderProfile(
    name="twitch",
    authorization_url="https://id.twitch.tv/oauth2/authorize",
    token_url="https://id.twitch.tv/oauth2/token",
    profile_request=ProfileRequest(
        url="https://api.twitch.tv/helix/users",
        headers={"Client-ID": "{client_id}"},
    ),
    normalize=normalize_twitch_user,
    email_scope=["user:read:email"],
)
