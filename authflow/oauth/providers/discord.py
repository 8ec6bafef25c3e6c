from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser

DISCORD_AVATAR_URL = "https://cdn.discordapp.com/avatars/{user_id}/{avatar}.png"


def normalize_discord_user(raw: dict[str, Any]) -> NormalizedUser:
    avatar = raw.get("avatar")
    return NormalizedUser(
        id=raw["id"],
        name=raw.get("username"),
        email=raw.get("email"),
        avatar=(
            DISCORD_AVATAR_URL.format(user_id=raw["id"], avatar=avatar)
            if avatar
            else None
        ),
        display_name=raw.get("global_name"),
    )


discord_profile = ProviderProfile(
    name="discord",
    authorization_url="https://discord.com/oauth2/authorize",
    token_url="https://discord.com/api/oauth2/token",
    profile_request=ProfileRequest(url="https://discord.com/api/users/@me"),
    normalize=normalize_discord_user,
    scope=["identify"],
    email_scope=["email"],
)
