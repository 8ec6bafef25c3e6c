from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import NormalizedUser


def normalize_spotify_user(raw: dict[str, Any]) -> NormalizedUser:
    images = raw.get("images") or []
    return NormalizedUser(
        id=raw["id"],
        name=raw.get("display_name"),
        email=raw.get("email"),
        avatar=images[0].get("url") if images else None,
        display_name=raw.get("display_name"),
    )


spotify_profile = ProviderProfile(
    name="spotify",
    authorization_url="https://accounts.spotify.com/authorize",
    token_url="https://accounts.spotify.com/api/token",
    profile_request=ProfileRequest(url="https://api.spotify.com/v1/me"),
    normalize=normalize_spotify_user,
    email_scope=["user-read-email"],
)
