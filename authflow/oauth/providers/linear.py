from typing import Any

from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.types import HttpMethod, NormalizedUser

LINEAR_VIEWER_QUERY = "query Me { viewer { id name email avatarUrl displayName }}"


def normalize_linear_user(raw: dict[str, Any]) -> NormalizedUser:
    viewer = raw["data"]["viewer"]
    return NormalizedUser(
        id=viewer["id"],
        name=viewer.get("name"),
        email=viewer.get("email"),
        avatar=viewer.get("avatarUrl"),
        display_name=viewer.get("displayName"),
    )


linear_profile = ProviderProfile(
    name="linear",
    authorization_url="https://linear.app/oauth/authorize",
    token_url="https://api.linear.app/oauth/token",
    profile_request=ProfileRequest(
        url="https://api.linear.app/graphql",
        method=HttpMethod.POST,
        headers={
            "User-Agent": "Linear-OAuth-{client_id}",
            "Content-Type": "application/json",
        },
        body={"query": LINEAR_VIEWER_QUERY},
    ),
    normalize=normalize_linear_user,
    scope_separator=",",
)
