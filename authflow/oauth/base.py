from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from authflow.oauth.types import HttpMethod, NormalizedUser, RequestDefinition

ProfileNormalizer = Callable[[dict[str, Any]], NormalizedUser]


@dataclass(frozen=True)
class ProfileRequest:
    """Template of the user-info request sent with the bearer token.

    ``url`` and header values may reference resolved config fields,
    e.g. ``"https://{domain}/userinfo"`` or ``"Linear-OAuth-{client_id}"``.
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None

    def build(self, context: dict[str, Any], access_token: str) -> RequestDefinition:
        headers = {key: value.format(**context) for key, value in self.headers.items()}
        headers["Authorization"] = f"Bearer {access_token}"
        return RequestDefinition(
            method=self.method,
            url=self.url.format(**context),
            headers=headers,
            body=self.body,
        )


@dataclass(frozen=True)
class ProviderProfile:
    name: str
    authorization_url: str
    token_url: str
    profile_request: ProfileRequest
    normalize: ProfileNormalizer
    scope: list[str] = field(default_factory=list)
    email_scope: list[str] = field(default_factory=list)
    scope_separator: str = " "
    authorization_params: dict[str, str] = field(default_factory=dict)
    config_defaults: dict[str, Any] = field(default_factory=dict)

    @property
    def env_prefix(self) -> str:
        return f"OAUTH__{self.name.upper()}__"
