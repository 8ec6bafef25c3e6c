import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ProviderConfig(BaseModel):
    """One layer of provider configuration.

    Every field is optional so that layers can be merged; provider specific
    settings (``domain``, ``tenant``, ``realm``...) are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    client_id: str | None = Field(
        default=None, validation_alias=AliasChoices("client_id", "clientId")
    )
    client_secret: str | None = Field(
        default=None, validation_alias=AliasChoices("client_secret", "clientSecret")
    )
    authorization_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("authorization_url", "authorizationURL"),
    )
    token_url: str | None = Field(
        default=None, validation_alias=AliasChoices("token_url", "tokenURL")
    )
    redirect_url: str | None = Field(
        default=None, validation_alias=AliasChoices("redirect_url", "redirectURL")
    )
    email_required: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("email_required", "emailRequired"),
    )
    scope: list[str] | None = None

    @field_validator("scope", mode="before")
    @classmethod
    def _split_scope(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [s for s in re.split(r"[\s,]+", value) if s]
        return value

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class OAuthTokens(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: Any = None
    refresh_token: Any = None
    expires_in: Any = None
    scope: Any = None
    id_token: Any = None


class NormalizedUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    raw_data: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_public_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class OAuthSuccess(BaseModel):
    user: NormalizedUser
    tokens: OAuthTokens


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclass
class RequestDefinition:
    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


@dataclass
class ApiResponse:
    status_code: int
    data: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
