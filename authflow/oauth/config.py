import logging
import string
from typing import Any

from pydantic import ValidationError

from authflow.core.exceptions import ConfigurationError
from authflow.oauth.base import ProviderProfile
from authflow.oauth.types import ProviderConfig

logger = logging.getLogger(__name__)

ConfigLayer = ProviderConfig | dict[str, Any] | None


def _layer_values(profile: ProviderProfile, layer: ConfigLayer) -> dict[str, Any]:
    if layer is None:
        return {}
    try:
        config = (
            layer
            if isinstance(layer, ProviderConfig)
            else ProviderConfig.model_validate(layer)
        )
    except ValidationError as e:
        raise ConfigurationError(
            profile.name, f"Invalid {profile.name} OAuth configuration: {e}"
        ) from e
    return config.model_dump(exclude_none=True)


def merge_config_layers(
    profile: ProviderProfile, *layers: ConfigLayer
) -> dict[str, Any]:
    """Merge layers left to right; the first layer that sets a key wins."""
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in _layer_values(profile, layer).items():
            merged.setdefault(key, value)
    return merged


def _expand(profile: ProviderProfile, template: str, values: dict[str, Any]) -> str:
    fields = [name for _, name, _, _ in string.Formatter().parse(template) if name]
    missing = [name for name in fields if not values.get(name)]
    if missing:
        env_names = " or ".join(f"{profile.env_prefix}{m.upper()}" for m in missing)
        raise ConfigurationError(
            profile.name, f"Missing {env_names} env variables."
        )
    return template.format(**values)


def resolve_scope(profile: ProviderProfile, values: dict[str, Any]) -> list[str]:
    scope = list(values.get("scope") or profile.scope)
    if values.get("email_required"):
        for entry in profile.email_scope:
            if entry not in scope:
                scope.append(entry)
    return scope


def resolve_config(
    profile: ProviderProfile,
    explicit: ConfigLayer = None,
    runtime: ConfigLayer = None,
) -> ProviderConfig:
    """Resolve call-site config > runtime config > provider defaults.

    Raises ConfigurationError when credentials are missing or when an
    endpoint template references a field nobody supplied.
    """
    values = merge_config_layers(
        profile,
        explicit,
        runtime,
        {
            "authorization_url": profile.authorization_url,
            "token_url": profile.token_url,
            **profile.config_defaults,
        },
    )

    if not values.get("client_id") or not values.get("client_secret"):
        raise ConfigurationError(
            profile.name,
            f"Missing {profile.env_prefix}CLIENT_ID or "
            f"{profile.env_prefix}CLIENT_SECRET env variables.",
        )

    values["authorization_url"] = _expand(profile, values["authorization_url"], values)
    values["token_url"] = _expand(profile, values["token_url"], values)
    # profile request templates are expanded after the code is spent
    for template in (
        profile.profile_request.url,
        *profile.profile_request.headers.values(),
    ):
        _expand(profile, template, values)
    values["scope"] = resolve_scope(profile, values)

    logger.debug(
        "Resolved %s config: authorization_url=%s token_url=%s scope=%s",
        profile.name,
        values["authorization_url"],
        values["token_url"],
        values["scope"],
    )
    return ProviderConfig.model_validate(values)


def template_context(config: ProviderConfig) -> dict[str, Any]:
    return config.model_dump(exclude_none=True)
