from authflow.core.exceptions import ProviderNotFoundError
from authflow.oauth.base import ProviderProfile
from authflow.oauth.providers import BUILTIN_PROVIDERS


class ProviderProfileRegistry:
    """Registry for OAuth provider profiles."""

    def __init__(self) -> None:
        self._providers: dict[str, ProviderProfile] = {}

    def register(self, profile: ProviderProfile) -> None:
        """Register a provider profile, replacing any profile with the same name."""
        self._providers[profile.name.lower()] = profile

    def get(self, name: str) -> ProviderProfile | None:
        """Get a provider profile by name."""
        return self._providers.get(name.lower())

    def require(self, name: str) -> ProviderProfile:
        profile = self.get(name)
        if profile is None:
            raise ProviderNotFoundError(name)
        return profile

    def list_providers(self) -> list[str]:
        """List all registered provider names."""
        return list(self._providers.keys())


oauth_provider_registry = ProviderProfileRegistry()

# Register built-in providers
for _profile in BUILTIN_PROVIDERS:
    oauth_provider_registry.register(_profile)
