from authflow.oauth.base import ProfileRequest, ProviderProfile
from authflow.oauth.providers.auth0 import normalize_oidc_user

KEYCLOAK_REALM_BASE = "{server_url}/realms/{realm}/protocol/openid-connect"

keycloak_profile = ProviderProfile(
    name="keycloak",
    authorization_url=f"{KEYCLOAK_REALM_BASE}/auth",
    token_url=f"{KEYCLOAK_REALM_BASE}/token",
    profile_request=ProfileRequest(url=f"{KEYCLOAK_REALM_BASE}/userinfo"),
    normalize=normalize_oidc_user,
    scope=["openid"],
    email_scope=["email"],
)
