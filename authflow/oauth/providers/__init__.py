from authflow.oauth.base import ProviderProfile
from authflow.oauth.providers.auth0 import auth0_profile
from authflow.oauth.providers.discord import discord_profile
from authflow.oauth.providers.github import github_profile
from authflow.oauth.providers.google import google_profile
from authflow.oauth.providers.keycloak import keycloak_profile
from authflow.oauth.providers.linear import linear_profile
from authflow.oauth.providers.microsoft import microsoft_profile
from authflow.oauth.providers.spotify import spotify_profile
from authflow.oauth.providers.twitch import twitch_profile

BUILTIN_PROVIDERS: list[ProviderProfile] = [
    auth0_profile,
    discord_profile,
    github_profile,
    google_profile,
    keycloak_profile,
    linear_profile,
    microsoft_profile,
    spotify_profile,
    twitch_profile,
]
