"""Uniform OAuth2 authorization-code login for many identity providers."""
