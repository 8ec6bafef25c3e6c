import logging
from collections.abc import Iterable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from authflow.oauth.handler import ErrorHandler, SuccessHandler, oauth_handler
from authflow.oauth.registry import oauth_provider_registry
from authflow.oauth.types import OAuthSuccess
from authflow.schemas.auth import AuthSuccessResponse
from authflow.schemas.common import create_success_response

logger = logging.getLogger(__name__)


def default_success_response(request: Request, result: OAuthSuccess) -> JSONResponse:
    """Echo the normalized user and tokens. Session issuance belongs to the embedding app."""
    provider = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    body = create_success_response(
        AuthSuccessResponse(
            provider=provider,
            user=result.user.to_public_dict(),
            tokens=result.tokens.model_dump(exclude_none=True),
        )
    )
    return JSONResponse(content=body.model_dump(mode="json"))


def build_auth_router(
    on_success: SuccessHandler = default_success_response,
    on_error: ErrorHandler | None = None,
    providers: Iterable[str] | None = None,
    prefix: str = "/auth",
) -> APIRouter:
    """Mount ``GET {prefix}/{provider}`` for each provider; both flow legs share the route."""
    router = APIRouter(prefix=prefix, tags=["Authentication"])
    names = (
        list(providers)
        if providers is not None
        else oauth_provider_registry.list_providers()
    )
    for name in names:
        router.add_api_route(
            f"/{name}",
            oauth_handler(name, on_success=on_success, on_error=on_error),
            methods=["GET"],
            name=f"oauth_{name}",
            summary=f"{name.capitalize()} OAuth login",
        )
        logger.debug("Mounted OAuth route %s/%s", prefix, name)
    return router


router = build_auth_router()
