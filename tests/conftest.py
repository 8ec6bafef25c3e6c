from types import TracebackType
from typing import Any, Self

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from authflow.core.exceptions import AppException
from authflow.main import app_exception_handler
from authflow.oauth.handler import oauth_handler
from authflow.oauth.types import ApiResponse, RequestDefinition

LINEAR_VIEWER = {
    "data": {
        "viewer": {
            "id": "1",
            "name": "A",
            "email": "a@b.com",
            "avatarUrl": "u",
            "displayName": "A.",
        }
    }
}


class FakeOAuthHttpClient:
    """Stands in for OAuthHttpClient and records every outbound call."""

    def __init__(
        self,
        token_response: dict[str, Any] | None = None,
        profile_response: dict[str, Any] | None = None,
        profile_status: int = 200,
        error: Exception | None = None,
    ):
        self.token_response = (
            token_response if token_response is not None else {"access_token": "tok"}
        )
        self.profile_response = (
            profile_response if profile_response is not None else LINEAR_VIEWER
        )
        self.profile_status = profile_status
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.closed = True

    async def post_form(self, url: str, form: dict[str, str]) -> ApiResponse:
        self.calls.append({"method": "POST", "url": url, "form": form})
        if self.error is not None:
            raise self.error
        return ApiResponse(status_code=200, data=self.token_response)

    async def execute(self, request: RequestDefinition) -> ApiResponse:
        self.calls.append(
            {
                "method": request.method.value,
                "url": request.url,
                "headers": request.headers,
                "body": request.body,
            }
        )
        return ApiResponse(status_code=self.profile_status, data=self.profile_response)


@pytest.fixture
def fake_client() -> FakeOAuthHttpClient:
    return FakeOAuthHttpClient()


@pytest.fixture
def credentials() -> dict[str, str]:
    return {"clientId": "abc", "clientSecret": "xyz"}


def make_request(path: str, query: str = "", host: str = "host") -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "https",
        "server": (host, 443),
        "root_path": "",
        "path": path,
        "query_string": query.encode(),
        "headers": [(b"host", host.encode())],
    }
    return Request(scope)


def make_app(provider: str, route: str, **handler_kwargs: Any) -> FastAPI:
    app = FastAPI()
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_api_route(route, oauth_handler(provider, **handler_kwargs), methods=["GET"])
    return app


def make_test_client(app: FastAPI) -> TestClient:
    return TestClient(app, base_url="https://host", follow_redirects=False)
