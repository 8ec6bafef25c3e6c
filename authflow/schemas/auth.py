from typing import Any

from pydantic import BaseModel


class AuthSuccessResponse(BaseModel):
    provider: str
    user: dict[str, Any]
    tokens: dict[str, Any]
