"""Static bearer-token check for FastAPI."""

from __future__ import annotations

import hmac
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..logging import get_logger

logger = get_logger(__name__)

INVALID_TOKEN_MESSAGE = "invalid token"

# Endpoints reachable without a token
PUBLIC_PATHS = frozenset({"/health"})


class AuthenticationError(Exception):
    """Raised when a request does not carry the expected token."""

    pass


def verify_static_token(authorization: str | None, expected_token: str) -> None:
    """
    Compare the raw Authorization header against the configured token.

    The header must equal the token exactly; no ``Bearer`` prefix is
    stripped.

    Raises:
        AuthenticationError: If the header is missing or does not match
    """
    if authorization is None or not hmac.compare_digest(
        authorization.encode(), expected_token.encode()
    ):
        raise AuthenticationError(INVALID_TOKEN_MESSAGE)


class StaticTokenMiddleware(BaseHTTPMiddleware):
    """
    Reject requests whose Authorization header differs from a fixed token.

    Rejections are plain JSON responses and never reach GraphQL, so they do
    not go through GraphQL error formatting.
    """

    def __init__(self, app: ASGIApp, token: str, rejection_status: int = 500):
        super().__init__(app)
        self.token = token
        self.rejection_status = rejection_status

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        try:
            verify_static_token(request.headers.get("authorization"), self.token)
        except AuthenticationError as e:
            logger.warning(
                "Rejected request with invalid token",
                method=request.method,
                path=request.url.path,
                has_authorization=request.headers.get("authorization") is not None,
            )
            return JSONResponse(
                status_code=self.rejection_status,
                content={"message": str(e)},
            )

        return await call_next(request)
