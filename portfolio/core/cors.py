"""
Allow-list CORS middleware.

Extends Starlette's CORSMiddleware so that requests from origins outside
the allow-list are refused before routing, and allowed preflight requests
get an empty 204 instead of Starlette's plain-text 200.
"""
import logging
from typing import Sequence

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from portfolio.core.exceptions import CorsRejection
from portfolio.services.normalizer import cors_rejected

logger = logging.getLogger(__name__)

CORS_METHODS = ("GET", "POST", "OPTIONS")
CORS_HEADERS = ("Content-Type", "Authorization")

# Headers describing the dropped "OK" body of Starlette's preflight response.
_BODY_HEADERS = ("content-length", "content-type")


class AllowListCORSMiddleware(CORSMiddleware):
    """
    CORS middleware that rejects disallowed origins outright.

    Requests without an Origin header (curl, server-to-server) pass through.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origins: Sequence[str] = (),
        allow_credentials: bool = True,
    ) -> None:
        super().__init__(
            app,
            allow_origins=allow_origins,
            allow_methods=CORS_METHODS,
            allow_headers=CORS_HEADERS,
            allow_credentials=allow_credentials,
        )

    def check_origin(self, origin: str | None) -> None:
        """
        Raises:
            CorsRejection: If the origin is present and not allow-listed.
        """
        if origin is not None and not self.is_allowed_origin(origin):
            raise CorsRejection(origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = Headers(scope=scope)
            try:
                self.check_origin(headers.get("origin"))
            except CorsRejection as e:
                logger.warning(f"CORS rejected {scope.get('method')} {scope.get('path')}: {e}")
                response = cors_rejected()
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response

        headers = {
            key: value for key, value in response.headers.items() if key.lower() not in _BODY_HEADERS
        }
        return Response(status_code=204, headers=headers)
