"""Session cookie middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from projecthub.config import settings
from projecthub.logging_config import bind_request_context
from projecthub.services.session_service import decode_session_token

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """Decode the session cookie, if any, and attach the user to request.state.

    A missing or invalid cookie leaves the request anonymous; routes that
    need a user enforce it through ``get_current_user``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.user = {}
        token = request.cookies.get(settings.session_cookie_name)
        if token:
            claims = decode_session_token(token)
            if claims:
                request.state.user = {"sub": claims["sub"]}
                bind_request_context(getattr(request.state, "trace_id", "unknown"), user_id=claims["sub"])
            else:
                logger.debug("Ignoring invalid session cookie")
        return await call_next(request)
