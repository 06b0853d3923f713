import logging
import time

import jwt
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse

from company_api.core.security import get_token_manager

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class PanicRecoveryMiddleware(BaseHTTPMiddleware):
    """Turn any exception escaping the handlers into a plain 500."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception("panic: %r", e)
            return PlainTextResponse("Internal Server Error", status_code=500)


class LatencyLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Method: %s | Request: %s | Status: %s | Latency: %.3fms",
            request.method, request.url.path, response.status_code, latency_ms,
        )
        return response


class AuthorizationMiddleware(BaseHTTPMiddleware):
    """Require a valid bearer token on every non-GET request touching companies."""

    async def dispatch(self, request, call_next):
        if request.method != "GET" and "companies" in request.url.path:
            header = request.headers.get("authorization")
            if not header:
                logger.warning("Missing Authorization Header")
                return PlainTextResponse("Missing Authorization Header", status_code=401)

            token = header[len(BEARER_PREFIX):] if header.startswith(BEARER_PREFIX) else header
            try:
                user_id = get_token_manager().verify_jwt(token)
            except (jwt.PyJWTError, ValueError) as e:
                # ValueError: no signing key configured, nothing can verify
                logger.warning("rejected bearer token: %s", e)
                return PlainTextResponse(f"Error verifying JWT token: {e}", status_code=401)
            request.state.user_id = user_id
        return await call_next(request)
