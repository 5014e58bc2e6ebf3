"""
Soundshelf Middleware
API version stamping, request logging and the /admin Basic auth gate
"""

import logging
import secrets

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasic
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.envelope import error_envelope
from ..utils.timing import Timer

logger = logging.getLogger(__name__)


class ApiVersionMiddleware(BaseHTTPMiddleware):
    """Stamps request.state.api_version and echoes it as X-API-Version"""

    def __init__(self, app, version: str):
        super().__init__(app)
        self.version = version

    async def dispatch(self, request: Request, call_next):
        request.state.api_version = self.version
        response = await call_next(request)
        response.headers["X-API-Version"] = self.version
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, slow_request_sec: float = 1.0):
        super().__init__(app)
        self.slow_request_sec = slow_request_sec

    async def dispatch(self, request: Request, call_next):
        with Timer() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"Request failed: {request.method} {request.url.path}: {e}")
                raise

        response.headers["X-Process-Time"] = f"{timer.elapsed:.3f}"
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({timer})"
        )
        if timer.elapsed > self.slow_request_sec:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {timer}"
            )
        return response


class AdminAuthMiddleware(BaseHTTPMiddleware):
    """
    HTTP Basic challenge for every path under /admin.

    No admin routes are mounted; authenticated requests simply reach routing.
    """

    def __init__(self, app, username: str, password: str, prefix: str = "/admin"):
        super().__init__(app)
        self.username = username
        self.password = password
        self.prefix = prefix.rstrip("/")
        self.security = HTTPBasic(realm="admin", auto_error=False)

    def _guarded(self, path: str) -> bool:
        return path == self.prefix or path.startswith(self.prefix + "/")

    async def _authorized(self, request: Request) -> bool:
        try:
            credentials = await self.security(request)
        except HTTPException:
            # malformed Basic payload
            return False
        if credentials is None:
            return False
        user_ok = secrets.compare_digest(
            credentials.username.encode("utf-8"), self.username.encode("utf-8")
        )
        pass_ok = secrets.compare_digest(
            credentials.password.encode("utf-8"), self.password.encode("utf-8")
        )
        return user_ok and pass_ok

    async def dispatch(self, request: Request, call_next):
        if self._guarded(request.url.path) and not await self._authorized(request):
            version = getattr(request.state, "api_version", "")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=error_envelope("Unauthorized", version),
                headers={"WWW-Authenticate": 'Basic realm="admin"'}
            )
        return await call_next(request)
