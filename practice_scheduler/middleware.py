import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from practice_scheduler.errors import internal_error_response

logger = logging.getLogger("practice_scheduler.cors")


class HTTPLogMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, logger_name: str = "practice_scheduler.http"):
        super().__init__(app)
        self._logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        path = request.url.path
        method = request.method
        client = request.client.host if request.client else "-"
        self._logger.debug("http.request start method=%s path=%s client=%s", method, path, client)
        try:
            response: Response = await call_next(request)
            dur_ms = int((time.time() - start) * 1000)
            self._logger.debug("http.request end method=%s path=%s status=%s dur_ms=%s",
                               method, path, response.status_code, dur_ms)
            return response
        except Exception as e:
            dur_ms = int((time.time() - start) * 1000)
            self._logger.warning("http.request error method=%s path=%s dur_ms=%s err=%r",
                                 method, path, dur_ms, e)
            raise


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Attach fixed CORS headers to every response and answer OPTIONS directly."""

    def __init__(self, app, headers: dict[str, str]):
        super().__init__(app)
        self._headers = dict(headers)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled exception (method=%s, path=%s)", request.method, request.url.path)
                return internal_error_response(headers=self._headers)
        response.headers.update(self._headers)
        return response
