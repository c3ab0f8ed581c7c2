"""
FastAPI middleware that records one "http" event per API call: route,
status, latency and, for rejected embedding calls, the error class the
API's EmbeddingError handler stored on request.state.
"""
from __future__ import annotations
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from .events import record_event

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        t0 = time.perf_counter()
        status = 500  # unhandled exceptions never produce a response here
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            payload = {
                "path": request.url.path,
                "method": request.method,
                "status": status,
                "ms": round((time.perf_counter() - t0) * 1000.0, 2),
            }
            error_kind = getattr(request.state, "error_kind", None)
            if error_kind:
                payload["error"] = error_kind
            record_event("http", payload)
