"""Request id and request logging middleware."""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log it with status and duration."""
    
    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlink_app.http")
    
    async def dispatch(self, request: Request, call_next: Callable):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        start_time = time.time()
        
        client_ip = request.client.host if request.client else "unknown"
        self.logger.debug(
            f"Request {request_id}: {request.method} {request.url.path} from {client_ip}"
        )
        
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.time() - start_time) * 1000
            self.logger.exception(
                f"Request {request_id}: {request.method} {request.url.path} - "
                f"Unhandled error - Duration: {duration_ms:.2f}ms"
            )
            raise
        
        duration_ms = (time.time() - start_time) * 1000
        self.logger.info(
            f"Request {request_id}: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
