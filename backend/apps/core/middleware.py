"""
Core middleware.
"""

import time
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from apps.core.logging import bind_contextvars, clear_contextvars, get_logger

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware:
    """
    Attaches a correlation ID to every request and logs its completion.

    Reuses a valid UUID from the X-Correlation-ID header, otherwise generates
    one. The ID is bound to the structlog context for the duration of the
    request and echoed back on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = self._get_or_create_correlation_id(request)
        request.correlation_id = correlation_id  # type: ignore[attr-defined]

        clear_contextvars()
        bind_contextvars(
            correlation_id=str(correlation_id),
            **{
                "http.method": request.method,
                "http.url_details.path": request.path,
            },
        )

        started = time.perf_counter()
        try:
            response = self.get_response(request)
            response[CORRELATION_ID_HEADER] = str(correlation_id)
            logger.info(
                "request_finished",
                **{"http.status_code": response.status_code},
                duration_ms=(time.perf_counter() - started) * 1000,
            )
            return response
        finally:
            clear_contextvars()

    @staticmethod
    def _get_or_create_correlation_id(request: HttpRequest) -> uuid.UUID:
        header_value = request.headers.get(CORRELATION_ID_HEADER)
        if header_value:
            try:
                return uuid.UUID(header_value)
            except ValueError:
                pass
        return uuid.uuid4()
