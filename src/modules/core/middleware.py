import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Tag every request, its log lines and its response with a request id.

    The id comes from the incoming ``X-Request-ID`` header, or a fresh UUID4
    when the client sent none.  It is bound into structlog's contextvars as
    ``correlation_id`` for the lifetime of the request and echoed back in the
    ``X-Request-ID`` response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )

        logger.info("request_started", query=request.META.get("QUERY_STRING", ""))
        start = time.monotonic()

        response = self.get_response(request)

        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
