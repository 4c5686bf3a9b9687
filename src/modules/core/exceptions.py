"""Standardised API error responses.

``drf-standardized-errors`` renders every API error as::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "name" | null}]
    }

``LoggingExceptionHandler`` is plugged in through
``DRF_STANDARDIZED_ERRORS["EXCEPTION_HANDLER_CLASS"]`` so each error
response also leaves a structlog event.
"""

from __future__ import annotations

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from rest_framework.response import Response

logger = structlog.get_logger(__name__)


class LoggingExceptionHandler(ExceptionHandler):
    def report_exception(self, exc: Exception, response: Response) -> None:
        log = logger.error if response.status_code >= 500 else logger.warning
        log(
            "api_error",
            status_code=response.status_code,
            error_type=response.data.get("type"),
            errors=[error.get("detail") for error in response.data.get("errors", [])],
            exc_info=exc if response.status_code >= 500 else False,
        )
        super().report_exception(exc, response)
