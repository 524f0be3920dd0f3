"""Observability callbacks invoked by ``RestClient`` around each call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .builder import BuiltRequest
from .errors import ResponseStatusError
from .transport import HttpResponse

RequestHook = Callable[[BuiltRequest], None]
ResponseHook = Callable[[BuiltRequest, HttpResponse], None]
ErrorHook = Callable[[BuiltRequest, Optional[HttpResponse], Exception], None]


@dataclass
class ClientHooks:
    """Optional callbacks: before send, after a usable response, on any absorbed failure."""

    on_request: Optional[RequestHook] = None
    on_response: Optional[ResponseHook] = None
    on_error: Optional[ErrorHook] = None


def logging_hooks(logger: Optional[logging.Logger] = None, *, body_excerpt: int = 500) -> ClientHooks:
    """Hooks that write every request, response and failure to ``logger``."""

    log = logger or logging.getLogger("rest_core.calls")

    def on_request(request: BuiltRequest) -> None:
        if request.body is not None:
            log.info("%s %s %s", request.method, request.url, request.body_text[:body_excerpt])
        else:
            log.info("%s %s", request.method, request.url)

    def on_response(request: BuiltRequest, response: HttpResponse) -> None:
        log.info("%s %s -> %s %s", request.method, request.url, response.status_code, response.reason)

    def on_error(request: BuiltRequest, response: Optional[HttpResponse], error: Exception) -> None:
        if isinstance(error, ResponseStatusError):
            log.error(
                "%s %s -> %s %s %s",
                request.method,
                request.url,
                error.status_code,
                error.reason,
                (error.body or "")[:body_excerpt],
            )
        elif response is not None:
            log.error(
                "An error occurred parsing the response of %s %s as json",
                request.method,
                request.url,
                exc_info=error,
            )
        else:
            log.error("%s %s failed: %s", request.method, request.url, error)

    return ClientHooks(on_request=on_request, on_response=on_response, on_error=on_error)
