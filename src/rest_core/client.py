from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Mapping, Optional, TypeVar, cast

from .builder import BuiltRequest, NamingPolicy, RequestBuilder
from .errors import ResponseStatusError, TransportError
from .hooks import ClientHooks, ErrorHook, RequestHook, ResponseHook
from .metadata import RequestDescriptor
from .models import parse_json
from .naming import to_snake
from .transport import HttpResponse, Transport, UrllibTransport

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class RestClient:
    """Send request descriptors and return their typed responses.

    ``invoke`` never raises for HTTP-level failures: non-2xx statuses,
    network errors and undecodable bodies are reported to ``on_error`` and
    turned into ``None``. Declaration defects (``ConfigurationError``) and
    unencodable field values (``UnsupportedValueError``) propagate before any
    I/O happens.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        transport: Optional[Transport] = None,
        hooks: Optional[ClientHooks] = None,
        on_request: Optional[RequestHook] = None,
        on_response: Optional[ResponseHook] = None,
        on_error: Optional[ErrorHook] = None,
        naming: NamingPolicy = to_snake,
        default_headers: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        hooks = hooks or ClientHooks()
        self.builder = RequestBuilder(base_url, naming=naming, default_headers=default_headers)
        self.transport: Transport = transport or UrllibTransport()
        self.on_request = on_request or hooks.on_request
        self.on_response = on_response or hooks.on_response
        self.on_error = on_error or hooks.on_error
        self.logger = logger or LOGGER

    @property
    def base_url(self) -> str:
        return self.builder.base_url

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def invoke(self, descriptor: RequestDescriptor[T]) -> Optional[T]:
        """Build, send and decode one call. Blocks until the response is read."""

        request = self.builder.build(descriptor)

        if self.on_request:
            self.on_request(request)

        try:
            response = self.transport.send(request)
        except TransportError as exc:
            self.logger.warning("%s %s failed: %s", request.method, request.url, exc)
            self._report_error(request, None, exc)
            return None

        return cast(Optional[T], self._handle_response(request, response))

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _handle_response(self, request: BuiltRequest, response: HttpResponse) -> Any:
        if not response.is_success:
            error = ResponseStatusError(
                status_code=response.status_code,
                reason=response.reason,
                body=response.text or None,
            )
            self.logger.warning(
                "%s %s returned %s %s", request.method, request.url, response.status_code, response.reason
            )
            self._report_error(request, response, error)
            return None

        response_type = request.metadata.response_type if request.metadata else Any

        try:
            if response_type is HTTPStatus:
                result: Any = HTTPStatus(response.status_code)
            elif response_type is None or response_type is type(None):
                result = None
            else:
                result = parse_json(response.text, response_type)
        except Exception as exc:
            # Bad JSON, wrong shape, unsupported response type, unknown status code.
            self.logger.warning("Could not decode response of %s %s: %s", request.method, request.url, exc)
            self._report_error(request, response, exc)
            return None

        if self.on_response:
            self.on_response(request, response)
        return result

    def _report_error(self, request: BuiltRequest, response: Optional[HttpResponse], error: Exception) -> None:
        if self.on_error:
            self.on_error(request, response, error)
