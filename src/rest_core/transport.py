from __future__ import annotations

import http.client
import logging
import socket
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional, Protocol

from .errors import TransportError

if TYPE_CHECKING:  # pragma: no cover
    from .builder import BuiltRequest


LOGGER = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """Status, headers and decoded body of a completed HTTP exchange."""

    status_code: int
    reason: str = ""
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    def send(self, request: "BuiltRequest") -> HttpResponse:
        """Perform ``request`` and return the response, whatever its status."""


class UrllibTransport:
    """Blocking transport on top of ``urllib.request``.

    Each call opens its own connection, so one instance can be shared by
    concurrent callers.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        user_agent: Optional[str] = "rest-core/0.1",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = logger or LOGGER

    def send(self, request: "BuiltRequest") -> HttpResponse:
        self.logger.debug("Sending %s %s", request.method, request.url)
        headers = dict(request.headers)
        if self.user_agent:
            headers.setdefault("User-Agent", self.user_agent)

        http_request = urllib.request.Request(
            url=request.url,
            data=request.body,
            headers=headers,
            method=request.method,
        )

        try:
            with urllib.request.urlopen(http_request, timeout=self.timeout) as response:
                raw_bytes = response.read()
                return HttpResponse(
                    status_code=response.getcode(),
                    reason=str(getattr(response, "reason", "") or ""),
                    text=_decode(raw_bytes, response.headers.get_content_charset()),
                    headers=dict(response.headers.items()),
                )
        except urllib.error.HTTPError as exc:
            # Non-2xx statuses are ordinary responses here; the client decides what they mean.
            error_bytes = exc.read() or b""
            return HttpResponse(
                status_code=exc.code,
                reason=str(exc.reason or ""),
                text=_decode(error_bytes, exc.headers.get_content_charset() if exc.headers else None),
                headers=dict(exc.headers.items()) if exc.headers else {},
            )
        except urllib.error.URLError as exc:
            human = getattr(exc, "reason", None) or str(exc)
            raise TransportError(url=request.url, message=f"Request to {request.url} failed: {human}") from exc
        except socket.timeout as exc:
            raise TransportError(url=request.url, message=f"Request to {request.url} timed out") from exc
        except (http.client.HTTPException, OSError) as exc:
            # Dropped connections, truncated bodies, resets during read.
            raise TransportError(url=request.url, message=f"Request to {request.url} failed: {exc!r}") from exc


def _decode(raw_bytes: bytes, charset: Optional[str]) -> str:
    if not raw_bytes:
        return ""
    return raw_bytes.decode(charset or "utf-8", errors="replace")
