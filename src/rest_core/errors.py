from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class RestClientError(Exception):
    """Base class for errors raised by the declarative REST client."""


class ConfigurationError(RestClientError, ValueError):
    """Raised when a descriptor's route or field declaration is defective."""


class UnsupportedValueError(RestClientError, TypeError):
    """Raised when a field value cannot be written into a URL."""


@dataclass
class TransportError(RestClientError):
    """Raised by a transport when no HTTP response could be obtained."""

    url: str
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ResponseStatusError(RestClientError):
    """Describes a non-2xx response. Passed to error hooks, never raised by ``invoke``."""

    status_code: int
    reason: str
    body: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(f"{self.status_code} {self.reason}".strip())
