"""
Declarative REST request builder.

Request descriptors are frozen dataclasses tagged with ``@route``; the
``RestClient`` turns them into HTTP requests and validates the JSON response
into the descriptor's declared result type.
"""

from .builder import BuiltRequest, RequestBuilder
from .client import RestClient
from .config import ClientSettings
from .encoding import ValueKind, classify, encode_value
from .errors import (
    ConfigurationError,
    ResponseStatusError,
    RestClientError,
    TransportError,
    UnsupportedValueError,
)
from .hooks import ClientHooks, logging_hooks
from .metadata import (
    DescriptorMetadata,
    FieldMetadata,
    Placement,
    RequestDescriptor,
    RouteMetadata,
    Verb,
    body,
    query,
    register,
    resolve,
    route,
)
from .models import WireModel
from .naming import convert, to_snake, to_upper_camel
from .transport import HttpResponse, Transport, UrllibTransport

__all__ = [
    "BuiltRequest",
    "ClientHooks",
    "ClientSettings",
    "ConfigurationError",
    "DescriptorMetadata",
    "FieldMetadata",
    "HttpResponse",
    "Placement",
    "RequestBuilder",
    "RequestDescriptor",
    "ResponseStatusError",
    "RestClient",
    "RestClientError",
    "RouteMetadata",
    "Transport",
    "TransportError",
    "UnsupportedValueError",
    "UrllibTransport",
    "ValueKind",
    "Verb",
    "WireModel",
    "body",
    "classify",
    "convert",
    "encode_value",
    "logging_hooks",
    "query",
    "register",
    "resolve",
    "route",
    "to_snake",
    "to_upper_camel",
]
