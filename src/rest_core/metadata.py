"""Route and field declarations for request descriptors.

A descriptor is a frozen dataclass deriving from ``RequestDescriptor[T]`` and
decorated with ``@route``::

    @route("/category/{id}", Verb.GET)
    @dataclass(frozen=True)
    class GetCategory(RequestDescriptor[Category]):
        id: int
        include_clues: Optional[bool] = None

Metadata is resolved once, when the decorator runs, and stored on the class.
Fields named by a ``{placeholder}`` in the template are written into the path,
fields declared with ``body()`` go to the JSON body and every other field is
appended to the query string.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, FrozenSet, Generic, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from .errors import ConfigurationError
from .naming import to_snake

T = TypeVar("T")
D = TypeVar("D", bound=type)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_FIELD_METADATA_KEY = "rest_core"
_METADATA_ATTR = "__rest_metadata__"


class Verb(str, Enum):
    """HTTP verbs a descriptor route may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Placement(str, Enum):
    """Where a field's value is written in the outgoing request."""

    PATH = "path"
    QUERY = "query"
    BODY_FIELD = "body_field"
    BODY_VALUE_ONLY = "body_value_only"


@dataclass(frozen=True)
class RouteMetadata:
    template: str
    verb: Verb

    @property
    def placeholders(self) -> FrozenSet[str]:
        return frozenset(_PLACEHOLDER.findall(self.template))


@dataclass(frozen=True)
class FieldMetadata:
    name: str
    placement: Placement
    alias: Optional[str] = None
    # for PATH fields, the template placeholder the field fills
    placeholder: Optional[str] = None


@dataclass(frozen=True)
class DescriptorMetadata:
    """Everything the request builder needs to know about a descriptor type."""

    descriptor_type: type
    route: RouteMetadata
    fields: Tuple[FieldMetadata, ...]
    response_type: Any = Any

    @property
    def type_name(self) -> str:
        return f"{self.descriptor_type.__module__}.{self.descriptor_type.__qualname__}"

    @property
    def value_only_field(self) -> Optional[FieldMetadata]:
        for item in self.fields:
            if item.placement is Placement.BODY_VALUE_ONLY:
                return item
        return None


class RequestDescriptor(Generic[T]):
    """Base class tying a descriptor to the type its response deserializes into."""


@dataclass(frozen=True)
class _FieldDeclaration:
    placement: Placement
    alias: Optional[str] = None


def body(*, alias: Optional[str] = None, value_only: bool = False, default: Any = None) -> Any:
    """Declare a dataclass field that is written to the JSON request body.

    With ``value_only=True`` the field's value becomes the whole body instead
    of one key of a body object.
    """

    placement = Placement.BODY_VALUE_ONLY if value_only else Placement.BODY_FIELD
    return dataclasses.field(
        default=default,
        metadata={_FIELD_METADATA_KEY: _FieldDeclaration(placement=placement, alias=alias)},
    )


def query(*, alias: Optional[str] = None, default: Any = None) -> Any:
    """Declare a query-string field with an explicit wire key."""

    return dataclasses.field(
        default=default,
        metadata={_FIELD_METADATA_KEY: _FieldDeclaration(placement=Placement.QUERY, alias=alias)},
    )


_UNSET: Any = object()


def register(cls: D, template: Optional[str], verb: Union[Verb, str, None], *, returns: Any = _UNSET) -> D:
    """Validate and attach descriptor metadata to ``cls``."""

    type_name = f"{cls.__module__}.{cls.__qualname__}"

    if not isinstance(template, str):
        raise ConfigurationError(f"You must specify a route template for request type {type_name}")
    if not dataclasses.is_dataclass(cls):
        raise ConfigurationError(f"Request type {type_name} must be a dataclass to declare a route")

    route_metadata = RouteMetadata(template=template, verb=_parse_verb(verb, type_name))
    placeholders = route_metadata.placeholders

    fields = []
    for item in dataclasses.fields(cls):
        declaration = item.metadata.get(_FIELD_METADATA_KEY)
        placeholder = _matching_placeholder(item.name, placeholders)
        if placeholder is not None:
            fields.append(FieldMetadata(name=item.name, placement=Placement.PATH, placeholder=placeholder))
        elif isinstance(declaration, _FieldDeclaration):
            fields.append(FieldMetadata(name=item.name, placement=declaration.placement, alias=declaration.alias))
        else:
            fields.append(FieldMetadata(name=item.name, placement=Placement.QUERY))

    value_only = [item.name for item in fields if item.placement is Placement.BODY_VALUE_ONLY]
    if len(value_only) > 1:
        raise ConfigurationError(
            f"You may only declare one value-only body field on type {type_name}; found {', '.join(value_only)}"
        )

    metadata = DescriptorMetadata(
        descriptor_type=cls,
        route=route_metadata,
        fields=tuple(fields),
        response_type=_infer_response_type(cls) if returns is _UNSET else returns,
    )
    setattr(cls, _METADATA_ATTR, metadata)
    return cls


def route(
    template: Optional[str],
    verb: Union[Verb, str, None] = Verb.GET,
    *,
    returns: Any = _UNSET,
) -> Callable[[D], D]:
    """Class decorator form of :func:`register`."""

    def decorator(cls: D) -> D:
        return register(cls, template, verb, returns=returns)

    return decorator


def resolve(descriptor: Union[type, Any]) -> DescriptorMetadata:
    """Return the metadata declared for a descriptor type or instance."""

    cls: Type[Any] = descriptor if isinstance(descriptor, type) else type(descriptor)
    # Looked up on the class itself: a subclass must declare its own route.
    metadata = cls.__dict__.get(_METADATA_ATTR)
    if not isinstance(metadata, DescriptorMetadata):
        raise ConfigurationError(f"You must declare a route for request type {cls.__module__}.{cls.__qualname__}")
    return metadata


def _matching_placeholder(name: str, placeholders: FrozenSet[str]) -> Optional[str]:
    # ``Id`` fills ``{id}`` as well as ``{Id}``.
    for candidate in (name, to_snake(name)):
        if candidate in placeholders:
            return candidate
    return None


def _parse_verb(verb: Union[Verb, str, None], type_name: str) -> Verb:
    if isinstance(verb, Verb):
        return verb
    if isinstance(verb, str):
        try:
            return Verb(verb.strip().upper())
        except ValueError:
            pass
    raise ConfigurationError(f"You must specify a valid verb for request type {type_name}; got {verb!r}")


def _infer_response_type(cls: type) -> Any:
    for klass in cls.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if get_origin(base) is RequestDescriptor:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    return args[0]
    return Any

