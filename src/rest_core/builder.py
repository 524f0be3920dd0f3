from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import quote, urlsplit

from .encoding import encode_value
from .errors import ConfigurationError
from .metadata import DescriptorMetadata, Placement, resolve
from .models import dump_json
from .naming import to_snake

LOGGER = logging.getLogger(__name__)

# Kept literal so sequences read as ``1,2,3`` on the wire.
_SAFE_VALUE_CHARS = ","

NamingPolicy = Callable[[str], str]


@dataclass
class BuiltRequest:
    """An HTTP request assembled from a descriptor, ready for a transport."""

    method: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)
    metadata: Optional[DescriptorMetadata] = None

    @property
    def body_text(self) -> Optional[str]:
        if self.body is None:
            return None
        return self.body.decode("utf-8")


class RequestBuilder:
    """Turn descriptor instances into ``BuiltRequest`` objects."""

    def __init__(
        self,
        base_url: str = "",
        *,
        naming: NamingPolicy = to_snake,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.naming = naming
        self.default_headers = dict(default_headers or {})

    def build(self, descriptor: Any) -> BuiltRequest:
        """Build the request for ``descriptor``.

        Raises ``ConfigurationError`` when a path placeholder has no value and
        ``UnsupportedValueError`` when a path or query value cannot be encoded.
        """

        metadata = resolve(descriptor)
        template = metadata.route.template

        path = template
        query_parts: List[str] = []
        body_fields: Dict[str, Any] = {}
        payload: Optional[bytes] = None
        substituted = set()

        for item in metadata.fields:
            value = getattr(descriptor, item.name)

            if item.placement is Placement.PATH:
                if value is None:
                    raise ConfigurationError(f"{item.name} is a required field for endpoint {template}")
                placeholder = item.placeholder or item.name
                path = path.replace(f"{{{placeholder}}}", quote(encode_value(value), safe=_SAFE_VALUE_CHARS))
                substituted.add(placeholder)
                continue

            if value is None:
                continue

            if item.placement is Placement.BODY_VALUE_ONLY:
                payload = dump_json(value)
            elif item.placement is Placement.BODY_FIELD:
                # Only scalars and sequences of scalars; the raw value is what gets serialized.
                encode_value(value)
                body_fields[item.alias or self.naming(item.name)] = value
            else:
                key = quote(item.alias or self.naming(item.name), safe="")
                query_parts.append(f"{key}={quote(encode_value(value), safe=_SAFE_VALUE_CHARS)}")

        missing = sorted(metadata.route.placeholders - substituted)
        if missing:
            raise ConfigurationError(
                f"No value for placeholder(s) {', '.join(missing)} of endpoint {template} on {metadata.type_name}"
            )

        if payload is None and body_fields:
            payload = dump_json(body_fields)

        url = self._absolute(path)
        url = f"{url}{'&' if '?' in url else '?'}{'&'.join(query_parts)}".rstrip("&?")

        headers = {"Accept": "application/json", **self.default_headers}
        if payload is not None:
            headers["Content-Type"] = "application/json; charset=utf-8"

        request = BuiltRequest(
            method=metadata.route.verb.value,
            url=url,
            body=payload,
            headers=headers,
            metadata=metadata,
        )
        LOGGER.debug("Built %s %s for %s", request.method, request.url, metadata.type_name)
        return request

    def _absolute(self, path: str) -> str:
        if urlsplit(path).scheme:
            return path
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"
