"""Logical HTTP requests and their translation to ``httpx``.

A request is described by an :class:`HttpMethod` value: ``Get`` and
``Delete`` never carry a body, ``Post``/``Patch``/``Put`` carry at most one
:data:`Body` (:class:`Json`, :class:`Raw` or :class:`Multipart`).
:func:`build_request` turns such a value into an ``httpx.Request``.

A body-carrying verb without a body is sent with an explicit
``Content-Length: 0`` header; the API rejects unannounced empty bodies.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote

import httpx
from prometheus_client import Counter, Histogram
from pydantic import TypeAdapter

__all__ = [
    "Part",
    "Json",
    "Raw",
    "Multipart",
    "Body",
    "HttpMethod",
    "Get",
    "Delete",
    "Post",
    "Patch",
    "Put",
    "build_request",
    "query_string",
]

REQUESTS_TOTAL = Counter(
    "revolut_http_requests_total",
    "HTTP requests to the Revolut API",
    labelnames=["product", "method", "status"],
)
LATENCY_SEC = Histogram(
    "revolut_http_latency_seconds",
    "Latency for Revolut API requests",
    labelnames=["product", "method"],
)

_ANY = TypeAdapter(Any)


# ---------------------------------------------------------------------------
# Bodies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Part:
    """One multipart form part; the part is named after ``file_name``."""

    contents: bytes
    mime_type: str
    file_name: str


@dataclass(frozen=True)
class Json:
    value: Any


@dataclass(frozen=True)
class Raw:
    data: bytes


@dataclass(frozen=True)
class Multipart:
    parts: Sequence[Part]


Body = Union[Json, Raw, Multipart]


# ---------------------------------------------------------------------------
# Methods
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HttpMethod:
    verb: ClassVar[str]


@dataclass(frozen=True)
class Get(HttpMethod):
    verb: ClassVar[str] = "GET"


@dataclass(frozen=True)
class Delete(HttpMethod):
    verb: ClassVar[str] = "DELETE"


@dataclass(frozen=True)
class _WithBody(HttpMethod):
    body: Optional[Body] = None


@dataclass(frozen=True)
class Post(_WithBody):
    verb: ClassVar[str] = "POST"


@dataclass(frozen=True)
class Patch(_WithBody):
    verb: ClassVar[str] = "PATCH"


@dataclass(frozen=True)
class Put(_WithBody):
    verb: ClassVar[str] = "PUT"


def _encode_body(body: Optional[Body]) -> Dict[str, Any]:
    if body is None:
        return {"content": b"", "headers": {"Content-Length": "0"}}
    if isinstance(body, Json):
        return {"json": _ANY.dump_python(body.value, mode="json", by_alias=True, exclude_none=True)}
    if isinstance(body, Raw):
        return {"content": bytes(body.data)}
    if isinstance(body, Multipart):
        return {
            "files": [
                (part.file_name, (part.file_name, part.contents, part.mime_type))
                for part in body.parts
            ]
        }
    raise TypeError(f"unsupported request body: {type(body).__name__}")


def build_request(
    http: httpx.AsyncClient,
    method: HttpMethod,
    url: str,
    headers: Mapping[str, str],
) -> httpx.Request:
    """Build the transport request for *method* against *url*."""

    kwargs: Dict[str, Any] = {}
    if isinstance(method, _WithBody):
        kwargs = _encode_body(method.body)
    merged = {**headers, **kwargs.pop("headers", {})}
    return http.build_request(method.verb, url, headers=merged, **kwargs)


# ---------------------------------------------------------------------------
# Query strings
# ---------------------------------------------------------------------------


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def query_string(pairs: Iterable[Tuple[str, Any]]) -> str:
    """Render ``?k=v&k=v`` from *pairs*, skipping ``None`` values.

    Values are percent-encoded (only unreserved characters are kept), an
    empty result renders as ``""``.
    """
    encoded = [
        f"{key}={quote(_render(value), safe='')}" for key, value in pairs if value is not None
    ]
    if not encoded:
        return ""
    return "?" + "&".join(encoded)
