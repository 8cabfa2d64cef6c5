"""Error taxonomy shared by every Revolut product client.

Three families mirror where a failure originates:

* :class:`ClientBuilderError`: raised while assembling credentials or a
  client; never retried.
* :class:`ClientError`: raised by an operation on a built client (login,
  transport, decoding).
* :class:`BackendError`: the API answered with a non-2xx status; the decoded
  error payload is attached unmodified.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "RevolutError",
    "ClientBuilderError",
    "MissingEnvironmentVariable",
    "CannotInstantiateClient",
    "IncompleteBuilder",
    "ClientError",
    "CannotLogIn",
    "RequestError",
    "SerializationError",
    "GenericError",
    "UnsupportedEnvironment",
    "ErrorItem",
    "BackendErrorBody",
    "BackendError",
]


class RevolutError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(self, diagnostic: str = "") -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


# ---------------------------------------------------------------------------
# Builder errors
# ---------------------------------------------------------------------------


class ClientBuilderError(RevolutError):
    """Credentials or client could not be assembled."""


class MissingEnvironmentVariable(ClientBuilderError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"environment variable {variable!r} is not set")
        self.variable = variable


class CannotInstantiateClient(ClientBuilderError):
    """The underlying HTTP transport could not be constructed."""


class IncompleteBuilder(ClientBuilderError):
    """A builder precondition was violated (missing or conflicting slot)."""


# ---------------------------------------------------------------------------
# Client errors
# ---------------------------------------------------------------------------


class ClientError(RevolutError):
    """An operation on a built client failed before a backend answer was decoded."""


class CannotLogIn(ClientError):
    pass


class RequestError(ClientError):
    pass


class SerializationError(ClientError):
    pass


class GenericError(ClientError):
    pass


class UnsupportedEnvironment(GenericError):
    """The resource is not offered for this product/environment pair."""


# ---------------------------------------------------------------------------
# Backend errors
# ---------------------------------------------------------------------------


class ErrorItem(BaseModel):
    error_code: str
    message: str


class BackendErrorBody(BaseModel):
    """Error envelope returned by the API; every field is optional."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    code: Optional[str] = None
    error_code: Optional[str] = None
    error_id: Optional[str] = Field(default=None, alias="errorId")
    errors: Optional[List[ErrorItem]] = None
    id: Optional[str] = None
    message: Optional[str] = None
    timestamp: Optional[int] = None


class BackendError(RevolutError):
    def __init__(self, body: BackendErrorBody, status_code: Optional[int] = None) -> None:
        parts = [body.message or body.error_code or body.code or "backend error"]
        if status_code is not None:
            parts.append(f"(status: {status_code})")
        if body.error_id:
            parts.append(f"[error_id: {body.error_id}]")
        super().__init__(" ".join(parts))
        self.body = body
        self.status_code = status_code
