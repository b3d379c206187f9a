# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions for the search client and the error message normalizer.

All failures surfaced to callers derive from :class:`SearchError`. Transport
failures are raised as :class:`HttpError` (or one of its status-specific
subclasses) carrying a single human-readable message produced by
:func:`extract_error_message`.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Mapping, Optional

from ._error_codes import (
    BATCH_ITEM_REJECTED,
    BATCH_UNEXPECTED_ENTRY_COUNT,
)


class SearchError(Exception):
    """Base structured error for the search client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(SearchError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class HttpError(SearchError):
    """
    A failed request to the search service.

    Raised for network failures (``status_code`` is ``None``), non-success
    HTTP statuses and response bodies that cannot be parsed. The message is
    always the normalized one; the underlying exception is chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        request_id: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if request_id is not None:
            d["request_id"] = request_id
        if url is not None:
            d["url"] = url
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server" if status_code is not None else "client",
            is_transient=is_transient,
        )

    def with_prefix(self, prefix: str) -> "HttpError":
        """Return a copy of this error (same class) whose message starts with ``prefix``."""
        return type(self)(
            f"{prefix}{self.message}",
            status_code=self.status_code,
            is_transient=self.is_transient,
            subcode=self.subcode,
            details=dict(self.details),
        )


class ResourceNotFoundError(HttpError):
    """The named resource or document does not exist (HTTP 404)."""


class PreconditionFailedError(HttpError):
    """A conditional write was rejected because the ETag is stale (HTTP 412)."""


class DocumentBatchError(SearchError):
    """Base class for failures reported in a document batch response."""

    def __init__(
        self,
        message: str,
        *,
        subcode: str,
        key: Any = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            message,
            code="batch_error",
            subcode=subcode,
            status_code=status_code,
            details={"key": key} if key is not None else None,
            source="server",
        )
        self.key = key


class BatchProtocolError(DocumentBatchError):
    """The batch response did not contain exactly one result entry."""

    def __init__(self, message: str) -> None:
        super().__init__(message, subcode=BATCH_UNEXPECTED_ENTRY_COUNT)


class DocumentRejectedError(DocumentBatchError):
    """The service rejected the single document in the batch."""

    def __init__(self, message: str, *, key: Any = None, status_code: Optional[int] = None) -> None:
        super().__init__(message, subcode=BATCH_ITEM_REJECTED, key=key, status_code=status_code)


def _response_body(response: Any) -> Any:
    data = getattr(response, "data", None)
    if isinstance(data, Mapping):
        return data
    json_func = getattr(response, "json", None)
    if callable(json_func):
        return json_func()
    return None


def _service_message(error: Any) -> Optional[str]:
    response = getattr(error, "response", None)
    if response is None:
        return None
    body = _response_body(response)
    if not isinstance(body, Mapping):
        return None
    err = body.get("error")
    if not isinstance(err, Mapping):
        return None
    message = err.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def extract_error_message(error: Any) -> str:
    """
    Reduce an arbitrary transport failure to a single message.

    The service error envelope (``{"error": {"message": ...}}``) wins when the
    failure carries a response with such a body; otherwise the result is
    ``"Error: "`` followed by the failure's own message.

    This function never raises.

    :param error: Exception (or any object) describing the failure.
    :return: Human-readable message.
    :rtype: str

    Example::

        >>> extract_error_message(ConnectionError("net down"))
        'Error: net down'
    """
    try:
        message = _service_message(error)
        if message is not None:
            return message
    except Exception:
        pass

    try:
        text = getattr(error, "message", None)
        if not isinstance(text, str) or not text:
            text = str(error)
        if not text:
            text = type(error).__name__
        return f"Error: {text}"
    except Exception:
        return "Error: unknown error"


__all__ = [
    "SearchError",
    "ValidationError",
    "HttpError",
    "ResourceNotFoundError",
    "PreconditionFailedError",
    "DocumentBatchError",
    "BatchProtocolError",
    "DocumentRejectedError",
    "extract_error_message",
]
