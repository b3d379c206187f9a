# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for document batch submissions.

A batch submitted by this client always carries exactly one action, so the
service response has three terminal outcomes:

- :attr:`BatchOutcomeKind.SUCCESS`: one entry whose ``status`` is true.
- :attr:`BatchOutcomeKind.PROTOCOL_VIOLATION`: zero, or two or more, entries.
- :attr:`BatchOutcomeKind.ITEM_REJECTED`: one entry whose ``status`` is false.

:meth:`BatchOutcome.from_response` classifies a response body without raising;
:meth:`BatchOutcome.raise_for_outcome` turns a failed outcome into the
matching :class:`~AzureSearch.Client.core.errors.DocumentBatchError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import BatchProtocolError, DocumentRejectedError

UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from service while attempting to process document"
DOCUMENT_FAILURE_PREFIX = "Failed to process document: "


class BatchOutcomeKind(str, Enum):
    SUCCESS = "success"
    PROTOCOL_VIOLATION = "protocol_violation"
    ITEM_REJECTED = "item_rejected"


@dataclass(frozen=True)
class BatchOutcome:
    """
    Classified result of a single-action document batch.

    :param kind: Terminal outcome.
    :type kind: BatchOutcomeKind
    :param message: Failure message; ``None`` on success.
    :type message: str | None
    :param key: Document key reported by the service entry, when present.
    :param status_code: Per-item status code reported by the service entry, when present.
    :type status_code: int | None
    """

    kind: BatchOutcomeKind
    message: Optional[str] = None
    key: Any = None
    status_code: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.kind is BatchOutcomeKind.SUCCESS

    @classmethod
    def from_response(cls, body: Any) -> "BatchOutcome":
        """
        Classify a batch response envelope (``{"value": [entry, ...]}``).

        A missing or malformed ``value`` list counts as a protocol violation.
        The first entry is never picked out of a multi-entry response.

        :param body: Parsed JSON body of the batch response.
        :return: The classified outcome.
        :rtype: BatchOutcome
        """
        entries = body.get("value") if isinstance(body, dict) else None
        if not isinstance(entries, list) or len(entries) != 1 or not isinstance(entries[0], dict):
            return cls(BatchOutcomeKind.PROTOCOL_VIOLATION, message=UNEXPECTED_RESPONSE_MESSAGE)

        entry = entries[0]
        key = entry.get("key")
        status_code = entry.get("statusCode")
        if not entry.get("status"):
            return cls(
                BatchOutcomeKind.ITEM_REJECTED,
                message=f"{DOCUMENT_FAILURE_PREFIX}{entry.get('errorMessage')}",
                key=key,
                status_code=status_code,
            )
        return cls(BatchOutcomeKind.SUCCESS, key=key, status_code=status_code)

    def raise_for_outcome(self) -> None:
        """
        Raise the error matching a failed outcome; do nothing on success.

        :raises ~AzureSearch.Client.core.errors.BatchProtocolError: For a protocol violation.
        :raises ~AzureSearch.Client.core.errors.DocumentRejectedError: For a rejected item.
        """
        if self.kind is BatchOutcomeKind.PROTOCOL_VIOLATION:
            raise BatchProtocolError(self.message or UNEXPECTED_RESPONSE_MESSAGE)
        if self.kind is BatchOutcomeKind.ITEM_REJECTED:
            raise DocumentRejectedError(self.message or DOCUMENT_FAILURE_PREFIX, key=self.key, status_code=self.status_code)


__all__ = [
    "BatchOutcome",
    "BatchOutcomeKind",
    "UNEXPECTED_RESPONSE_MESSAGE",
    "DOCUMENT_FAILURE_PREFIX",
]
