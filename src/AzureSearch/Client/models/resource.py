# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional


@dataclass(frozen=True)
class ResourceContent:
    """
    Definition of a named resource paired with its concurrency token.

    Unpacks as a ``(content, etag)`` pair. Pass ``etag`` back to
    :meth:`~AzureSearch.Client.operations.resources.ResourceOperations.update` to
    make the write conditional on the definition being unchanged.

    :param content: Resource definition as returned by the service.
    :type content: dict[str, Any]
    :param etag: Value of the response ``ETag`` header, if any.
    :type etag: str | None

    Example::

        content, etag = client.resources.get("indexers", "hotels-indexer")
        content["description"] = "nightly"
        client.resources.update("indexers", "hotels-indexer", content, etag)
    """

    content: Dict[str, Any] = field(default_factory=dict)
    etag: Optional[str] = None

    def __iter__(self) -> Iterator[Any]:
        yield self.content
        yield self.etag


__all__ = ["ResourceContent"]
