# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Query response model.

Wraps one page of document query results with dict-like access to the raw
body and typed access to the continuation fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, TYPE_CHECKING

from ..common.constants import (
    NEXT_LINK,
    NEXT_PAGE_PARAMETERS,
    ODATA_COUNT,
    ODATA_NEXT_LINK,
    SEARCH_NEXT_PAGE_PARAMETERS,
)

if TYPE_CHECKING:
    import pandas as pd


def fixup_query_response(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``body`` with normalized continuation keys.

    ``@odata.nextLink`` is copied to ``nextLink`` and
    ``@search.nextPageParameters`` to ``nextPageParameters``. Both keys are
    always present in the result (``None`` when the vendor field is absent).
    The vendor keys are left untouched.

    :param body: Parsed query response body.
    :type body: dict[str, Any]
    :return: New dictionary including the normalized keys.
    :rtype: dict[str, Any]
    """
    fixed = dict(body)
    fixed[NEXT_LINK] = body.get(ODATA_NEXT_LINK)
    fixed[NEXT_PAGE_PARAMETERS] = body.get(SEARCH_NEXT_PAGE_PARAMETERS)
    return fixed


@dataclass
class QueryResponse:
    """
    One page of results from a document query.

    Dict-like access reaches the response body as returned (plus the
    normalized ``nextLink`` / ``nextPageParameters`` keys when the response
    was fixed up).

    :param data: Response body.
    :type data: dict[str, Any]

    Example:
        Walk every page::

            page = client.documents.query("hotels", "search=spa&$top=50")
            while True:
                for doc in page.value:
                    print(doc["hotelName"])
                if not page.has_more:
                    break
                page = client.documents.query_next(page.next_link)
    """

    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def value(self) -> List[Dict[str, Any]]:
        """Documents in this page."""
        return list(self.data.get("value") or [])

    @property
    def next_link(self) -> Optional[str]:
        """Absolute continuation URL; ``None`` on the last page or for a raw response."""
        return self.data.get(NEXT_LINK)

    @property
    def next_page_parameters(self) -> Optional[Dict[str, Any]]:
        """Opaque parameters needed to resume a POST-based continuation."""
        return self.data.get(NEXT_PAGE_PARAMETERS)

    @property
    def count(self) -> Optional[int]:
        """Total match count when the query asked for ``$count=true``."""
        return self.data.get(ODATA_COUNT)

    @property
    def has_more(self) -> bool:
        return self.next_link is not None

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def keys(self):
        return self.data.keys()

    def items(self):
        return self.data.items()

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain copy of the response body."""
        return dict(self.data)

    def to_dataframe(self) -> "pd.DataFrame":
        """
        Return this page's documents as a DataFrame.

        ``@search.*`` annotations (score, highlights) are dropped from each row.

        :rtype: pandas.DataFrame
        """
        from ..utils._pandas import documents_to_dataframe

        return documents_to_dataframe(self.value)

    @classmethod
    def from_api_response(cls, body: Any, *, raw: bool = False) -> "QueryResponse":
        """
        Build a response from a parsed body, applying the fixup unless ``raw``.

        :param body: Parsed JSON body.
        :param raw: Keep the vendor shape untouched.
        :type raw: bool
        :rtype: QueryResponse
        """
        data = body if isinstance(body, dict) else {}
        return cls(data=dict(data) if raw else fixup_query_response(data))


__all__ = ["QueryResponse", "fixup_query_response"]
