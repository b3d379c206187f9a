# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Fluent builder for document query strings.

:meth:`~AzureSearch.Client.operations.documents.DocumentOperations.query` appends
its query fragment verbatim, leaving encoding to the caller. The builder
produces a correctly encoded fragment from structured parts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, List, Optional, TYPE_CHECKING
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from .query_response import QueryResponse

_SEARCH_MODES = ("any", "all")
_QUERY_TYPES = ("simple", "full")


@dataclass
class SearchQueryBuilder:
    """
    Fluent interface for building a document query string.

    :param index_name: Index the query targets.
    :type index_name: str

    Example:
        Build and execute through the client::

            page = (client.documents.builder("hotels")
                    .search("beach")
                    .filter_eq("category", "Resort")
                    .select("hotelId", "hotelName")
                    .order_by("rating", descending=True)
                    .top(10)
                    .execute())

        Build a standalone fragment::

            qs = SearchQueryBuilder("hotels").search("spa").top(5).build()
            # 'search=spa&$top=5'
    """

    index_name: str
    _search: Optional[str] = None
    _search_mode: Optional[str] = None
    _query_type: Optional[str] = None
    _filter: List[str] = field(default_factory=list)
    _select: List[str] = field(default_factory=list)
    _orderby: List[str] = field(default_factory=list)
    _top: Optional[int] = None
    _skip: Optional[int] = None
    _count: bool = False
    _document_ops: Any = field(default=None, compare=False, repr=False)

    def search(self, text: str, *, mode: Optional[str] = None, query_type: Optional[str] = None) -> "SearchQueryBuilder":
        """
        Set the full-text search expression.

        :param text: Search text; ``"*"`` matches every document.
        :type text: str
        :param mode: ``"any"`` or ``"all"``.
        :type mode: str or None
        :param query_type: ``"simple"`` or ``"full"`` (Lucene syntax).
        :type query_type: str or None
        :return: Self for method chaining.
        :raises ValueError: If ``mode`` or ``query_type`` is not recognised.
        """
        if mode is not None and mode not in _SEARCH_MODES:
            raise ValueError(f"mode must be one of {_SEARCH_MODES}")
        if query_type is not None and query_type not in _QUERY_TYPES:
            raise ValueError(f"query_type must be one of {_QUERY_TYPES}")
        self._search = text
        self._search_mode = mode
        self._query_type = query_type
        return self

    def filter(self, expression: str) -> "SearchQueryBuilder":
        """
        Add a raw OData filter expression; multiple filters are joined with ``and``.

        :param expression: OData ``$filter`` expression.
        :type expression: str
        :return: Self for method chaining.
        """
        self._filter.append(expression)
        return self

    def filter_eq(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        """Add equality filter (field eq value)."""
        self._filter.append(f"{field_name} eq {self._format_value(value)}")
        return self

    def filter_ne(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        """Add not-equal filter (field ne value)."""
        self._filter.append(f"{field_name} ne {self._format_value(value)}")
        return self

    def filter_gt(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        self._filter.append(f"{field_name} gt {self._format_value(value)}")
        return self

    def filter_ge(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        self._filter.append(f"{field_name} ge {self._format_value(value)}")
        return self

    def filter_lt(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        self._filter.append(f"{field_name} lt {self._format_value(value)}")
        return self

    def filter_le(self, field_name: str, value: Any) -> "SearchQueryBuilder":
        self._filter.append(f"{field_name} le {self._format_value(value)}")
        return self

    def select(self, *fields: str) -> "SearchQueryBuilder":
        """
        Restrict the fields returned for each document.

        :param fields: Field names.
        :type fields: str
        :return: Self for method chaining.
        """
        self._select.extend(fields)
        return self

    def order_by(self, field_name: str, descending: bool = False) -> "SearchQueryBuilder":
        """
        Add a sort clause.

        :param field_name: Sortable field name.
        :type field_name: str
        :param descending: Sort descending when True.
        :type descending: bool
        :return: Self for method chaining.
        """
        self._orderby.append(f"{field_name} {'desc' if descending else 'asc'}")
        return self

    def top(self, count: int) -> "SearchQueryBuilder":
        """
        Limit the number of documents returned.

        :raises ValueError: If ``count`` is less than 1.
        """
        if count < 1:
            raise ValueError("top count must be at least 1")
        self._top = count
        return self

    def skip(self, count: int) -> "SearchQueryBuilder":
        """
        Skip the first ``count`` documents.

        :raises ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError("skip count must not be negative")
        self._skip = count
        return self

    def include_count(self, enabled: bool = True) -> "SearchQueryBuilder":
        """Ask the service for the total match count (``$count=true``)."""
        self._count = enabled
        return self

    @staticmethod
    def _format_value(value: Any) -> str:
        """
        Format a value as an OData literal.

        :param value: Value to format.
        :return: OData-formatted value string.
        :rtype: str
        """
        if value is None:
            return "null"
        if isinstance(value, str):
            escaped = value.replace("'", "''")
            return f"'{escaped}'"
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, datetime):
            offset = value.utcoffset()
            if offset is None or offset == timedelta(0):
                # Edm.DateTimeOffset literals need an explicit zone; naive values are taken as UTC
                return value.replace(tzinfo=None).isoformat() + "Z"
            return value.isoformat()
        return str(value)

    def build(self) -> str:
        """
        Build the encoded query fragment.

        :return: Query string without a leading ``&``; empty when nothing was set.
        :rtype: str

        Example::

            SearchQueryBuilder("hotels").filter_eq("rating", 5).top(10).build()
            # '$filter=rating%20eq%205&$top=10'
        """
        params: List[tuple] = []
        if self._search is not None:
            params.append(("search", self._search))
        if self._search_mode is not None:
            params.append(("searchMode", self._search_mode))
        if self._query_type is not None:
            params.append(("queryType", self._query_type))
        if self._filter:
            params.append(("$filter", " and ".join(self._filter)))
        if self._select:
            params.append(("$select", ",".join(self._select)))
        if self._orderby:
            params.append(("$orderby", ",".join(self._orderby)))
        if self._top is not None:
            params.append(("$top", str(self._top)))
        if self._skip is not None:
            params.append(("$skip", str(self._skip)))
        if self._count:
            params.append(("$count", "true"))
        return urlencode(params, quote_via=quote, safe="$,*'")

    def execute(self, raw: bool = False) -> "QueryResponse":
        """
        Run the query and return the first page.

        Only available when the builder was created via
        ``client.documents.builder(index_name)``.

        :param raw: Return the vendor response shape untouched.
        :type raw: bool
        :return: First page of results.
        :rtype: ~AzureSearch.Client.models.query_response.QueryResponse
        :raises RuntimeError: If the builder is not bound to a client.
        """
        if self._document_ops is None:
            raise RuntimeError(
                "Cannot execute: query was not created via client.documents.builder(). "
                "Pass build() to client.documents.query() instead."
            )
        return self._document_ops.query(self.index_name, self.build(), raw=raw)


__all__ = ["SearchQueryBuilder"]
