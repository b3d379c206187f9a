# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Document query and write operations namespace."""

from __future__ import annotations

from typing import Any, Dict, TYPE_CHECKING

from ..models.document_action import delete_action, single_action_batch, upload_action
from ..models.query_builder import SearchQueryBuilder
from ..models.query_response import QueryResponse

if TYPE_CHECKING:
    import pandas as pd

    from ..client import SearchClient


class DocumentOperations:
    """
    Document queries and single-document writes against an index.

    Accessed via ``client.documents``. Pagination is driven by the caller:
    each further page needs an explicit :meth:`query_next` call, and a page
    whose ``next_link`` is ``None`` is the last one.

    Example:
        Query with a raw fragment and page through the results::

            page = client.documents.query("hotels", "search=*&$top=100")
            docs = page.value
            while page.has_more:
                page = client.documents.query_next(page.next_link)
                docs.extend(page.value)

        Write and delete a document::

            client.documents.upload("hotels", {"hotelId": "1", "rating": 4}, create_new=True)
            client.documents.delete("hotels", "hotelId", "1")
    """

    def __init__(self, client: "SearchClient") -> None:
        """
        Initialize DocumentOperations.

        :param client: Parent SearchClient instance.
        :type client: SearchClient
        """
        self._client = client

    def query(self, index_name: str, query_string: str = "", raw: bool = False) -> QueryResponse:
        """
        Run a document query.

        The fragment is appended to the request URL verbatim; encode filter and
        search text yourself or use :meth:`builder`.

        :param index_name: Index to query.
        :type index_name: str
        :param query_string: Query fragment such as ``"search=spa&$top=10"``.
        :type query_string: str
        :param raw: When True the body is returned with only the vendor field
            names (``@odata.nextLink``); otherwise ``nextLink`` and
            ``nextPageParameters`` are added.
        :type raw: bool
        :return: First page of results.
        :rtype: ~AzureSearch.Client.models.query_response.QueryResponse
        :raises ~AzureSearch.Client.core.errors.HttpError: If the request fails.
        """
        return self._client._get_search()._query(index_name, query_string, raw)

    def query_next(self, next_link: str) -> QueryResponse:
        """
        Fetch the page behind a ``next_link``.

        The link already encodes the path, API version and query; it is used as-is.
        The normalized continuation fields are always populated.

        :param next_link: Absolute URL from :attr:`QueryResponse.next_link`.
        :type next_link: str
        :rtype: ~AzureSearch.Client.models.query_response.QueryResponse
        :raises ~AzureSearch.Client.core.errors.ValidationError: If ``next_link`` is empty.
        :raises ~AzureSearch.Client.core.errors.HttpError: If the request fails.
        """
        return self._client._get_search()._query_next(next_link)

    def lookup(self, index_name: str, key: str) -> Dict[str, Any]:
        """
        Fetch a single document by key.

        :param index_name: Index holding the document.
        :type index_name: str
        :param key: Document key; URL-encoded by the client.
        :type key: str
        :return: The document.
        :rtype: dict
        :raises ~AzureSearch.Client.core.errors.ResourceNotFoundError: If no document has this key.
        """
        return self._client._get_search()._lookup(index_name, key)

    def builder(self, index_name: str) -> SearchQueryBuilder:
        """
        Create a query builder bound to this client.

        :param index_name: Index to query.
        :type index_name: str
        :rtype: ~AzureSearch.Client.models.query_builder.SearchQueryBuilder

        Example::

            page = client.documents.builder("hotels").search("spa").top(5).execute()
        """
        return SearchQueryBuilder(index_name, _document_ops=self)

    def query_dataframe(self, index_name: str, query_string: str = "") -> "pd.DataFrame":
        """
        Run a query and return the first page as a DataFrame.

        :param index_name: Index to query.
        :type index_name: str
        :param query_string: Query fragment, appended verbatim.
        :type query_string: str
        :rtype: pandas.DataFrame
        """
        return self.query(index_name, query_string).to_dataframe()

    def upload(self, index_name: str, document: Dict[str, Any], create_new: bool) -> None:
        """
        Write one document.

        The document is copied before the ``@search.action`` field is stamped;
        the caller's dict is left unchanged.

        :param index_name: Target index.
        :type index_name: str
        :param document: Document fields, including the key field.
        :type document: dict
        :param create_new: ``True`` to create the document if missing
            (``mergeOrUpload``), ``False`` to only merge into an existing one (``merge``).
        :type create_new: bool
        :raises ~AzureSearch.Client.core.errors.HttpError: Transport failure,
            with a ``"Failed to process document: "`` prefix.
        :raises ~AzureSearch.Client.core.errors.BatchProtocolError: The response
            did not contain exactly one result.
        :raises ~AzureSearch.Client.core.errors.DocumentRejectedError: The service
            rejected the document.
        """
        batch = single_action_batch(upload_action(document, create_new))
        self._client._get_search()._index_batch(index_name, batch)

    def delete(self, index_name: str, key_field: str, key: Any) -> None:
        """
        Delete one document by key.

        :param index_name: Target index.
        :type index_name: str
        :param key_field: Name of the index key field.
        :type key_field: str
        :param key: Key value.
        :raises ~AzureSearch.Client.core.errors.HttpError: Transport failure.
        :raises ~AzureSearch.Client.core.errors.BatchProtocolError: Unexpected response shape.
        :raises ~AzureSearch.Client.core.errors.DocumentRejectedError: The service rejected the delete.
        """
        batch = single_action_batch(delete_action(key_field, key))
        self._client._get_search()._index_batch(index_name, batch)


__all__ = ["DocumentOperations"]
