# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Resource definition operations namespace."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..models.index import Index
from ..models.resource import ResourceContent

if TYPE_CHECKING:
    from ..client import SearchClient


class ResourceOperations:
    """
    Listing, fetching and updating service resources.

    Accessed via ``client.resources``. Resource types are the collection
    names used in the REST paths (``"indexes"``, ``"datasources"``,
    ``"indexers"``, ``"skillsets"``, ``"synonymmaps"``); constants live in
    :mod:`AzureSearch.Client.common.constants`.

    Example:
        List and edit an indexer::

            for name in client.resources.list_indexers():
                print(name)

            content, etag = client.resources.get("indexers", "hotels-indexer")
            content["schedule"] = {"interval": "PT2H"}
            client.resources.update("indexers", "hotels-indexer", content, etag)
    """

    def __init__(self, client: "SearchClient") -> None:
        """
        Initialize ResourceOperations.

        :param client: Parent SearchClient instance.
        :type client: SearchClient
        """
        self._client = client

    def list_indexes(self) -> List[Index]:
        """
        List indexes with their fields, in the order the service returns them.

        :return: Index snapshots (name and fields only).
        :rtype: list[~AzureSearch.Client.models.index.Index]
        :raises ~AzureSearch.Client.core.errors.HttpError: If the request fails.
        """
        return self._client._get_search()._list_indexes()

    def list_data_sources(self) -> List[str]:
        """
        List data source names in service order.

        :rtype: list[str]
        :raises ~AzureSearch.Client.core.errors.HttpError: If the request fails.
        """
        return self._client._get_search()._list_data_sources()

    def list_indexers(self) -> List[str]:
        """
        List indexer names in service order.

        :rtype: list[str]
        :raises ~AzureSearch.Client.core.errors.HttpError: If the request fails.
        """
        return self._client._get_search()._list_indexers()

    def get(self, resource_type: str, name: str) -> ResourceContent:
        """
        Fetch a resource definition together with its ETag.

        :param resource_type: Collection name, e.g. ``"indexes"``.
        :type resource_type: str
        :param name: Resource name.
        :type name: str
        :return: The definition and ETag; unpacks as ``(content, etag)``.
        :rtype: ~AzureSearch.Client.models.resource.ResourceContent
        :raises ~AzureSearch.Client.core.errors.ValidationError: If either name is empty.
        :raises ~AzureSearch.Client.core.errors.ResourceNotFoundError: If the resource does not exist.
        :raises ~AzureSearch.Client.core.errors.HttpError: For any other failure.
        """
        return self._client._get_search()._get_resource(resource_type, name)

    def update(
        self,
        resource_type: str,
        name: str,
        content: Dict[str, Any],
        etag: Optional[str] = None,
    ) -> None:
        """
        Create or replace a resource definition.

        When ``etag`` is given the write is sent with ``if-match`` and the
        service rejects it if the definition changed since it was read. No
        retry is attempted.

        :param resource_type: Collection name, e.g. ``"indexers"``.
        :type resource_type: str
        :param name: Resource name.
        :type name: str
        :param content: Full resource definition.
        :type content: dict
        :param etag: ETag returned by :meth:`get`.
        :type etag: str or None
        :raises ~AzureSearch.Client.core.errors.PreconditionFailedError: If ``etag`` is stale.
        :raises ~AzureSearch.Client.core.errors.HttpError: For any other failure.
        """
        self._client._get_search()._update_resource(resource_type, name, content, etag)


__all__ = ["ResourceOperations"]
