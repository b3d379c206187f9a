# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional, Union

import requests

from azure.core.credentials import AzureKeyCredential

from .core._auth import _ApiKeyAuth
from .core.config import SearchConfig
from .data._search import _SearchServiceClient, _build_user_agent
from .operations.documents import DocumentOperations
from .operations.resources import ResourceOperations


class SearchClient:
    """
    High-level client for one search service.

    Holds an immutable configuration (service name, API key, cloud suffix and
    a ``User-Agent`` computed once) and issues independent, single-shot
    requests. Nothing is cached between calls and no request is retried.

    **Context Manager Support**:
        Using the client as a context manager reuses one HTTP session for all
        calls and closes it on exit::

            with SearchClient("my-service", api_key) as client:
                for index in client.resources.list_indexes():
                    print(index.name)

    Operations are organized under namespaces:

    - ``client.resources``: list indexes, data sources and indexers; get and update definitions
    - ``client.documents``: query, continue, look up, upload and delete documents

    :param service_name: Search service name, e.g. ``"my-service"`` for
        ``https://my-service.search.windows.net``.
    :type service_name: :class:`str`
    :param api_key: Admin or query key, as a string or
        :class:`~azure.core.credentials.AzureKeyCredential`.
    :type api_key: :class:`str` | ~azure.core.credentials.AzureKeyCredential
    :param cloud_suffix: DNS suffix for sovereign clouds. Defaults to ``search.windows.net``.
    :type cloud_suffix: :class:`str` | None
    :param config: Optional timeout, user agent and telemetry settings.
    :type config: ~AzureSearch.Client.core.config.SearchConfig or None

    :raises ValueError: If ``service_name`` or ``api_key`` is empty.

    Example::

        from AzureSearch.Client.client import SearchClient

        client = SearchClient("my-service", "<admin-key>")
        try:
            page = client.documents.query("hotels", "search=spa")
            client.documents.upload("hotels", {"hotelId": "42", "rating": 5}, create_new=True)
        finally:
            client.close()
    """

    def __init__(
        self,
        service_name: str,
        api_key: Union[str, AzureKeyCredential],
        cloud_suffix: Optional[str] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        self._service_name = (service_name or "").strip()
        if not self._service_name:
            raise ValueError("service_name is required.")
        self.auth = _ApiKeyAuth(api_key)
        self._cloud_suffix = cloud_suffix
        self._config = config or SearchConfig.default()
        # Computed once; reused whenever the REST client is rebuilt
        self._user_agent = _build_user_agent(self._config.user_agent)
        self._search: Optional[_SearchServiceClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        self.resources = ResourceOperations(self)
        self.documents = DocumentOperations(self)

    @property
    def service_name(self) -> str:
        return self._service_name

    def __enter__(self) -> "SearchClient":
        """
        Enter the context manager, creating an HTTP session for connection reuse.

        :return: The client instance.
        :rtype: SearchClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild lazily so the low-level client picks up the session
            if self._search is not None:
                self._search.close()
                self._search = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the HTTP session, if any. Safe to call multiple times.
        """
        if self._search is not None:
            self._search.close()
            self._search = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_search(self) -> _SearchServiceClient:
        """
        Get or create the internal REST client instance.

        :rtype: ~AzureSearch.Client.data._search._SearchServiceClient
        """
        if self._search is None:
            self._search = _SearchServiceClient(
                self.auth,
                self._service_name,
                self._cloud_suffix,
                self._config,
                session=self._session,
                user_agent=self._user_agent,
            )
        return self._search


__all__ = ["SearchClient"]
