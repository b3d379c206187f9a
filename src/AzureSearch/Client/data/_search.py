# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level REST client for a search service.

:class:`_SearchServiceClient` composes versioned URLs, attaches the API key
and product identifier to every request, normalizes every failure into an
:class:`~AzureSearch.Client.core.errors.HttpError`, and implements the
resource, query and batch primitives used by the operation namespaces.
"""

from __future__ import annotations

import platform
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..__version__ import __version__
from ..common.constants import (
    API_VERSION,
    DATA_SOURCES,
    DEFAULT_CLOUD_SUFFIX,
    HEADER_API_KEY,
    HEADER_ETAG,
    HEADER_IF_MATCH,
    HEADER_USER_AGENT,
    INDEXERS,
    INDEXES,
)
from ..core._auth import _ApiKeyAuth
from ..core._error_codes import (
    HTTP_INVALID_BODY,
    HTTP_NETWORK,
    TRANSIENT_STATUS_CODES,
    VALIDATION_EMPTY_NAME,
    VALIDATION_EMPTY_NEXT_LINK,
    VALIDATION_INVALID_DOCUMENT,
    http_subcode,
)
from ..core._http import _HttpClient
from ..core.config import SearchConfig
from ..core.errors import (
    HttpError,
    PreconditionFailedError,
    ResourceNotFoundError,
    ValidationError,
    extract_error_message,
)
from ..core.results import DOCUMENT_FAILURE_PREFIX, BatchOutcome
from ..core.telemetry import create_telemetry_manager
from ..models.index import Index
from ..models.query_response import QueryResponse
from ..models.resource import ResourceContent

_USER_AGENT_PRODUCT = f"azsearch-simple-client/{__version__}"


def _build_user_agent(prefix: Optional[str] = None) -> str:
    ua = f"{_USER_AGENT_PRODUCT} Python/{platform.python_version()} ({platform.platform()})"
    if prefix:
        return f"{prefix.strip()} {ua}"
    return ua


def _require_name(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} is required", subcode=VALIDATION_EMPTY_NAME)
    return value


def _response_header(response: Any, name: str) -> Optional[str]:
    headers = getattr(response, "headers", None) or {}
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for k, v in headers.items():
        if isinstance(k, str) and k.lower() == lowered:
            return v
    return None


class _SearchServiceClient:
    """
    Search service REST client: resources, document queries and single-item batches.

    :param auth: API key holder.
    :type auth: ~AzureSearch.Client.core._auth._ApiKeyAuth
    :param service_name: Search service name (the host label).
    :type service_name: str
    :param cloud_suffix: DNS suffix of the cloud hosting the service. Defaults to
        the public cloud suffix ``search.windows.net``.
    :type cloud_suffix: str or None
    :param config: Client configuration.
    :type config: ~AzureSearch.Client.core.config.SearchConfig or None
    :param session: Optional requests session shared by all calls.
    :type session: requests.Session or None
    :param user_agent: Precomputed ``User-Agent``; built from ``config`` when omitted.
    :type user_agent: str or None
    """

    def __init__(
        self,
        auth: _ApiKeyAuth,
        service_name: str,
        cloud_suffix: Optional[str] = None,
        config: Optional[SearchConfig] = None,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.auth = auth
        self.service_name = _require_name(service_name, "service_name").strip()
        self.cloud_suffix = cloud_suffix or DEFAULT_CLOUD_SUFFIX
        self.config = config or SearchConfig.default()
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)
        self._telemetry = create_telemetry_manager(self.config.telemetry)
        self.user_agent = user_agent or _build_user_agent(self.config.user_agent)

    def close(self) -> None:
        self._http.close()

    # ----------------------------- URL / headers -----------------------------
    def _build_url(self, path: str, query: str = "") -> str:
        """Compose ``https://{service}.{suffix}/{path}?api-version=...{&query}``."""
        if query and not query.startswith("&"):
            query = "&" + query
        return f"https://{self.service_name}.{self.cloud_suffix}/{path}?api-version={API_VERSION}{query}"

    def _headers(self, etag: Optional[str] = None) -> Dict[str, str]:
        headers = dict(self._telemetry.get_additional_headers())
        headers[HEADER_API_KEY] = self.auth.key
        headers[HEADER_USER_AGENT] = self.user_agent
        if etag:
            headers[HEADER_IF_MATCH] = etag
        return headers

    # ------------------------------- Transport -------------------------------
    def _http_error(self, response: Any, url: str) -> HttpError:
        status = response.status_code
        failure = requests.exceptions.HTTPError(f"Request failed with status code {status}", response=response)
        message = extract_error_message(failure)
        if status == 404:
            cls = ResourceNotFoundError
        elif status == 412:
            cls = PreconditionFailedError
        else:
            cls = HttpError
        return cls(
            message,
            status_code=status,
            is_transient=status in TRANSIENT_STATUS_CODES,
            subcode=http_subcode(status),
            request_id=_response_header(response, "request-id"),
            url=url,
        )

    def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        resource_name: Optional[str] = None,
        etag: Optional[str] = None,
        **kwargs: Any,
    ):
        """Send one request; raise :class:`HttpError` for network failures and statuses >= 400."""
        headers = self._headers(etag)
        with self._telemetry.trace_request(operation, method.upper(), url, self.service_name, resource_name) as ctx:
            try:
                r = self._http._request(method, url, headers=headers, **kwargs)
            except requests.exceptions.RequestException as e:
                raise HttpError(extract_error_message(e), subcode=HTTP_NETWORK, url=url) from e
            self._telemetry.record_response(ctx, r.status_code, request_id=_response_header(r, "request-id"))
            if r.status_code >= 400:
                raise self._http_error(r, url)
            return r

    def _json(self, response: Any, url: str) -> Any:
        """Parse a JSON body; an empty body yields None."""
        if not getattr(response, "text", None):
            return None
        try:
            return response.json()
        except ValueError as e:
            raise HttpError(
                extract_error_message(e),
                status_code=response.status_code,
                subcode=HTTP_INVALID_BODY,
                url=url,
            ) from e

    def _get(self, path: str, query: str = "", *, operation: str, resource_name: Optional[str] = None):
        return self._get_url(self._build_url(path, query), operation=operation, resource_name=resource_name)

    def _get_url(self, url: str, *, operation: str, resource_name: Optional[str] = None):
        r = self._request("get", url, operation=operation, resource_name=resource_name)
        return self._json(r, url), r

    def _post(self, path: str, body: Any, *, operation: str, resource_name: Optional[str] = None):
        url = self._build_url(path)
        r = self._request("post", url, operation=operation, resource_name=resource_name, json=body)
        return self._json(r, url), r

    def _put(
        self,
        path: str,
        body: Any,
        etag: Optional[str] = None,
        *,
        operation: str,
        resource_name: Optional[str] = None,
    ):
        url = self._build_url(path)
        r = self._request("put", url, operation=operation, resource_name=resource_name, etag=etag, json=body)
        return self._json(r, url), r

    # ------------------------------- Resources -------------------------------
    @staticmethod
    def _collection_items(body: Any) -> List[Dict[str, Any]]:
        items = body.get("value") if isinstance(body, dict) else None
        if not isinstance(items, list):
            return []
        return [i for i in items if isinstance(i, dict)]

    def _list_indexes(self) -> List[Index]:
        body, _ = self._get(INDEXES, "$select=name,fields", operation="resources.list_indexes")
        return [Index.from_api_response(i) for i in self._collection_items(body)]

    def _list_names(self, collection: str) -> List[str]:
        body, _ = self._get(collection, "$select=name", operation=f"resources.list_{collection}")
        return [i.get("name") for i in self._collection_items(body)]

    def _list_data_sources(self) -> List[str]:
        return self._list_names(DATA_SOURCES)

    def _list_indexers(self) -> List[str]:
        return self._list_names(INDEXERS)

    def _get_resource(self, resource_type: str, name: str) -> ResourceContent:
        _require_name(resource_type, "resource_type")
        _require_name(name, "name")
        body, r = self._get(f"{resource_type}/{name}", operation="resources.get", resource_name=name)
        return ResourceContent(content=body if body is not None else {}, etag=_response_header(r, HEADER_ETAG))

    def _update_resource(self, resource_type: str, name: str, content: Any, etag: Optional[str] = None) -> None:
        _require_name(resource_type, "resource_type")
        _require_name(name, "name")
        self._put(f"{resource_type}/{name}", content, etag, operation="resources.update", resource_name=name)
        return None

    # -------------------------------- Queries --------------------------------
    def _query(self, index_name: str, query: str = "", raw: bool = False) -> QueryResponse:
        _require_name(index_name, "index_name")
        body, _ = self._get(f"{INDEXES}/{index_name}/docs", query or "", operation="documents.query", resource_name=index_name)
        return QueryResponse.from_api_response(body, raw=raw)

    def _query_next(self, next_link: str) -> QueryResponse:
        if not isinstance(next_link, str) or not next_link.strip():
            raise ValidationError("next_link is required", subcode=VALIDATION_EMPTY_NEXT_LINK)
        body, _ = self._get_url(next_link, operation="documents.query_next")
        return QueryResponse.from_api_response(body)

    def _lookup(self, index_name: str, key: str) -> Dict[str, Any]:
        _require_name(index_name, "index_name")
        encoded_key = quote(str(key), safe="")
        body, _ = self._get(f"{INDEXES}/{index_name}/docs/{encoded_key}", operation="documents.lookup", resource_name=index_name)
        return body if isinstance(body, dict) else {}

    # --------------------------------- Batch ---------------------------------
    def _index_batch(self, index_name: str, batch: Dict[str, Any]) -> BatchOutcome:
        """
        Submit a single-action batch and validate the per-item result.

        Validation order: transport failure (re-raised with a
        ``"Failed to process document: "`` prefix), then entry count, then the
        entry's ``status``.

        :raises ~AzureSearch.Client.core.errors.HttpError: Transport failure.
        :raises ~AzureSearch.Client.core.errors.BatchProtocolError: Response does not hold exactly one entry.
        :raises ~AzureSearch.Client.core.errors.DocumentRejectedError: The entry's status is false.
        """
        _require_name(index_name, "index_name")
        actions = batch.get("value") if isinstance(batch, dict) else None
        if not isinstance(actions, list) or len(actions) != 1:
            raise ValidationError("batch must contain exactly one action", subcode=VALIDATION_INVALID_DOCUMENT)

        try:
            body, _ = self._post(f"{INDEXES}/{index_name}/docs/index", batch, operation="documents.index", resource_name=index_name)
        except HttpError as e:
            raise e.with_prefix(DOCUMENT_FAILURE_PREFIX) from e

        outcome = BatchOutcome.from_response(body)
        outcome.raise_for_outcome()
        return outcome
