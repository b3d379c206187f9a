# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the search service REST API.

The API version is fixed for the lifetime of the package; it is never
negotiated with the service.
"""

API_VERSION = "2019-05-06"
DEFAULT_CLOUD_SUFFIX = "search.windows.net"

# Resource collections addressable as "{type}/{name}"
INDEXES = "indexes"
DATA_SOURCES = "datasources"
INDEXERS = "indexers"
SKILLSETS = "skillsets"
SYNONYM_MAPS = "synonymmaps"

# Request headers
HEADER_API_KEY = "api-key"
HEADER_USER_AGENT = "User-Agent"
HEADER_IF_MATCH = "if-match"
HEADER_ETAG = "ETag"

# Vendor annotations in document payloads
SEARCH_ACTION = "@search.action"
ODATA_NEXT_LINK = "@odata.nextLink"
ODATA_COUNT = "@odata.count"
SEARCH_NEXT_PAGE_PARAMETERS = "@search.nextPageParameters"

# Normalized continuation keys written by the query fixup
NEXT_LINK = "nextLink"
NEXT_PAGE_PARAMETERS = "nextPageParameters"

# Document batch actions
ACTION_UPLOAD = "upload"
ACTION_MERGE = "merge"
ACTION_MERGE_OR_UPLOAD = "mergeOrUpload"
ACTION_DELETE = "delete"

# OpenTelemetry span attribute names
OTEL_ATTR_DB_SYSTEM = "db.system"
OTEL_ATTR_DB_OPERATION = "db.operation"
OTEL_ATTR_HTTP_METHOD = "http.request.method"
OTEL_ATTR_HTTP_URL = "url.full"
OTEL_ATTR_HTTP_STATUS_CODE = "http.response.status_code"
OTEL_ATTR_SEARCH_SERVICE = "azsearch.service"
OTEL_ATTR_SEARCH_RESOURCE = "azsearch.resource"
