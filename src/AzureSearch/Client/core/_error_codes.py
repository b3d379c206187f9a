# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Subcode constants attached to :mod:`~AzureSearch.Client.core.errors` exceptions."""

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_412 = "http_412"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

# Failures without an HTTP status (DNS, connection reset, timeouts, bad JSON)
HTTP_NETWORK = "http_network"
HTTP_INVALID_BODY = "http_invalid_body"

TRANSIENT_STATUS_CODES = {429, 502, 503, 504}

# Validation subcodes
VALIDATION_EMPTY_NAME = "validation_empty_name"
VALIDATION_EMPTY_NEXT_LINK = "validation_empty_next_link"
VALIDATION_INVALID_DOCUMENT = "validation_invalid_document"

# Document batch subcodes
BATCH_UNEXPECTED_ENTRY_COUNT = "batch_unexpected_entry_count"
BATCH_ITEM_REJECTED = "batch_item_rejected"


def http_subcode(status_code: int) -> str:
    """Return the ``http_<status>`` subcode for a status code."""
    return f"http_{status_code}"
