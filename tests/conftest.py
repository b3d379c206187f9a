# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures for search client tests.

Provides a canned-response HTTP double and a factory for the low-level
REST client wired to it. No test touches the network.
"""

import json

import pytest

from AzureSearch.Client.core._auth import _ApiKeyAuth
from AzureSearch.Client.data._search import _SearchServiceClient


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status, headers=None, body=None):
        self.status_code = status
        self.headers = headers or {}
        if body is None:
            self.text = ""
        elif isinstance(body, str):
            self.text = body
        else:
            self.text = json.dumps(body)

    def json(self):
        return json.loads(self.text)


class RecordingHTTP:
    """Replays ``(status, headers, body)`` tuples (or raises queued exceptions) and records calls."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        status, headers, body = item
        return FakeResponse(status, headers, body)

    def close(self):
        pass


@pytest.fixture
def make_search():
    """Factory: build a _SearchServiceClient whose transport replays ``responses``."""

    def _make(responses=(), *, service_name="svc", api_key="test-key", cloud_suffix=None, config=None):
        client = _SearchServiceClient(_ApiKeyAuth(api_key), service_name, cloud_suffix, config)
        client._http = RecordingHTTP(responses)
        return client

    return _make


@pytest.fixture
def sample_index_body():
    """Index listing envelope as returned by the service."""
    return {
        "value": [
            {
                "name": "hotels",
                "fields": [
                    {"name": "hotelId", "type": "Edm.String", "key": True},
                    {"name": "hotelName", "type": "Edm.String", "key": False},
                ],
            },
            {"name": "airports", "fields": [{"name": "code", "type": "Edm.String", "key": True}]},
        ]
    }


@pytest.fixture
def sample_document():
    return {"id": "1", "title": "x"}
