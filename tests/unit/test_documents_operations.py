# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for the DocumentOperations namespace."""

import unittest
from unittest.mock import MagicMock

import pandas as pd

from AzureSearch.Client.client import SearchClient
from AzureSearch.Client.core.errors import DocumentRejectedError
from AzureSearch.Client.models.query_builder import SearchQueryBuilder
from AzureSearch.Client.models.query_response import QueryResponse


class TestDocumentOperations(unittest.TestCase):
    def setUp(self):
        self.client = SearchClient("svc", "key")
        self.client._search = MagicMock()

    def test_query(self):
        page = QueryResponse({"value": []})
        self.client._search._query.return_value = page
        self.assertIs(self.client.documents.query("hotels", "search=*"), page)
        self.client._search._query.assert_called_once_with("hotels", "search=*", False)

    def test_query_raw(self):
        self.client.documents.query("hotels", "search=*", raw=True)
        self.client._search._query.assert_called_once_with("hotels", "search=*", True)

    def test_query_next(self):
        self.client.documents.query_next("https://svc.search.windows.net/indexes/h/docs?api-version=2019-05-06&$skip=50")
        self.client._search._query_next.assert_called_once()

    def test_caller_driven_paging(self):
        link = "https://svc.search.windows.net/indexes/h/docs?api-version=2019-05-06&$skip=1"
        self.client._search._query.return_value = QueryResponse.from_api_response(
            {"value": [{"id": "1"}], "@odata.nextLink": link}
        )
        self.client._search._query_next.return_value = QueryResponse.from_api_response({"value": [{"id": "2"}]})

        page = self.client.documents.query("h")
        docs = page.value
        while page.has_more:
            page = self.client.documents.query_next(page.next_link)
            docs.extend(page.value)

        self.assertEqual(docs, [{"id": "1"}, {"id": "2"}])
        self.client._search._query_next.assert_called_once_with(link)

    def test_lookup(self):
        self.client._search._lookup.return_value = {"id": "1"}
        self.assertEqual(self.client.documents.lookup("hotels", "1"), {"id": "1"})

    def test_builder_is_bound(self):
        qb = self.client.documents.builder("hotels")
        self.assertIsInstance(qb, SearchQueryBuilder)
        qb.search("spa").execute()
        self.client._search._query.assert_called_once_with("hotels", "search=spa", False)

    def test_upload_builds_single_action_batch(self):
        doc = {"id": "1", "title": "x"}
        self.client.documents.upload("hotels", doc, create_new=True)
        self.client._search._index_batch.assert_called_once_with(
            "hotels", {"value": [{"id": "1", "title": "x", "@search.action": "mergeOrUpload"}]}
        )
        self.assertEqual(doc, {"id": "1", "title": "x"})

    def test_delete_builds_minimal_batch(self):
        self.client.documents.delete("hotels", "id", "1")
        self.client._search._index_batch.assert_called_once_with(
            "hotels", {"value": [{"@search.action": "delete", "id": "1"}]}
        )

    def test_rejection_propagates(self):
        self.client._search._index_batch.side_effect = DocumentRejectedError("Failed to process document: nope")
        with self.assertRaises(DocumentRejectedError):
            self.client.documents.upload("hotels", {"id": "1"}, create_new=False)

    def test_query_dataframe(self):
        self.client._search._query.return_value = QueryResponse.from_api_response(
            {"value": [{"@search.score": 1.0, "id": "1"}]}
        )
        df = self.client.documents.query_dataframe("hotels", "search=*")
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.columns), ["id"])
