# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest

from azure.core.credentials import AzureKeyCredential

from AzureSearch.Client.client import SearchClient
from AzureSearch.Client.core.config import SearchConfig
from AzureSearch.Client.data._search import _SearchServiceClient
from AzureSearch.Client.operations.documents import DocumentOperations
from AzureSearch.Client.operations.resources import ResourceOperations


class TestSearchClient(unittest.TestCase):
    def test_requires_service_name(self):
        with self.assertRaises(ValueError):
            SearchClient("", "key")
        with self.assertRaises(ValueError):
            SearchClient("   ", "key")

    def test_requires_api_key(self):
        with self.assertRaises(ValueError):
            SearchClient("svc", "")

    def test_rejects_unsupported_credential(self):
        with self.assertRaises(TypeError):
            SearchClient("svc", 12345)

    def test_accepts_key_credential(self):
        credential = AzureKeyCredential("secret")
        client = SearchClient("svc", credential)
        self.assertIs(client.auth.credential, credential)
        self.assertEqual(client.auth.key, "secret")

    def test_namespaces(self):
        client = SearchClient("svc", "key")
        self.assertIsInstance(client.resources, ResourceOperations)
        self.assertIsInstance(client.documents, DocumentOperations)
        self.assertIs(client.resources._client, client)

    def test_lazy_low_level_client(self):
        client = SearchClient("svc", "key", cloud_suffix="search.azure.cn", config=SearchConfig(http_timeout=3))
        self.assertIsNone(client._search)
        search = client._get_search()
        self.assertIsInstance(search, _SearchServiceClient)
        self.assertIs(client._get_search(), search)
        self.assertEqual(search.cloud_suffix, "search.azure.cn")
        self.assertEqual(search._http.default_timeout, 3)
        self.assertTrue(search._build_url("indexes").startswith("https://svc.search.azure.cn/indexes?"))

    def test_default_cloud_suffix(self):
        search = SearchClient("svc", "key")._get_search()
        self.assertEqual(search.cloud_suffix, "search.windows.net")

    def test_service_name_is_trimmed(self):
        self.assertEqual(SearchClient(" svc ", "key").service_name, "svc")
