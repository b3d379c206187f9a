# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from AzureSearch.Client.models.index import Field, Index
from AzureSearch.Client.models.resource import ResourceContent


def test_index_from_api_response(sample_index_body):
    index = Index.from_api_response(sample_index_body["value"][0])
    assert index.name == "hotels"
    assert index.fields == [
        Field("hotelId", key=True, type="Edm.String"),
        Field("hotelName", key=False, type="Edm.String"),
    ]
    assert index.key_field == Field("hotelId", key=True, type="Edm.String")


def test_index_without_fields():
    index = Index.from_api_response({"name": "empty"})
    assert index.fields == []
    assert index.key_field is None


def test_resource_content_unpacks():
    content, etag = ResourceContent({"name": "ds"}, '"0x1"')
    assert content == {"name": "ds"}
    assert etag == '"0x1"'
