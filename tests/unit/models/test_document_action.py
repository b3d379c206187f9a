# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from AzureSearch.Client.core.errors import ValidationError
from AzureSearch.Client.models.document_action import delete_action, single_action_batch, upload_action


def test_upload_action_copies_document(sample_document):
    action = upload_action(sample_document, create_new=True)
    assert action == {"id": "1", "title": "x", "@search.action": "mergeOrUpload"}
    assert action is not sample_document
    assert "@search.action" not in sample_document


def test_merge_action():
    assert upload_action({"id": "1"}, create_new=False)["@search.action"] == "merge"


def test_upload_requires_dict():
    with pytest.raises(ValidationError):
        upload_action([("id", "1")], create_new=True)


def test_delete_action_is_minimal():
    assert delete_action("id", "1") == {"@search.action": "delete", "id": "1"}


def test_delete_requires_key_field():
    with pytest.raises(ValidationError):
        delete_action("", "1")


def test_single_action_batch():
    assert single_action_batch({"id": "1"}) == {"value": [{"id": "1"}]}
