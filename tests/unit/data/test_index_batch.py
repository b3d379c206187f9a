# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for single-action document batches."""

import pytest
import requests

from AzureSearch.Client.core._error_codes import BATCH_ITEM_REJECTED, BATCH_UNEXPECTED_ENTRY_COUNT
from AzureSearch.Client.core.errors import (
    BatchProtocolError,
    DocumentRejectedError,
    HttpError,
    ResourceNotFoundError,
    ValidationError,
)
from AzureSearch.Client.core.results import BatchOutcomeKind
from AzureSearch.Client.models.document_action import delete_action, single_action_batch, upload_action

OK_ENTRY = {"key": "1", "status": True, "errorMessage": None, "statusCode": 200}


def test_upload_posts_one_element_batch(make_search, sample_document):
    c = make_search([(200, {}, {"value": [OK_ENTRY]})])
    outcome = c._index_batch("hotels", single_action_batch(upload_action(sample_document, True)))
    method, url, kwargs = c._http.calls[0]
    assert method == "post"
    assert "/indexes/hotels/docs/index?api-version=" in url
    assert kwargs["json"] == {"value": [{"id": "1", "title": "x", "@search.action": "mergeOrUpload"}]}
    assert outcome.kind is BatchOutcomeKind.SUCCESS
    assert outcome.key == "1"
    # Caller's document is untouched
    assert sample_document == {"id": "1", "title": "x"}


def test_merge_action_when_not_creating(make_search, sample_document):
    c = make_search([(200, {}, {"value": [OK_ENTRY]})])
    c._index_batch("hotels", single_action_batch(upload_action(sample_document, False)))
    assert c._http.calls[0][2]["json"]["value"][0]["@search.action"] == "merge"


def test_delete_posts_minimal_record(make_search):
    c = make_search([(200, {}, {"value": [OK_ENTRY]})])
    c._index_batch("hotels", single_action_batch(delete_action("id", "1")))
    assert c._http.calls[0][2]["json"] == {"value": [{"@search.action": "delete", "id": "1"}]}


@pytest.mark.parametrize(
    "body",
    [
        {"value": []},
        {"value": [OK_ENTRY, OK_ENTRY]},
        {"value": [OK_ENTRY, {"key": "2", "status": False, "errorMessage": "bad", "statusCode": 400}]},
        {},
        None,
    ],
)
def test_wrong_entry_count_is_protocol_violation(make_search, body):
    c = make_search([(200, {}, body)])
    with pytest.raises(BatchProtocolError) as ei:
        c._index_batch("hotels", single_action_batch(delete_action("id", "1")))
    assert ei.value.message == "Unexpected response from service while attempting to process document"
    assert ei.value.subcode == BATCH_UNEXPECTED_ENTRY_COUNT


def test_rejected_item_surfaces_error_message(make_search):
    entry = {"key": "1", "status": False, "errorMessage": "Document not found.", "statusCode": 404}
    c = make_search([(207, {}, {"value": [entry]})])
    with pytest.raises(DocumentRejectedError) as ei:
        c._index_batch("hotels", single_action_batch(upload_action({"id": "1"}, False)))
    assert ei.value.message == "Failed to process document: Document not found."
    assert ei.value.key == "1"
    assert ei.value.status_code == 404
    assert ei.value.subcode == BATCH_ITEM_REJECTED


def test_transport_failure_is_prefixed(make_search):
    c = make_search([(400, {}, {"error": {"message": "The request is invalid."}})])
    with pytest.raises(HttpError) as ei:
        c._index_batch("hotels", single_action_batch(upload_action({"id": "1"}, True)))
    assert ei.value.message == "Failed to process document: The request is invalid."
    assert ei.value.status_code == 400


def test_transport_failure_keeps_error_class(make_search):
    c = make_search([(404, {}, {"error": {"message": "The index 'nope' was not found."}})])
    with pytest.raises(ResourceNotFoundError) as ei:
        c._index_batch("nope", single_action_batch(delete_action("id", "1")))
    assert ei.value.message == "Failed to process document: The index 'nope' was not found."


def test_network_failure_is_prefixed(make_search):
    c = make_search([requests.exceptions.Timeout("timed out")])
    with pytest.raises(HttpError) as ei:
        c._index_batch("hotels", single_action_batch(delete_action("id", "1")))
    assert ei.value.message == "Failed to process document: Error: timed out"


def test_transport_failure_message_is_normalized_once(make_search):
    c = make_search([(500, {}, {"error": {"message": "boom"}})])
    with pytest.raises(HttpError) as ei:
        c._index_batch("hotels", single_action_batch(delete_action("id", "1")))
    assert ei.value.message == "Failed to process document: boom"
    assert ei.value.__cause__.message == "boom"


def test_multi_action_batch_is_rejected_locally(make_search):
    c = make_search()
    batch = {"value": [delete_action("id", "1"), delete_action("id", "2")]}
    with pytest.raises(ValidationError):
        c._index_batch("hotels", batch)
    assert c._http.calls == []
