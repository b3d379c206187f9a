# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Builders for single-action document batches.

Every builder returns a new dictionary; the caller's document is never
mutated or aliased.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..common.constants import (
    ACTION_DELETE,
    ACTION_MERGE,
    ACTION_MERGE_OR_UPLOAD,
    SEARCH_ACTION,
)
from ..core.errors import ValidationError
from ..core._error_codes import VALIDATION_EMPTY_NAME, VALIDATION_INVALID_DOCUMENT


def upload_action(document: Dict[str, Any], create_new: bool) -> Dict[str, Any]:
    """
    Copy ``document`` and stamp its batch action.

    :param document: Document fields, including the key field.
    :type document: dict[str, Any]
    :param create_new: ``True`` for ``mergeOrUpload`` (create when missing),
        ``False`` for ``merge`` (the document must already exist).
    :type create_new: bool
    :return: New action dictionary.
    :rtype: dict[str, Any]
    :raises ~AzureSearch.Client.core.errors.ValidationError: If ``document`` is not a dict.

    Example::

        >>> upload_action({"id": "1", "title": "x"}, create_new=True)
        {'id': '1', 'title': 'x', '@search.action': 'mergeOrUpload'}
    """
    if not isinstance(document, dict):
        raise ValidationError("document must be a dict", subcode=VALIDATION_INVALID_DOCUMENT)
    action = dict(document)
    action[SEARCH_ACTION] = ACTION_MERGE_OR_UPLOAD if create_new else ACTION_MERGE
    return action


def delete_action(key_field: str, key: Any) -> Dict[str, Any]:
    """
    Build a minimal delete action holding only the action and the key.

    :param key_field: Name of the index's key field.
    :type key_field: str
    :param key: Key value of the document to delete.
    :return: New action dictionary.
    :rtype: dict[str, Any]
    :raises ~AzureSearch.Client.core.errors.ValidationError: If ``key_field`` is empty.
    """
    if not isinstance(key_field, str) or not key_field.strip():
        raise ValidationError("key_field is required", subcode=VALIDATION_EMPTY_NAME)
    return {SEARCH_ACTION: ACTION_DELETE, key_field: key}


def single_action_batch(action: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    """Wrap one action as a batch envelope (``{"value": [action]}``)."""
    return {"value": [action]}


__all__ = ["upload_action", "delete_action", "single_action_batch"]
