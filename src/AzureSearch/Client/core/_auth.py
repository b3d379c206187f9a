# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""API key authentication for the search service."""

from __future__ import annotations

from typing import Union

from azure.core.credentials import AzureKeyCredential


class _ApiKeyAuth:
    """
    Holds the admin or query key used for the ``api-key`` header.

    The key is read from the wrapped :class:`~azure.core.credentials.AzureKeyCredential`
    on every request, so rotating it with ``credential.update(new_key)`` takes effect
    on the next call.

    :param credential: Plain key string or an ``AzureKeyCredential``.
    :raises TypeError: If ``credential`` is neither a string nor an ``AzureKeyCredential``.
    :raises ValueError: If the key is empty.
    """

    def __init__(self, credential: Union[str, AzureKeyCredential]) -> None:
        if isinstance(credential, str):
            if not credential.strip():
                raise ValueError("api_key is required.")
            credential = AzureKeyCredential(credential)
        if not isinstance(credential, AzureKeyCredential):
            raise TypeError("api_key must be a str or azure.core.credentials.AzureKeyCredential.")
        self.credential: AzureKeyCredential = credential

    @property
    def key(self) -> str:
        return self.credential.key
