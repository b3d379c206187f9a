# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Lightweight client for an Azure Cognitive Search service.

Covers index, data source and indexer resources plus the document query
and write API. Import the client from :mod:`AzureSearch.Client.client`.
"""

from .__version__ import __version__

__all__ = ["__version__"]
