# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the search client.

- ResourceOperations: index, data source and indexer definitions
- DocumentOperations: document queries, lookups and single-document writes
"""

__all__ = []
