# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the search client.

- :class:`~AzureSearch.Client.models.index.Index`: Index listing snapshot.
- :class:`~AzureSearch.Client.models.index.Field`: Index field.
- :class:`~AzureSearch.Client.models.resource.ResourceContent`: Resource body paired with its ETag.
- :class:`~AzureSearch.Client.models.query_response.QueryResponse`: One page of query results.
- :class:`~AzureSearch.Client.models.query_builder.SearchQueryBuilder`: Fluent query string builder.
- :mod:`~AzureSearch.Client.models.document_action`: Single-action batch builders.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
