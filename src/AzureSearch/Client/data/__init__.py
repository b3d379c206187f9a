# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the search client.

This module contains the low-level REST client used by the operation
namespaces. It is internal and not part of the public API.
"""

__all__ = []
