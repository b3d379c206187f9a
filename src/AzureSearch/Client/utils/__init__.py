# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utility helpers for the search client.
"""

__all__ = []
