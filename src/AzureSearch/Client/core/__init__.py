# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the search client.

This module contains the foundational components including authentication,
configuration, HTTP transport, telemetry and error handling.
"""

from .results import BatchOutcome, BatchOutcomeKind

__all__ = [
    "BatchOutcome",
    "BatchOutcomeKind",
]
