# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration settings for search client operations.

    :param http_timeout: Request timeout in seconds. ``None`` (default) leaves the
        transport default in place.
    :type http_timeout: float or None
    :param user_agent: Optional product identifier prepended to the client's own
        ``User-Agent`` value, e.g. the name and version of a host application.
    :type user_agent: str or None
    :param telemetry: Opt-in logging and tracing settings. ``None`` disables telemetry.
    :type telemetry: ~AzureSearch.Client.core.telemetry.TelemetryConfig or None
    """

    http_timeout: Optional[float] = None
    user_agent: Optional[str] = None
    telemetry: Optional[TelemetryConfig] = None

    @classmethod
    def default(cls) -> "SearchConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~AzureSearch.Client.core.config.SearchConfig
        """
        return cls(
            http_timeout=None,
            user_agent=None,
            telemetry=None,
        )
