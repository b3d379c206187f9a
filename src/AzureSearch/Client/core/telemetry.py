# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Telemetry infrastructure for the search client.

Provides request logging, optional OpenTelemetry tracing and an
extensible hook system for custom telemetry providers.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generator,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from ..common.constants import (
    OTEL_ATTR_DB_SYSTEM,
    OTEL_ATTR_DB_OPERATION,
    OTEL_ATTR_HTTP_METHOD,
    OTEL_ATTR_HTTP_URL,
    OTEL_ATTR_HTTP_STATUS_CODE,
    OTEL_ATTR_SEARCH_SERVICE,
    OTEL_ATTR_SEARCH_RESOURCE,
)

# Optional OpenTelemetry imports
try:
    from opentelemetry import trace
    from opentelemetry.trace import Status, StatusCode

    _OTEL_AVAILABLE = True
except ImportError:
    _OTEL_AVAILABLE = False
    trace = None  # type: ignore
    Status = None  # type: ignore
    StatusCode = None  # type: ignore


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for client telemetry.

    Telemetry is opt-in. When enabled, each request is logged through the
    standard :mod:`logging` module and, if ``opentelemetry-api`` is installed,
    wrapped in a client span.

    Example:
        Request logging::

            config = SearchConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )

        Custom hook::

            config = SearchConfig(
                telemetry=TelemetryConfig(hooks=[MyCustomTelemetryHook()])
            )
    """

    # Signal toggles
    enable_tracing: bool = False
    enable_logging: bool = False

    # Logging configuration
    log_level: str = "WARNING"
    logger_name: str = "AzureSearch.Client"

    # Custom hooks
    hooks: List["TelemetryHook"] = field(default_factory=list)


# ============================================================================
# Context Objects
# ============================================================================


@dataclass
class RequestContext:
    """Context passed to telemetry hooks for each HTTP request."""

    method: str  # GET, POST, PUT
    url: str
    operation: str  # e.g. "resources.list_indexes", "documents.query"
    service_name: str
    resource_name: Optional[str] = None

    start_time: float = field(default_factory=time.perf_counter)

    # Custom data bag for hooks to share state
    custom_data: Dict[str, Any] = field(default_factory=dict)

    _span: Any = field(default=None, repr=False)


@dataclass
class ResponseContext:
    """Response information passed to telemetry hooks."""

    status_code: int
    duration_ms: float
    request_id: Optional[str] = None


# ============================================================================
# Hook Protocol
# ============================================================================


@runtime_checkable
class TelemetryHook(Protocol):
    """Protocol for custom telemetry hooks.

    All methods are optional - implement only what you need.

    Example:
        class TimingHook:
            def __init__(self, statsd):
                self.statsd = statsd

            def on_request_end(self, request: RequestContext, response: ResponseContext):
                self.statsd.timing(f"search.{request.operation}.duration", response.duration_ms)
    """

    def on_request_start(self, context: RequestContext) -> None:
        """Called before each HTTP request is sent."""
        ...

    def on_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        """Called after each HTTP request completes with a status code."""
        ...

    def on_request_error(self, request: RequestContext, error: Exception) -> None:
        """Called when a request raises."""
        ...

    def get_additional_headers(self) -> Dict[str, str]:
        """Return additional headers to include in requests."""
        ...


# ============================================================================
# Telemetry Manager
# ============================================================================


class TelemetryManager:
    """Manages telemetry instrumentation for the search client.

    This class is internal and not part of the public API.
    """

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._tracer: Optional[Any] = None
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)

        self._initialize()

    @property
    def is_tracing_enabled(self) -> bool:
        """Check if tracing is enabled and available."""
        return self._config.enable_tracing and _OTEL_AVAILABLE

    def _initialize(self) -> None:
        if self._config.enable_tracing and _OTEL_AVAILABLE:
            self._tracer = trace.get_tracer("AzureSearch.Client")

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        service_name: str,
        resource_name: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        """Create a traced request context.

        Usage:
            with telemetry.trace_request("documents.query", "GET", url, service) as ctx:
                response = self._http._request(...)
                telemetry.record_response(ctx, response.status_code)
        """
        ctx = RequestContext(
            method=method,
            url=url,
            operation=operation,
            service_name=service_name,
            resource_name=resource_name,
        )

        self._dispatch_request_start(ctx)

        span = None
        if self._tracer:
            span_name = f"Search {operation}"
            if resource_name:
                span_name = f"{span_name} {resource_name}"

            span = self._tracer.start_span(
                span_name,
                kind=trace.SpanKind.CLIENT,
                attributes={
                    OTEL_ATTR_DB_SYSTEM: "azure_search",
                    OTEL_ATTR_DB_OPERATION: operation,
                    OTEL_ATTR_HTTP_METHOD: method,
                    OTEL_ATTR_HTTP_URL: url,
                    OTEL_ATTR_SEARCH_SERVICE: service_name,
                    **({OTEL_ATTR_SEARCH_RESOURCE: resource_name} if resource_name else {}),
                },
            )
            ctx._span = span

        try:
            yield ctx
        except Exception as e:
            if span:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
            if self._logger:
                self._logger.warning(f"{ctx.operation} {ctx.method} failed: {e}")
            self._dispatch_request_error(ctx, e)
            raise
        finally:
            if span:
                span.end()

    def record_response(
        self,
        ctx: RequestContext,
        status_code: int,
        request_id: Optional[str] = None,
    ) -> None:
        """Log the response and dispatch it to hooks."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000

        response = ResponseContext(
            status_code=status_code,
            duration_ms=duration_ms,
            request_id=request_id,
        )

        if ctx._span:
            ctx._span.set_attribute(OTEL_ATTR_HTTP_STATUS_CODE, status_code)

        if self._logger:
            level = logging.WARNING if status_code >= 400 else logging.DEBUG
            self._logger.log(
                level,
                f"{ctx.operation} {ctx.method} {status_code} {duration_ms:.1f}ms",
                extra={"service_name": ctx.service_name, "request_id": request_id},
            )

        self._dispatch_request_end(ctx, response)

    def _dispatch_request_start(self, ctx: RequestContext) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_start"):
                try:
                    hook.on_request_start(ctx)
                except Exception:
                    pass  # Hooks should not break requests

    def _dispatch_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_end"):
                try:
                    hook.on_request_end(request, response)
                except Exception:
                    pass

    def _dispatch_request_error(self, request: RequestContext, error: Exception) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_error"):
                try:
                    hook.on_request_error(request, error)
                except Exception:
                    pass

    def get_additional_headers(self) -> Dict[str, str]:
        """Collect additional headers from all hooks."""
        headers: Dict[str, str] = {}
        for hook in self._hooks:
            if hasattr(hook, "get_additional_headers"):
                try:
                    hook_headers = hook.get_additional_headers()
                    if hook_headers:
                        headers.update(hook_headers)
                except Exception:
                    pass
        return headers


# ============================================================================
# No-op Manager for when telemetry is disabled
# ============================================================================


class NoOpTelemetryManager:
    """No-op telemetry manager when telemetry is disabled."""

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        service_name: str,
        resource_name: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        yield RequestContext(
            method=method,
            url=url,
            operation=operation,
            service_name=service_name,
            resource_name=resource_name,
        )

    def record_response(self, *args: Any, **kwargs: Any) -> None:
        pass

    def get_additional_headers(self) -> Dict[str, str]:
        return {}


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    """Factory to create appropriate telemetry manager."""
    if config is None:
        return NoOpTelemetryManager()

    has_any_enabled = config.enable_tracing or config.enable_logging or config.hooks

    if not has_any_enabled:
        return NoOpTelemetryManager()

    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "RequestContext",
    "ResponseContext",
    "create_telemetry_manager",
]
