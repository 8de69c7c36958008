"""Table providers: the backends the queries read their tables from."""

from .registry import build_table_provider, register_table_provider
from .table_provider import TableProvider
from .telemetry import TelemetryContext

__all__ = ["TableProvider", "TelemetryContext", "build_table_provider", "register_table_provider"]
