"""
Server Stats Monitor - Poll a host's stats endpoint and print threshold alerts.

Fetches a comma-separated health snapshot over HTTP, decodes it into typed
fields and reports load, memory, disk and network usage above fixed limits.
"""

__version__ = "1.0.0"

from server_stats_monitor.config import Config, RetryConfig
from server_stats_monitor.decoder import decode
from server_stats_monitor.errors import (
    DecodeError,
    FetchError,
    FieldParseError,
    RetriesExhaustedError,
    SchemaError,
    StatsMonitorError,
)
from server_stats_monitor.evaluator import evaluate
from server_stats_monitor.models import CheckResult, ServerStats
from server_stats_monitor.monitor import StatsMonitor
from server_stats_monitor.retry import RetryPolicy

__all__ = [
    "Config",
    "RetryConfig",
    "decode",
    "evaluate",
    "CheckResult",
    "ServerStats",
    "StatsMonitor",
    "RetryPolicy",
    "StatsMonitorError",
    "DecodeError",
    "SchemaError",
    "FieldParseError",
    "FetchError",
    "RetriesExhaustedError",
]
