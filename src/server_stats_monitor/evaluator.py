"""Threshold evaluation for server stats snapshots."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from server_stats_monitor.models import ServerStats
from server_stats_monitor.units import UNIT_MB, UNIT_MBPS

logger = logging.getLogger(__name__)

# Alert when a value is strictly above its limit
LOAD_AVERAGE_LIMIT = 30
MEMORY_PERCENT_LIMIT = 80
DISK_PERCENT_LIMIT = 90
NETWORK_PERCENT_LIMIT = 90


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def usage_percent(used: int, available: int) -> int | None:
    """Get used/available as a whole percentage.

    Returns:
        The rounded percentage, or None when ``available`` is zero.
    """
    if available == 0:
        return None
    return round_half_away(float(used) / float(available) * 100)


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike ``//``."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _percent_or_skip(used: int, available: int, metric: str) -> int | None:
    percent = usage_percent(used, available)
    if percent is None:
        logger.warning(f"Skipping {metric} check: available {metric} is zero")
    return percent


def evaluate(stats: ServerStats) -> list[str]:
    """Check a snapshot against the alert thresholds.

    Rules are independent; alerts are ordered load, memory, disk, network.
    A rule whose percentage is undefined (zero available) is skipped.

    Args:
        stats: Snapshot to evaluate.

    Returns:
        Alert lines, between zero and four of them.
    """
    alerts: list[str] = []

    if stats.load_average > LOAD_AVERAGE_LIMIT:
        alerts.append(f"Load Average is too high: {stats.load_average}")

    mem_percent = _percent_or_skip(stats.mem_bytes_used, stats.mem_bytes_available, "memory")
    if mem_percent is not None and mem_percent > MEMORY_PERCENT_LIMIT:
        alerts.append(f"Memory usage is too high: {mem_percent}%")

    disk_percent = _percent_or_skip(stats.disk_bytes_used, stats.disk_bytes_available, "disk")
    if disk_percent is not None and disk_percent > DISK_PERCENT_LIMIT:
        free_mb = truncating_div(stats.disk_bytes_available - stats.disk_bytes_used, UNIT_MB)
        alerts.append(f"Free disk space is too low: {free_mb} Mb left")

    net_percent = _percent_or_skip(
        stats.net_bandwidth_used, stats.net_bandwidth_available, "network bandwidth"
    )
    if net_percent is not None and net_percent > NETWORK_PERCENT_LIMIT:
        free_mbit = truncating_div(
            stats.net_bandwidth_available - stats.net_bandwidth_used, UNIT_MBPS
        )
        alerts.append(f"Network bandwidth usage high: {free_mbit} Mbit/s available")

    return alerts
