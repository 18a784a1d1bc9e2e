"""Data models for server stats monitoring."""

from dataclasses import astuple, dataclass, field, fields
from datetime import datetime
from typing import Any, Sequence


@dataclass(frozen=True)
class ServerStats:
    """A single server health snapshot, in wire order.

    Byte counts for memory and disk, bytes per second for the network.
    No range checks are applied; used values may exceed available ones.
    """

    load_average: int
    mem_bytes_available: int
    mem_bytes_used: int
    disk_bytes_available: int
    disk_bytes_used: int
    net_bandwidth_available: int
    net_bandwidth_used: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "ServerStats":
        """Create a snapshot from seven values ordered as on the wire."""
        if len(values) != len(FIELD_NAMES):
            raise ValueError(f"expected {len(FIELD_NAMES)} values, got {len(values)}")
        return cls(*values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to an ordered dictionary of field name to value."""
        return dict(zip(FIELD_NAMES, astuple(self)))


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(ServerStats))


@dataclass
class CheckResult:
    """Outcome of one successful monitoring cycle."""

    stats: ServerStats
    alerts: list[str] = field(default_factory=list)
    attempts: int = 1
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def has_alerts(self) -> bool:
        return bool(self.alerts)
