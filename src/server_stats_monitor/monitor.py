"""Core monitoring cycle: fetch, decode, evaluate."""

import logging
from datetime import datetime

import httpx

from server_stats_monitor.config import Config
from server_stats_monitor.decoder import decode
from server_stats_monitor.errors import DecodeError, FetchError
from server_stats_monitor.evaluator import evaluate
from server_stats_monitor.fetcher import fetch_stats
from server_stats_monitor.models import CheckResult, ServerStats
from server_stats_monitor.retry import RetryPolicy

logger = logging.getLogger(__name__)


class StatsMonitor:
    """Polls a single stats endpoint and evaluates what it returns."""

    def __init__(
        self,
        config: Config,
        client: httpx.Client | None = None,
        policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize stats monitor.

        Args:
            config: Configuration object.
            client: Optional HTTP client. One is created and owned otherwise.
            policy: Optional retry policy. Built from ``config`` otherwise.
        """
        self.config = config
        self.policy = policy or RetryPolicy.from_config(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout)

    def fetch_and_decode(self) -> ServerStats:
        """Run a single attempt: fetch the payload and decode it."""
        raw = fetch_stats(self.config.url, timeout=self.config.timeout, client=self._client)
        return decode(raw)

    def check(self) -> CheckResult:
        """Run one monitoring cycle.

        Fetch and decode failures are retried together according to the
        policy; evaluation runs once on the decoded snapshot.

        Returns:
            CheckResult with the snapshot and its alerts.

        Raises:
            RetriesExhaustedError: If no attempt produced a snapshot.
        """
        stats, attempts = self.policy.run(
            self.fetch_and_decode,
            retry_on=(FetchError, DecodeError),
        )
        alerts = evaluate(stats)

        if alerts:
            logger.info(f"{len(alerts)} alert(s) for {self.config.url}")

        return CheckResult(
            stats=stats,
            alerts=alerts,
            attempts=attempts,
            timestamp=datetime.now(),
        )

    def close(self) -> None:
        """Close the HTTP client if this monitor created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "StatsMonitor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
