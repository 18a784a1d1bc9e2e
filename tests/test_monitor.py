"""Tests for the monitoring cycle."""

import httpx
import pytest

from server_stats_monitor.config import Config
from server_stats_monitor.errors import RetriesExhaustedError
from server_stats_monitor.models import ServerStats
from server_stats_monitor.monitor import StatsMonitor
from server_stats_monitor.retry import RetryPolicy

URL = "http://stats.test/_stats"


class ScriptedServer:
    """Serves a fixed sequence of responses, repeating the last one."""
    
    def __init__(self, *responses: tuple[int, bytes]) -> None:
        self.responses = list(responses)
        self.requests = 0
    
    def __call__(self, request: httpx.Request) -> httpx.Response:
        index = min(self.requests, len(self.responses) - 1)
        self.requests += 1
        status, body = self.responses[index]
        return httpx.Response(status, content=body)


@pytest.fixture
def sleeps():
    return []


def make_monitor(server: ScriptedServer, sleeps: list) -> StatsMonitor:
    config = Config(url=URL)
    client = httpx.Client(transport=httpx.MockTransport(server))
    policy = RetryPolicy(max_attempts=3, delay=2.0, sleep=sleeps.append)
    return StatsMonitor(config, client=client, policy=policy)


class TestStatsMonitor:
    """Tests for StatsMonitor."""
    
    def test_check_with_alerts(self, sleeps):
        server = ScriptedServer((200, b"31,1000,850,1000,500,1000,500"))
        result = make_monitor(server, sleeps).check()
        
        assert result.stats == ServerStats.from_values([31, 1000, 850, 1000, 500, 1000, 500])
        assert result.alerts == [
            "Load Average is too high: 31",
            "Memory usage is too high: 85%",
        ]
        assert result.attempts == 1
        assert sleeps == []
    
    def test_check_healthy(self, sleeps):
        server = ScriptedServer((200, b"5,1000,500,1000,500,1000,500"))
        result = make_monitor(server, sleeps).check()
        assert result.alerts == []
        assert result.has_alerts is False
    
    def test_retries_non_200(self, sleeps):
        server = ScriptedServer(
            (500, b"oops"),
            (200, b"5,1000,500,1000,500,1000,500"),
        )
        result = make_monitor(server, sleeps).check()
        assert result.attempts == 2
        assert server.requests == 2
        assert sleeps == [2.0]
    
    def test_retries_decode_errors(self, sleeps):
        server = ScriptedServer(
            (200, b"1,2,3"),
            (200, b"1,2,x,4,5,6,7"),
            (200, b"5,1000,500,1000,500,1000,500"),
        )
        result = make_monitor(server, sleeps).check()
        assert result.attempts == 3
    
    def test_gives_up(self, sleeps, caplog):
        server = ScriptedServer((200, b"not,stats"))
        monitor = make_monitor(server, sleeps)
        
        with pytest.raises(RetriesExhaustedError) as exc_info:
            monitor.check()
        
        assert exc_info.value.attempts == 3
        assert server.requests == 3
        assert "expected 7 values, got 2" in caplog.text
    
    def test_each_cycle_independent(self, sleeps):
        server = ScriptedServer(
            (200, b"31,1000,500,1000,500,1000,500"),
            (200, b"5,1000,500,1000,500,1000,500"),
        )
        monitor = make_monitor(server, sleeps)
        assert monitor.check().alerts == ["Load Average is too high: 31"]
        assert monitor.check().alerts == []
    
    def test_context_manager_closes_owned_client(self):
        with StatsMonitor(Config(url=URL)) as monitor:
            client = monitor._client
        assert client.is_closed
    
    def test_shared_client_left_open(self, sleeps):
        server = ScriptedServer((200, b"5,1000,500,1000,500,1000,500"))
        with make_monitor(server, sleeps) as monitor:
            client = monitor._client
        assert not client.is_closed
