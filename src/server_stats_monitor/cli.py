"""Command-line interface for Server Stats Monitor."""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from server_stats_monitor import __version__
from server_stats_monitor.config import Config
from server_stats_monitor.decoder import decode
from server_stats_monitor.errors import DecodeError, RetriesExhaustedError
from server_stats_monitor.evaluator import evaluate
from server_stats_monitor.models import ServerStats
from server_stats_monitor.monitor import StatsMonitor
from server_stats_monitor.units import UNIT_MB, UNIT_MBPS

# Alert lines go to stdout, everything else to stderr
console = Console(stderr=True)

EXIT_FAILED = 1
EXIT_ALERTS = 2


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_stats_table(stats: ServerStats) -> Table:
    """Create a Rich table displaying a parsed snapshot."""
    table = Table(title="Server Stats", show_header=True, header_style="bold")

    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Available", justify="right")
    table.add_column("Used", justify="right")

    table.add_row("Load average", "-", str(stats.load_average))
    table.add_row(
        "Memory (Mb)",
        f"{stats.mem_bytes_available / UNIT_MB:.1f}",
        f"{stats.mem_bytes_used / UNIT_MB:.1f}",
    )
    table.add_row(
        "Disk (Mb)",
        f"{stats.disk_bytes_available / UNIT_MB:.1f}",
        f"{stats.disk_bytes_used / UNIT_MB:.1f}",
    )
    table.add_row(
        "Network (Mbit/s)",
        f"{stats.net_bandwidth_available / UNIT_MBPS:.1f}",
        f"{stats.net_bandwidth_used / UNIT_MBPS:.1f}",
    )

    return table


def print_alerts(alerts: list[str]) -> None:
    """Write alert lines to stdout, one per line."""
    for alert in alerts:
        click.echo(alert)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Server Stats Monitor - Poll a stats endpoint and report threshold alerts."""
    pass


@main.command()
@click.option(
    "-c", "--config",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--url",
    help="Stats endpoint URL (overrides configuration)",
)
@click.option(
    "--show-stats",
    is_flag=True,
    help="Also display the parsed stats",
)
@click.option(
    "--watch", "-w",
    is_flag=True,
    help="Keep polling until interrupted",
)
@click.option(
    "--interval", "-i",
    type=int,
    help="Watch interval in seconds (default: from configuration)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
def check(
    config: Optional[str],
    url: Optional[str],
    show_stats: bool,
    watch: bool,
    interval: Optional[int],
    log_level: Optional[str],
) -> None:
    """Fetch server stats and print any threshold alerts."""
    cfg = Config.load(config)
    if url:
        cfg.url = url
    setup_logging(log_level or cfg.log_level)

    with StatsMonitor(cfg) as monitor:

        def do_check() -> int:
            try:
                result = monitor.check()
            except RetriesExhaustedError as e:
                console.print(f"[red]Unable to fetch server statistic:[/] {escape(str(e))}")
                return EXIT_FAILED

            if show_stats:
                console.print(create_stats_table(result.stats))
            print_alerts(result.alerts)
            if watch:
                checked_at = result.timestamp.strftime("%Y-%m-%d %H:%M:%S")
                console.print(f"[dim]Last check: {checked_at}, {result.attempts} attempt(s)[/]")
            return EXIT_ALERTS if result.has_alerts else 0

        if watch:
            wait = interval if interval is not None else cfg.interval
            console.print(f"[dim]Polling {cfg.url} every {wait}s, Ctrl+C to stop[/]")
            try:
                while True:
                    do_check()
                    time.sleep(wait)
            except KeyboardInterrupt:
                console.print("\n[dim]Stopped watching.[/]")
        else:
            sys.exit(do_check())


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("payload", required=False)
@click.option(
    "--show-stats",
    is_flag=True,
    help="Also display the parsed stats",
)
def parse(payload: Optional[str], show_stats: bool) -> None:
    """Decode a stats payload and print its alerts.

    PAYLOAD is read from standard input when omitted. A payload starting
    with a negative value is taken as-is, not as an option.
    """
    setup_logging("WARNING")

    if payload is None:
        payload = click.get_text_stream("stdin").read().rstrip("\r\n")

    try:
        stats = decode(payload)
    except DecodeError as e:
        console.print(f"[red]Error parsing server statistics:[/] {escape(str(e))}")
        sys.exit(EXIT_FAILED)

    if show_stats:
        console.print(create_stats_table(stats))
    print_alerts(evaluate(stats))


@main.command()
@click.option(
    "-o", "--output",
    default="ssm.yaml",
    help="Output file path",
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Overwrite existing file",
)
def init(output: str, force: bool) -> None:
    """Create an example configuration file."""
    path = Path(output)

    if path.exists() and not force:
        console.print(f"[red]File already exists: {path}[/]")
        console.print("Use --force to overwrite")
        sys.exit(EXIT_FAILED)

    Config().to_yaml(path)

    console.print(f"[green]Created example configuration: {path}[/]")
    console.print("Edit this file to point at your stats endpoint.")


if __name__ == "__main__":
    main()
