"""Decoder for the comma-separated server stats payload."""

import logging
import re

from server_stats_monitor.errors import DecodeError, FieldParseError, SchemaError
from server_stats_monitor.models import FIELD_NAMES, ServerStats

logger = logging.getLogger(__name__)

SEPARATOR = ","

# Optional sign followed by ASCII digits, nothing else
_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Fields are signed 64-bit integers on the producing side
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def parse_int(text: str) -> int:
    """Parse a strict base-10 signed integer.

    Unlike ``int()``, surrounding whitespace, underscores and non-ASCII
    digits are rejected.

    Raises:
        ValueError: If ``text`` is not an integer or does not fit in 64 bits.
    """
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError("invalid integer")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError("value out of range")
    return value


def decode(raw: bytes | str) -> ServerStats:
    """Decode a raw stats payload into a ServerStats snapshot.

    Args:
        raw: Payload as received, e.g. ``b"7,2048,1536,10240,9216,1000000,950000"``.

    Returns:
        ServerStats with the seven fields in wire order.

    Raises:
        SchemaError: If the payload does not split into exactly seven fields.
        FieldParseError: For the first field that is not a valid integer.
        DecodeError: If the payload is not ASCII text.
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodeError(f"payload is not ASCII text: {e}") from e
    else:
        text = raw

    parts = text.split(SEPARATOR)
    if len(parts) != len(FIELD_NAMES):
        raise SchemaError(expected=len(FIELD_NAMES), actual=len(parts))

    values = []
    for name, part in zip(FIELD_NAMES, parts):
        try:
            values.append(parse_int(part))
        except ValueError as e:
            raise FieldParseError(name, part, str(e)) from e

    stats = ServerStats.from_values(values)
    logger.debug(f"Decoded server stats: {stats.to_dict()}")
    return stats
