"""Tests for the stats payload decoder."""

import pytest

from server_stats_monitor.decoder import decode, parse_int
from server_stats_monitor.errors import DecodeError, FieldParseError, SchemaError
from server_stats_monitor.models import FIELD_NAMES, ServerStats


class TestDecode:
    """Tests for decode()."""
    
    def test_decode_bytes(self):
        stats = decode(b"7,2048,1536,10240,9216,1000000,950000")
        assert stats == ServerStats(
            load_average=7,
            mem_bytes_available=2048,
            mem_bytes_used=1536,
            disk_bytes_available=10240,
            disk_bytes_used=9216,
            net_bandwidth_available=1000000,
            net_bandwidth_used=950000,
        )
    
    def test_decode_str(self):
        stats = decode("1,2,3,4,5,6,7")
        assert list(stats.to_dict().values()) == [1, 2, 3, 4, 5, 6, 7]
    
    def test_decode_signed_values(self):
        stats = decode(b"-1,+2,0,-0,5,6,7")
        assert stats.load_average == -1
        assert stats.mem_bytes_available == 2
        assert stats.disk_bytes_available == 0
    
    def test_used_may_exceed_available(self):
        stats = decode(b"0,100,500,100,500,100,500")
        assert stats.mem_bytes_used > stats.mem_bytes_available
    
    @pytest.mark.parametrize("payload,count", [
        (b"", 1),
        (b"1,2,3,4,5,6", 6),
        (b"1,2,3,4,5,6,7,8", 8),
        (b"1,2,3,4,5,6,7,", 8),
    ])
    def test_wrong_field_count(self, payload, count):
        with pytest.raises(SchemaError) as exc_info:
            decode(payload)
        assert exc_info.value.expected == 7
        assert exc_info.value.actual == count
        assert str(exc_info.value) == f"expected 7 values, got {count}"
    
    @pytest.mark.parametrize("index", range(7))
    def test_non_numeric_field_named(self, index):
        parts = ["1"] * 7
        parts[index] = "abc"
        with pytest.raises(FieldParseError) as exc_info:
            decode(",".join(parts).encode())
        assert exc_info.value.field == FIELD_NAMES[index]
        assert exc_info.value.text == "abc"
        assert isinstance(exc_info.value.__cause__, ValueError)
    
    def test_first_failure_reported(self):
        with pytest.raises(FieldParseError) as exc_info:
            decode(b"1,x,3,y,5,6,7")
        assert exc_info.value.field == "mem_bytes_available"
    
    def test_schema_checked_before_fields(self):
        with pytest.raises(SchemaError):
            decode(b"x,y")
    
    @pytest.mark.parametrize("text", [" 1", "1 ", "1_000", "1.5", "", "+", "0x10"])
    def test_strict_integer_syntax(self, text):
        payload = f"{text},2,3,4,5,6,7"
        with pytest.raises(FieldParseError) as exc_info:
            decode(payload)
        assert exc_info.value.field == "load_average"
    
    def test_trailing_newline_rejected(self):
        with pytest.raises(FieldParseError) as exc_info:
            decode(b"1,2,3,4,5,6,7\n")
        assert exc_info.value.field == "net_bandwidth_used"
    
    def test_non_ascii_payload(self):
        with pytest.raises(DecodeError):
            decode("1,2,3,4,5,6,7".encode() + b"\xff")
    
    def test_error_message_names_field(self):
        with pytest.raises(FieldParseError, match="error parsing disk_bytes_used"):
            decode(b"1,2,3,4,oops,6,7")


class TestParseInt:
    """Tests for strict integer parsing."""
    
    def test_valid(self):
        assert parse_int("42") == 42
        assert parse_int("-42") == -42
        assert parse_int("+42") == 42
        assert parse_int("007") == 7
    
    def test_non_ascii_digits(self):
        with pytest.raises(ValueError, match="invalid integer"):
            parse_int("١٢")
    
    def test_64_bit_bounds(self):
        assert parse_int("9223372036854775807") == 2**63 - 1
        assert parse_int("-9223372036854775808") == -(2**63)
        with pytest.raises(ValueError, match="out of range"):
            parse_int("9223372036854775808")
