"""Tests for resource parser utilities."""

from __future__ import annotations

from decimal import Decimal

import pytest

from kuotacalc.utils.resource_parser import (
    format_cpu,
    format_memory,
    memory_str_to_bytes,
    parse_cpu_millis,
    parse_quantity,
)


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_plain_numbers(self) -> None:
        """Test parsing plain and decimal numbers."""
        assert parse_quantity("2") == Decimal(2)
        assert parse_quantity("1.5") == Decimal("1.5")
        assert parse_quantity(".5") == Decimal("0.5")
        assert parse_quantity(3) == Decimal(3)
        assert parse_quantity(0.25) == Decimal("0.25")

    def test_parse_exponent(self) -> None:
        """Test parsing exponent notation."""
        assert parse_quantity("1e3") == Decimal(1000)
        assert parse_quantity("5E-3") == Decimal("0.005")

    def test_parse_suffixes(self) -> None:
        """Test decimal and binary SI suffixes."""
        assert parse_quantity("100m") == Decimal("0.1")
        assert parse_quantity("1k") == Decimal(1000)
        assert parse_quantity("2G") == Decimal(2 * 1000**3)
        assert parse_quantity("1Ki") == Decimal(1024)
        assert parse_quantity("3Gi") == Decimal(3 * 1024**3)

    def test_exa_suffix_is_not_an_exponent(self) -> None:
        """Test a bare "E" is read as the exa suffix."""
        assert parse_quantity("1E") == Decimal(1000**6)

    def test_parse_with_whitespace(self) -> None:
        """Test surrounding whitespace is ignored."""
        assert parse_quantity(" 100m ") == Decimal("0.1")

    @pytest.mark.parametrize(
        "value", ["", "invalid", "1Xi", "m", "1.2.3", True, float("nan"), float("inf")]
    )
    def test_parse_invalid(self, value: object) -> None:
        """Test invalid quantities raise ValueError."""
        with pytest.raises(ValueError):
            parse_quantity(value)

    @pytest.mark.parametrize("value", ["1e3000000", "-1e3000000", "9Ei", "1e19", 2**63])
    def test_parse_out_of_range(self, value: object) -> None:
        """Test magnitudes beyond int64 raise ValueError."""
        with pytest.raises(ValueError, match="invalid quantity|out of range"):
            parse_quantity(value)

    def test_parse_int64_max(self) -> None:
        """Test the largest int64 value is accepted."""
        assert parse_quantity(2**63 - 1) == Decimal(2**63 - 1)


class TestParseCpuMillis:
    """Tests for parse_cpu_millis function."""

    def test_parse_cpu_millicores(self) -> None:
        """Test parsing CPU in millicores."""
        assert parse_cpu_millis("100m") == 100
        assert parse_cpu_millis("1000m") == 1000

    def test_parse_cpu_micro_and_nano_cores(self) -> None:
        """Test parsing CPU in microcore/nanocore units."""
        assert parse_cpu_millis("500000u") == 500
        assert parse_cpu_millis("500000000n") == 500

    def test_parse_cpu_cores(self) -> None:
        """Test parsing CPU in cores."""
        assert parse_cpu_millis("1.5") == 1500
        assert parse_cpu_millis(2) == 2000

    def test_sub_millicore_rounds_up(self) -> None:
        """Test values finer than a millicore round up."""
        assert parse_cpu_millis("0.5m") == 1
        assert parse_cpu_millis("1n") == 1


class TestMemoryStrToBytes:
    """Tests for memory_str_to_bytes function."""

    def test_memory_str_to_bytes_binary(self) -> None:
        """Test converting binary suffixes to bytes."""
        assert memory_str_to_bytes("512Mi") == 512 * 1024 * 1024
        assert memory_str_to_bytes("1Gi") == 1024 * 1024 * 1024
        assert memory_str_to_bytes("1.5Ki") == 1536

    def test_memory_str_to_bytes_decimal(self) -> None:
        """Test converting decimal suffixes to bytes."""
        assert memory_str_to_bytes("1k") == 1000
        assert memory_str_to_bytes("129M") == 129_000_000

    def test_memory_fraction_rounds_up(self) -> None:
        """Test fractional bytes round up to a whole byte."""
        assert memory_str_to_bytes("1500m") == 2


class TestFormatting:
    """Tests for format_cpu and format_memory functions."""

    def test_format_cpu(self) -> None:
        """Test whole cores and millicores."""
        assert format_cpu(0) == "0"
        assert format_cpu(2000) == "2"
        assert format_cpu(1500) == "1500m"
        assert format_cpu(-200) == "-200m"

    def test_format_memory_binary(self) -> None:
        """Test the largest exact binary suffix is used."""
        assert format_memory(1024**3) == "1Gi"
        assert format_memory(1536 * 1024**2) == "1536Mi"
        assert format_memory(2048) == "2Ki"

    def test_format_memory_decimal(self) -> None:
        """Test decimal suffixes when no binary one fits."""
        assert format_memory(1000) == "1k"
        assert format_memory(10**9) == "1G"

    def test_format_memory_plain(self) -> None:
        """Test plain byte counts."""
        assert format_memory(0) == "0"
        assert format_memory(1023) == "1023"
