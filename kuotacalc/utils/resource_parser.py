"""Resource parsing utilities for CPU and memory quantities.

Provides functions to parse Kubernetes quantity strings into exact values and
to render them back in their canonical short form:
- CPU: parsed to millicores (int)
- Memory: parsed to bytes (int)
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_CEILING, Decimal, DecimalException, localcontext
from typing import Any

from kuotacalc.constants.limits import INT64_MAX

# Module-level constants to avoid re-creating on every function call.
_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))"
    r"(?:(?P<exponent>[eE][+-]?\d+)|(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|n|u|m|k|M|G|T|P|E))?$"
)

_SUFFIX_MULTIPLIERS: dict[str, Decimal] = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "k": Decimal(1000),
    "M": Decimal(1000**2),
    "G": Decimal(1000**3),
    "T": Decimal(1000**4),
    "P": Decimal(1000**5),
    "E": Decimal(1000**6),
    "Ki": Decimal(1024),
    "Mi": Decimal(1024**2),
    "Gi": Decimal(1024**3),
    "Ti": Decimal(1024**4),
    "Pi": Decimal(1024**5),
    "Ei": Decimal(1024**6),
}

# Largest first, so rendering picks the shortest exact form.
_BINARY_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("Ei", 1024**6),
    ("Pi", 1024**5),
    ("Ti", 1024**4),
    ("Gi", 1024**3),
    ("Mi", 1024**2),
    ("Ki", 1024),
)
_DECIMAL_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("E", 1000**6),
    ("P", 1000**5),
    ("T", 1000**4),
    ("G", 1000**3),
    ("M", 1000**2),
    ("k", 1000),
)

_PRECISION = 60


def _to_decimal(quantity: Any) -> Decimal:
    if isinstance(quantity, bool):
        raise ValueError(f"quantity {quantity!r} is not a number")
    if isinstance(quantity, int):
        return Decimal(quantity)
    if isinstance(quantity, float):
        if not math.isfinite(quantity):
            raise ValueError(f"quantity {quantity!r} is not finite")
        return Decimal(repr(quantity))

    text = str(quantity).strip()
    match = _QUANTITY_PATTERN.match(text)
    if match is None:
        raise ValueError(f"quantities must match the regular expression, got {text!r}")

    try:
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            number = Decimal(match.group("number"))
            if match.group("exponent"):
                return number * Decimal(f"1{match.group('exponent')}")
            suffix = match.group("suffix")
            if suffix:
                return number * _SUFFIX_MULTIPLIERS[suffix]
            return number
    except DecimalException as exc:
        raise ValueError(f"invalid quantity {text!r}") from exc


def parse_quantity(quantity: Any) -> Decimal:
    """Parse a Kubernetes quantity into an exact value in base units.

    Handles the quantity formats accepted by the API server:
    - Plain numbers: "2", "1.5", ".5"
    - Exponents: "1e3", "5E-3"
    - Decimal SI suffixes: "100m", "500000u", "1k", "2G"
    - Binary SI suffixes: "512Mi", "1Gi"

    Args:
        quantity: Quantity as string, int or float.

    Returns:
        The value in cores (CPU) or bytes (memory) as Decimal.

    Raises:
        ValueError: If the value is not a valid quantity or its magnitude
            exceeds the int64 range.
    """
    value = _to_decimal(quantity)
    if abs(value) > INT64_MAX:
        raise ValueError(f"quantity {quantity!r} is out of range")
    return value


def _ceil_int(value: Decimal) -> int:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return int(value.to_integral_value(rounding=ROUND_CEILING))


def parse_cpu_millis(cpu: Any) -> int:
    """Parse a CPU quantity to millicores.

    Anything finer than a millicore rounds up, the same way the API server
    stores it ("0.5m" -> 1).
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return _ceil_int(parse_quantity(cpu) * 1000)


def memory_str_to_bytes(memory: Any) -> int:
    """Convert a memory quantity to whole bytes, rounding fractions up."""
    return _ceil_int(parse_quantity(memory))


def format_cpu(millis: int) -> str:
    """Render millicores as "2" for whole cores or "750m" otherwise."""
    if millis % 1000 == 0:
        return str(millis // 1000)
    return f"{millis}m"


def format_memory(num_bytes: int) -> str:
    """Render bytes with the largest suffix that represents them exactly.

    Binary suffixes are preferred over decimal ones: 1536Mi rather than
    1.5Gi, 1k for 1000 bytes, 1023 for 1023 bytes.
    """
    if num_bytes == 0:
        return "0"
    for suffix, multiplier in _BINARY_SUFFIXES:
        if num_bytes % multiplier == 0:
            return f"{num_bytes // multiplier}{suffix}"
    for suffix, multiplier in _DECIMAL_SUFFIXES:
        if num_bytes % multiplier == 0:
            return f"{num_bytes // multiplier}{suffix}"
    return str(num_bytes)
