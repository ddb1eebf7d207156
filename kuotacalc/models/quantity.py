"""Unit-aware resource quantities.

A ``Quantity`` stores an integer number of milli-units together with the
resource it measures. CPU resolves to one millicore and memory to one byte;
``mul`` rounds its result to that resolution (half away from zero), so a chain
of ``mul`` and ``add`` calls can drift by a few minor units. That is fine for
sizing a quota, not for billing.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import total_ordering
from typing import Any

from kuotacalc.constants.enums import ResourceName
from kuotacalc.utils.resource_parser import (
    format_cpu,
    format_memory,
    memory_str_to_bytes,
    parse_cpu_millis,
)

# Native resolution in milli-units.
_RESOLUTION: dict[ResourceName, int] = {
    ResourceName.CPU: 1,
    ResourceName.MEMORY: 1000,
}


@total_ordering
@dataclass(frozen=True, slots=True)
class Quantity:
    """Immutable CPU or memory amount."""

    milli: int
    resource: ResourceName

    @classmethod
    def zero(cls, resource: ResourceName) -> Quantity:
        return cls(0, resource)

    @classmethod
    def cpu(cls, value: Any) -> Quantity:
        """Build a CPU quantity from a string like "250m" or a number of cores."""
        return cls(parse_cpu_millis(value), ResourceName.CPU)

    @classmethod
    def memory(cls, value: Any) -> Quantity:
        """Build a memory quantity from a string like "512Mi" or a byte count."""
        return cls(memory_str_to_bytes(value) * 1000, ResourceName.MEMORY)

    @property
    def value(self) -> Decimal:
        """Value in base units (cores or bytes)."""
        return Decimal(self.milli) / 1000

    def _check_compatible(self, other: Quantity) -> None:
        if self.resource is not other.resource:
            raise ValueError(
                f"cannot combine {self.resource.value} and {other.resource.value} quantities"
            )

    def add(self, other: Quantity) -> Quantity:
        self._check_compatible(other)
        return Quantity(self.milli + other.milli, self.resource)

    def diff(self, lower: Quantity) -> Quantity:
        """Return ``self - lower``; negative when ``lower`` is larger."""
        self._check_compatible(lower)
        return Quantity(self.milli - lower.milli, self.resource)

    def mul(self, factor: float) -> Quantity:
        resolution = _RESOLUTION[self.resource]
        with localcontext() as ctx:
            ctx.prec = 60
            units = (Decimal(self.milli) * Decimal(factor) / resolution).quantize(
                Decimal(1), rounding=ROUND_HALF_UP
            )
        return Quantity(int(units) * resolution, self.resource)

    def mul_int(self, factor: int) -> Quantity:
        return self.mul(factor)

    def max(self, other: Quantity) -> Quantity:
        self._check_compatible(other)
        return self if self.milli >= other.milli else other

    def __add__(self, other: Quantity) -> Quantity:
        return self.add(other)

    def __sub__(self, other: Quantity) -> Quantity:
        return self.diff(other)

    def __lt__(self, other: Quantity) -> bool:
        self._check_compatible(other)
        return self.milli < other.milli

    def __str__(self) -> str:
        if self.resource is ResourceName.CPU:
            return format_cpu(self.milli)
        if self.milli % 1000:
            return f"{self.milli}m"
        return format_memory(self.milli // 1000)
