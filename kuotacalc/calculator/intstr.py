"""Int-or-percent strategy values.

Rollout fields such as ``maxSurge`` accept either a literal replica count or
a percentage of the desired replicas ("25%"). ``IntOrPercent`` keeps the two
cases apart and turns either into an absolute count.
"""

from __future__ import annotations

from dataclasses import dataclass

from kuotacalc.constants.limits import INT32_MAX, INT32_MIN
from kuotacalc.errors import ReplicaOverflowError, StrategyError


@dataclass(frozen=True, slots=True)
class IntOrPercent:
    """A literal count (``is_percent=False``) or a percentage."""

    value: int
    is_percent: bool = False

    @classmethod
    def parse(cls, raw: int | str) -> IntOrPercent:
        """Parse a manifest value.

        Raises:
            StrategyError: For strings without a trailing "%", non-numeric
                percentages and negative values.
        """
        if isinstance(raw, bool):
            raise StrategyError(f"invalid value for IntOrString: {raw!r}")
        if isinstance(raw, int):
            parsed = cls(raw)
        else:
            text = str(raw).strip()
            if not text.endswith("%"):
                raise StrategyError(
                    f"invalid value for IntOrString: invalid type: string is not a percentage: {text!r}"
                )
            try:
                parsed = cls(int(text[:-1]), is_percent=True)
            except ValueError as exc:
                raise StrategyError(f"invalid value for IntOrString: {text!r}") from exc
        if parsed.value < 0:
            raise StrategyError(f"value must be non-negative, got {raw!r}")
        return parsed

    def resolve(self, total: int, *, round_up: bool) -> int:
        """Absolute count for ``total`` replicas.

        Percentages round up or down as requested; literals are returned
        unchanged.
        """
        if not self.is_percent:
            return self.value
        scaled = self.value * total
        if round_up:
            return -(-scaled // 100)
        return scaled // 100

    def __str__(self) -> str:
        return f"{self.value}%" if self.is_percent else str(self.value)


def scaled_value(raw: int | str, total: int, *, round_up: bool, field: str) -> int:
    """Resolve ``raw`` against ``total`` and check it fits into an int32.

    Raises:
        StrategyError: If ``raw`` is malformed.
        ReplicaOverflowError: If the resolved value leaves the int32 range.
    """
    resolved = IntOrPercent.parse(raw).resolve(total, round_up=round_up)
    return check_int32(resolved, field)


def check_int32(value: int, field: str) -> int:
    if value < INT32_MIN or value > INT32_MAX:
        raise ReplicaOverflowError(f"{field} out of int32 boundaries")
    return value
