"""Cluster-wide totals over many workloads."""

from __future__ import annotations

from collections.abc import Sequence

from kuotacalc.models.quantity import Quantity
from kuotacalc.models.resources import Resources, ResourceUsage

_DIMENSIONS: tuple[str, ...] = ("cpu_min", "cpu_max", "memory_min", "memory_max")


def _sum(quantities: list[Quantity], start: Quantity) -> Quantity:
    result = start
    for quantity in quantities:
        result = result.add(quantity)
    return result


def total(max_rollout: int, usages: Sequence[ResourceUsage]) -> Resources:
    """Sum the usage of all workloads.

    A negative ``max_rollout`` assumes every workload rolls out at the same
    time and sums the rollout resources. Otherwise the steady-state resources
    are summed and, for each resource on its own, the ``max_rollout`` largest
    rollout overheads are added on top. The workloads picked for CPU requests
    can therefore differ from the ones picked for memory limits.

    Args:
        max_rollout: Simultaneous rollouts to assume, negative for unlimited.
        usages: Per-workload usages.

    Returns:
        Resources needed by all workloads together.
    """
    zero = Resources.zero()

    if max_rollout < 0:
        result = zero
        for usage in usages:
            result = result.add(usage.rollout_resources)
        return result

    totals: dict[str, Quantity] = {}
    for dimension in _DIMENSIONS:
        normal = [getattr(u.normal_resources, dimension) for u in usages]
        overheads = sorted(
            (
                getattr(u.rollout_resources, dimension).diff(
                    getattr(u.normal_resources, dimension)
                )
                for u in usages
            ),
            reverse=True,
        )
        steady = _sum(normal, getattr(zero, dimension))
        totals[dimension] = _sum(overheads[:max_rollout], steady)

    return Resources(**totals)
