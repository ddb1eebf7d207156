"""Tests for the cluster-wide total."""

from __future__ import annotations

from kuotacalc.calculator.total import total
from kuotacalc.models.resources import Details, Resources, ResourceUsage


def _usage(name: str, normal: Resources, rollout: Resources) -> ResourceUsage:
    return ResourceUsage(
        normal_resources=normal,
        rollout_resources=rollout,
        details=Details(version="apps/v1", kind="Deployment", name=name),
    )


# a: small CPU overhead, large memory overhead; b: the other way round
_A = _usage(
    "a",
    Resources.from_strings(cpu_min="100m", memory_min="1Gi"),
    Resources.from_strings(cpu_min="200m", memory_min="3Gi"),
)
_B = _usage(
    "b",
    Resources.from_strings(cpu_min="200m", memory_min="1Gi"),
    Resources.from_strings(cpu_min="700m", memory_min="2Gi"),
)


class TestTotal:
    """Tests for total()."""

    def test_empty(self) -> None:
        """Test no workloads need no resources."""
        assert total(-1, []) == Resources.zero()
        assert total(2, []) == Resources.zero()

    def test_unlimited_sums_rollout(self) -> None:
        """Test a negative limit sums every rollout."""
        result = total(-1, [_A, _B])
        assert result == _A.rollout_resources.add(_B.rollout_resources)
        assert str(result.cpu_min) == "900m"
        assert str(result.memory_min) == "5Gi"

    def test_zero_rollouts_sums_normal(self) -> None:
        """Test a limit of zero is the steady state."""
        result = total(0, [_A, _B])
        assert result == _A.normal_resources.add(_B.normal_resources)
        assert str(result.cpu_min) == "300m"
        assert str(result.memory_min) == "2Gi"

    def test_top_overhead_picked_per_dimension(self) -> None:
        """Test each dimension picks its own most expensive rollout."""
        result = total(1, [_A, _B])
        # cpu: b adds 500m; memory: a adds 2Gi
        assert str(result.cpu_min) == "800m"
        assert str(result.memory_min) == "4Gi"
        assert str(result.cpu_max) == "0"

    def test_limit_above_workload_count(self) -> None:
        """Test a limit larger than the workload count adds every overhead."""
        assert total(5, [_A, _B]) == total(-1, [_A, _B])

    def test_does_not_mutate_inputs(self) -> None:
        """Test usages are unchanged after totalling."""
        before = _A.rollout_resources
        total(1, [_A, _B])
        total(-1, [_A, _B])
        assert _A.rollout_resources == before
