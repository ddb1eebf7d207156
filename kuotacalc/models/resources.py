"""Resource totals and per-workload usage models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kuotacalc.constants.enums import ResourceName
from kuotacalc.models.quantity import Quantity


def _zero_cpu() -> Quantity:
    return Quantity.zero(ResourceName.CPU)


def _zero_memory() -> Quantity:
    return Quantity.zero(ResourceName.MEMORY)


class Resources(BaseModel):
    """Requests and limits for CPU and memory, handled as one unit.

    ``cpu_min``/``memory_min`` are the requests, ``cpu_max``/``memory_max``
    the limits. Every operation returns a new instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cpu_min: Quantity = Field(default_factory=_zero_cpu)
    cpu_max: Quantity = Field(default_factory=_zero_cpu)
    memory_min: Quantity = Field(default_factory=_zero_memory)
    memory_max: Quantity = Field(default_factory=_zero_memory)

    @classmethod
    def zero(cls) -> Resources:
        return cls()

    @classmethod
    def from_strings(
        cls,
        cpu_min: str | int | float = 0,
        cpu_max: str | int | float = 0,
        memory_min: str | int | float = 0,
        memory_max: str | int | float = 0,
    ) -> Resources:
        """Build resources from quantity strings such as "250m" or "1Gi"."""
        return cls(
            cpu_min=Quantity.cpu(cpu_min),
            cpu_max=Quantity.cpu(cpu_max),
            memory_min=Quantity.memory(memory_min),
            memory_max=Quantity.memory(memory_max),
        )

    def add(self, other: Resources) -> Resources:
        return Resources(
            cpu_min=self.cpu_min.add(other.cpu_min),
            cpu_max=self.cpu_max.add(other.cpu_max),
            memory_min=self.memory_min.add(other.memory_min),
            memory_max=self.memory_max.add(other.memory_max),
        )

    def diff(self, other: Resources) -> Resources:
        """Element-wise ``self - other``."""
        return Resources(
            cpu_min=self.cpu_min.diff(other.cpu_min),
            cpu_max=self.cpu_max.diff(other.cpu_max),
            memory_min=self.memory_min.diff(other.memory_min),
            memory_max=self.memory_max.diff(other.memory_max),
        )

    def mul(self, factor: float) -> Resources:
        return Resources(
            cpu_min=self.cpu_min.mul(factor),
            cpu_max=self.cpu_max.mul(factor),
            memory_min=self.memory_min.mul(factor),
            memory_max=self.memory_max.mul(factor),
        )

    def mul_int(self, factor: int) -> Resources:
        return self.mul(factor)

    def maximum(self, other: Resources) -> Resources:
        """Element-wise maximum of both resource sets."""
        return Resources(
            cpu_min=self.cpu_min.max(other.cpu_min),
            cpu_max=self.cpu_max.max(other.cpu_max),
            memory_min=self.memory_min.max(other.memory_min),
            memory_max=self.memory_max.max(other.memory_max),
        )

    def __add__(self, other: Resources) -> Resources:
        return self.add(other)


class PodResources(BaseModel):
    """Summed resources of one pod template.

    Init containers run to completion before the regular containers start,
    so the pod never needs both groups at once: ``max_resources`` is the
    element-wise maximum of the two.
    """

    model_config = ConfigDict(frozen=True)

    containers: Resources
    init_containers: Resources
    max_resources: Resources


class Details(BaseModel):
    """Descriptive workload data shown in the detailed report."""

    model_config = ConfigDict(frozen=True)

    version: str
    kind: str
    name: str
    strategy: str = ""
    replicas: int = 0
    max_replicas: int = 0


class ResourceUsage(BaseModel):
    """Steady-state and peak-during-rollout usage of one workload."""

    model_config = ConfigDict(frozen=True)

    normal_resources: Resources
    rollout_resources: Resources
    details: Details
