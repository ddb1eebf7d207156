"""Pod resource aggregation."""

from __future__ import annotations

from collections.abc import Iterable

from kuotacalc.models.manifests import Container, PodSpec
from kuotacalc.models.resources import PodResources, Resources


def _sum_containers(containers: Iterable[Container]) -> Resources:
    total = Resources.zero()
    for container in containers:
        total = total.add(container.resources.to_resources())
    return total


def calc_pod_resources(pod_spec: PodSpec) -> PodResources:
    """Sum requests and limits of a pod template.

    Regular containers and init containers are summed separately.
    ``max_resources`` holds, per resource, whichever group needs more.

    Args:
        pod_spec: Pod spec of the workload's template.

    Returns:
        PodResources for one pod.
    """
    containers = _sum_containers(pod_spec.containers)
    init_containers = _sum_containers(pod_spec.init_containers)
    return PodResources(
        containers=containers,
        init_containers=init_containers,
        max_resources=containers.maximum(init_containers),
    )
