"""Per-kind rollout calculators.

Each supported workload kind maps to one function that derives the replica
count and rollout parameters from the kind's strategy and turns the pod
template's resources into a ``ResourceUsage``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from kuotacalc.calculator.intstr import check_int32, scaled_value
from kuotacalc.calculator.pod_resources import calc_pod_resources
from kuotacalc.constants.defaults import (
    DEPLOYMENT_MAX_SURGE_DEFAULT,
    DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT,
    REPLICAS_DEFAULT,
    STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT,
)
from kuotacalc.constants.enums import (
    DeploymentConfigStrategyType,
    DeploymentStrategyType,
    StatefulSetStrategyType,
    WorkloadKind,
)
from kuotacalc.errors import CalculationError, StrategyError
from kuotacalc.models.manifests import (
    DaemonSet,
    Deployment,
    DeploymentConfig,
    StatefulSet,
    Workload,
)
from kuotacalc.models.resources import Details, PodResources, Resources, ResourceUsage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RolloutParams:
    """Absolute rollout bounds for one workload."""

    max_unavailable: int  # pods that may be down at once
    max_surge: int  # pods allowed on top of the desired replicas

    @property
    def max_non_ready(self) -> int:
        """Pods that may be starting (init containers or unready) at once."""
        return self.max_surge + self.max_unavailable


def _replicas_or_default(replicas: int | None) -> int:
    return REPLICAS_DEFAULT if replicas is None else replicas


def _rolling_params(
    replicas: int,
    max_unavailable: int | str | None,
    max_surge: int | str | None,
) -> RolloutParams:
    """Resolve rolling update bounds the way the deployment controller does.

    maxUnavailable rounds down and maxSurge rounds up.
    """
    if max_unavailable is None:
        max_unavailable = DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT
    if max_surge is None:
        max_surge = DEPLOYMENT_MAX_SURGE_DEFAULT

    unavailable = scaled_value(
        max_unavailable, replicas, round_up=False, field="maxUnavailable"
    )
    surge = scaled_value(max_surge, replicas, round_up=True, field="maxSurge")
    params = RolloutParams(max_unavailable=min(unavailable, replicas), max_surge=surge)

    check_int32(params.max_non_ready, "maxSurge + maxUnavailable")
    check_int32(replicas + params.max_surge, "replicas + maxSurge")
    return params


def _surge_usage(
    pod: PodResources,
    replicas: int,
    params: RolloutParams,
    details: Details,
    extra_rollout: Resources | None = None,
) -> ResourceUsage:
    # Pods kept running during the rollout use their regular containers; every
    # pod being replaced or surged may still be in its init phase.
    rollout = pod.containers.mul_int(replicas - params.max_unavailable).add(
        pod.max_resources.mul_int(params.max_non_ready)
    )
    if extra_rollout is not None:
        rollout = rollout.add(extra_rollout)

    return ResourceUsage(
        normal_resources=pod.containers.mul_int(replicas),
        rollout_resources=rollout,
        details=details,
    )


def _zero_usage(workload: Workload, strategy: str) -> ResourceUsage:
    return ResourceUsage(
        normal_resources=Resources.zero(),
        rollout_resources=Resources.zero(),
        details=Details(
            version=workload.api_version,
            kind=workload.kind,
            name=workload.name,
            strategy=strategy,
            replicas=0,
            max_replicas=0,
        ),
    )


def deployment_usage(deployment: Deployment) -> ResourceUsage:
    """Calculate the usage of an apps/v1 Deployment.

    ``Recreate`` stops every pod before starting the new ones, so all
    replicas may be in their init phase at once but none surge.
    ``RollingUpdate`` (also used when the type is empty) runs up to
    ``replicas - maxUnavailable`` old pods next to ``maxSurge +
    maxUnavailable`` starting ones.

    Raises:
        StrategyError: Unknown strategy type or malformed rollout values.
    """
    replicas = _replicas_or_default(deployment.spec.replicas)
    strategy = deployment.spec.strategy

    if replicas == 0:
        return _zero_usage(deployment, strategy.type)

    strategy_type = strategy.type or DeploymentStrategyType.ROLLING_UPDATE.value

    if strategy_type == DeploymentStrategyType.RECREATE.value:
        params = RolloutParams(max_unavailable=replicas, max_surge=0)
    elif strategy_type == DeploymentStrategyType.ROLLING_UPDATE.value:
        rolling = strategy.rolling_update
        params = _rolling_params(
            replicas,
            rolling.max_unavailable if rolling else None,
            rolling.max_surge if rolling else None,
        )
    else:
        raise StrategyError(
            f'deployment: {deployment.name} deployment strategy "{strategy_type}" is unknown'
        )

    logger.debug(
        "deployment %s: replicas=%d maxUnavailable=%d maxSurge=%d",
        deployment.name,
        replicas,
        params.max_unavailable,
        params.max_surge,
    )

    return _surge_usage(
        calc_pod_resources(deployment.pod_spec),
        replicas,
        params,
        Details(
            version=deployment.api_version,
            kind=deployment.kind,
            name=deployment.name,
            strategy=strategy_type,
            replicas=replicas,
            max_replicas=replicas + params.max_surge,
        ),
    )


def deployment_config_usage(deployment_config: DeploymentConfig) -> ResourceUsage:
    """Calculate the usage of an OpenShift DeploymentConfig.

    Same model as a Deployment with ``Rolling`` instead of
    ``RollingUpdate``. The deployer pod's resources from
    ``spec.strategy.resources`` are added once to the rollout peak. An absent
    ``spec.replicas`` means zero replicas.
    """
    replicas = deployment_config.spec.replicas
    strategy = deployment_config.spec.strategy

    if replicas == 0:
        return _zero_usage(deployment_config, strategy.type)

    strategy_type = strategy.type or DeploymentConfigStrategyType.ROLLING.value

    if strategy_type == DeploymentConfigStrategyType.RECREATE.value:
        params = RolloutParams(max_unavailable=replicas, max_surge=0)
    elif strategy_type == DeploymentConfigStrategyType.ROLLING.value:
        rolling = strategy.rolling_params
        params = _rolling_params(
            replicas,
            rolling.max_unavailable if rolling else None,
            rolling.max_surge if rolling else None,
        )
    else:
        raise StrategyError(
            f"deploymentConfig: {deployment_config.name} deploymentConfig strategy "
            f'"{strategy_type}" is unknown'
        )

    logger.debug(
        "deploymentConfig %s: replicas=%d maxUnavailable=%d maxSurge=%d",
        deployment_config.name,
        replicas,
        params.max_unavailable,
        params.max_surge,
    )

    return _surge_usage(
        calc_pod_resources(deployment_config.pod_spec),
        replicas,
        params,
        Details(
            version=deployment_config.api_version,
            kind=deployment_config.kind,
            name=deployment_config.name,
            strategy=strategy_type,
            replicas=replicas,
            max_replicas=replicas + params.max_surge,
        ),
        extra_rollout=strategy.resources.to_resources(),
    )


def stateful_set_usage(stateful_set: StatefulSet) -> ResourceUsage:
    """Calculate the usage of an apps/v1 StatefulSet.

    StatefulSets replace pods in place and never surge. ``OnDelete`` waits
    for pods to be deleted by hand; the worst case is all of them at once.
    ``RollingUpdate`` replaces ``maxUnavailable`` pods at a time (default
    1, percentages round up).
    """
    replicas = _replicas_or_default(stateful_set.spec.replicas)
    strategy = stateful_set.spec.update_strategy
    strategy_type = strategy.type

    if strategy_type == StatefulSetStrategyType.ON_DELETE.value:
        max_unavailable = replicas
    else:
        if strategy_type not in ("", StatefulSetStrategyType.ROLLING_UPDATE.value):
            logger.warning(
                "statefulSet %s: update strategy %r is unknown, assuming %s",
                stateful_set.name,
                strategy_type,
                StatefulSetStrategyType.ROLLING_UPDATE.value,
            )
        strategy_type = StatefulSetStrategyType.ROLLING_UPDATE.value
        raw: int | str = STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT
        rolling = strategy.rolling_update
        if rolling is not None and rolling.max_unavailable is not None:
            raw = rolling.max_unavailable
        max_unavailable = min(
            scaled_value(raw, replicas, round_up=True, field="maxUnavailable"),
            replicas,
        )

    logger.debug(
        "statefulSet %s: replicas=%d maxUnavailable=%d",
        stateful_set.name,
        replicas,
        max_unavailable,
    )

    return _surge_usage(
        calc_pod_resources(stateful_set.pod_spec),
        replicas,
        RolloutParams(max_unavailable=max_unavailable, max_surge=0),
        Details(
            version=stateful_set.api_version,
            kind=stateful_set.kind,
            name=stateful_set.name,
            strategy=strategy_type,
            replicas=replicas,
            max_replicas=replicas,
        ),
    )


def daemon_set_usage(daemon_set: DaemonSet) -> ResourceUsage:
    """Usage of a DaemonSet, modelled as a single pod (node count unknown)."""
    pod = calc_pod_resources(daemon_set.pod_spec)
    return ResourceUsage(
        normal_resources=pod.containers,
        rollout_resources=pod.max_resources,
        details=Details(
            version=daemon_set.api_version,
            kind=daemon_set.kind,
            name=daemon_set.name,
            replicas=1,
            max_replicas=1,
        ),
    )


def single_pod_usage(workload: Workload) -> ResourceUsage:
    """Usage of a Job, CronJob or Pod: one pod run, no replicas."""
    pod = calc_pod_resources(workload.pod_spec)
    return ResourceUsage(
        normal_resources=pod.containers,
        rollout_resources=pod.max_resources,
        details=Details(
            version=workload.api_version,
            kind=workload.kind,
            name=workload.name,
            replicas=0,
            max_replicas=0,
        ),
    )


_CALCULATORS: dict[WorkloadKind, Callable[[Any], ResourceUsage]] = {
    WorkloadKind.DEPLOYMENT: deployment_usage,
    WorkloadKind.DEPLOYMENT_CONFIG: deployment_config_usage,
    WorkloadKind.STATEFUL_SET: stateful_set_usage,
    WorkloadKind.DAEMON_SET: daemon_set_usage,
    WorkloadKind.JOB: single_pod_usage,
    WorkloadKind.CRON_JOB: single_pod_usage,
    WorkloadKind.POD: single_pod_usage,
}


def calculate_usage(workload: Workload) -> ResourceUsage:
    """Calculate the resource usage of one decoded workload.

    Args:
        workload: A decoded manifest of a supported kind.

    Returns:
        ResourceUsage with steady-state and rollout resources.

    Raises:
        CalculationError: Malformed strategy or int32 overflow, wrapped with
            the workload's version and kind.
    """
    calculator = _CALCULATORS[workload.WORKLOAD_KIND]
    try:
        return calculator(workload)
    except StrategyError as exc:
        raise CalculationError(workload.api_version, workload.kind, exc) from exc
