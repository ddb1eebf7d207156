"""Data models for kuota-calc."""

from kuotacalc.models.manifests import (
    CronJob,
    DaemonSet,
    Deployment,
    DeploymentConfig,
    Job,
    Pod,
    StatefulSet,
    Workload,
)
from kuotacalc.models.quantity import Quantity
from kuotacalc.models.resources import Details, PodResources, Resources, ResourceUsage
from kuotacalc.models.settings import CalcSettings

__all__ = [
    "CalcSettings",
    "CronJob",
    "DaemonSet",
    "Deployment",
    "DeploymentConfig",
    "Details",
    "Job",
    "Pod",
    "PodResources",
    "Quantity",
    "ResourceUsage",
    "Resources",
    "StatefulSet",
    "Workload",
]
