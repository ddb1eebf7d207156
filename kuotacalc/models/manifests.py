"""Workload manifest models.

Only the part of the Kubernetes and OpenShift API the calculators read is
modelled. Unknown fields are ignored and explicit ``null`` values fall back
to the field default.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kuotacalc.constants.enums import ResourceName, WorkloadKind
from kuotacalc.constants.limits import INT32_MAX
from kuotacalc.models.quantity import Quantity
from kuotacalc.models.resources import Resources
from kuotacalc.utils.resource_parser import parse_quantity

# Literal replica count or a percentage string such as "25%".
IntOrString = int | str


class ManifestModel(BaseModel):
    """Base model for manifest sections."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ObjectMeta(ManifestModel):
    name: str = ""


class ResourceRequirements(ManifestModel):
    """Container (or deployer pod) requests and limits."""

    requests: dict[str, Any] = Field(default_factory=dict)
    limits: dict[str, Any] = Field(default_factory=dict)

    @field_validator("requests", "limits")
    @classmethod
    def _validate_quantities(cls, values: dict[str, Any]) -> dict[str, Any]:
        for resource in ResourceName:
            if resource.value not in values or values[resource.value] is None:
                continue
            if parse_quantity(values[resource.value]) < 0:
                raise ValueError(f"{resource.value} must be non-negative")
        return values

    def to_resources(self) -> Resources:
        """Convert the declared quantities; missing entries count as zero."""
        return Resources(
            cpu_min=Quantity.cpu(self.requests.get("cpu") or 0),
            cpu_max=Quantity.cpu(self.limits.get("cpu") or 0),
            memory_min=Quantity.memory(self.requests.get("memory") or 0),
            memory_max=Quantity.memory(self.limits.get("memory") or 0),
        )


class Container(ManifestModel):
    name: str = ""
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class PodSpec(ManifestModel):
    containers: list[Container] = Field(default_factory=list)
    init_containers: list[Container] = Field(default_factory=list, alias="initContainers")


class PodTemplateSpec(ManifestModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)


class Workload(ManifestModel):
    """Common envelope of every supported workload manifest."""

    WORKLOAD_KIND: ClassVar[WorkloadKind]

    api_version: str = Field(alias="apiVersion")
    kind: str
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    @abstractmethod
    def pod_spec(self) -> PodSpec:
        """Pod spec the workload's pods are created from."""


# =============================================================================
# apps/v1 Deployment
# =============================================================================


class RollingUpdateDeployment(ManifestModel):
    max_unavailable: IntOrString | None = Field(default=None, alias="maxUnavailable")
    max_surge: IntOrString | None = Field(default=None, alias="maxSurge")


class DeploymentStrategy(ManifestModel):
    type: str = ""
    rolling_update: RollingUpdateDeployment | None = Field(default=None, alias="rollingUpdate")


class DeploymentSpec(ManifestModel):
    replicas: int | None = Field(default=None, ge=0, le=INT32_MAX)
    strategy: DeploymentStrategy = Field(default_factory=DeploymentStrategy)
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class Deployment(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.DEPLOYMENT

    spec: DeploymentSpec = Field(default_factory=DeploymentSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.template.spec


# =============================================================================
# apps.openshift.io/v1 DeploymentConfig
# =============================================================================


class RollingDeploymentStrategyParams(ManifestModel):
    max_unavailable: IntOrString | None = Field(default=None, alias="maxUnavailable")
    max_surge: IntOrString | None = Field(default=None, alias="maxSurge")


class DeploymentConfigStrategy(ManifestModel):
    type: str = ""
    rolling_params: RollingDeploymentStrategyParams | None = Field(
        default=None, alias="rollingParams"
    )
    # Requests/limits of the deployer pod that runs the rollout.
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class DeploymentConfigSpec(ManifestModel):
    # Not defaulted by the API server: an absent value means no replicas.
    replicas: int = Field(default=0, ge=0, le=INT32_MAX)
    strategy: DeploymentConfigStrategy = Field(default_factory=DeploymentConfigStrategy)
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class DeploymentConfig(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.DEPLOYMENT_CONFIG

    spec: DeploymentConfigSpec = Field(default_factory=DeploymentConfigSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.template.spec


# =============================================================================
# apps/v1 StatefulSet
# =============================================================================


class RollingUpdateStatefulSetStrategy(ManifestModel):
    max_unavailable: IntOrString | None = Field(default=None, alias="maxUnavailable")


class StatefulSetUpdateStrategy(ManifestModel):
    type: str = ""
    rolling_update: RollingUpdateStatefulSetStrategy | None = Field(
        default=None, alias="rollingUpdate"
    )


class StatefulSetSpec(ManifestModel):
    replicas: int | None = Field(default=None, ge=0, le=INT32_MAX)
    update_strategy: StatefulSetUpdateStrategy = Field(
        default_factory=StatefulSetUpdateStrategy, alias="updateStrategy"
    )
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class StatefulSet(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.STATEFUL_SET

    spec: StatefulSetSpec = Field(default_factory=StatefulSetSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.template.spec


# =============================================================================
# apps/v1 DaemonSet
# =============================================================================


class DaemonSetSpec(ManifestModel):
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class DaemonSet(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.DAEMON_SET

    spec: DaemonSetSpec = Field(default_factory=DaemonSetSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.template.spec


# =============================================================================
# batch/v1 Job and CronJob
# =============================================================================


class JobSpec(ManifestModel):
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class Job(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.JOB

    spec: JobSpec = Field(default_factory=JobSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.template.spec


class JobTemplateSpec(ManifestModel):
    spec: JobSpec = Field(default_factory=JobSpec)


class CronJobSpec(ManifestModel):
    job_template: JobTemplateSpec = Field(default_factory=JobTemplateSpec, alias="jobTemplate")


class CronJob(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.CRON_JOB

    spec: CronJobSpec = Field(default_factory=CronJobSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec.job_template.spec.template.spec


# =============================================================================
# v1 Pod
# =============================================================================


class Pod(Workload):
    WORKLOAD_KIND: ClassVar[WorkloadKind] = WorkloadKind.POD

    spec: PodSpec = Field(default_factory=PodSpec)

    @property
    def pod_spec(self) -> PodSpec:
        return self.spec
