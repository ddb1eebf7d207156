"""Manifest parser for decoding workload YAML documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO, Any

import yaml
from pydantic import ValidationError

from kuotacalc.calculator.workloads import calculate_usage
from kuotacalc.errors import ManifestDecodeError, UnsupportedResourceError
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
from kuotacalc.models.resources import ResourceUsage

logger = logging.getLogger(__name__)

# (apiVersion, kind) -> model. Older API groups decode into the same models
# since the fields read by the calculators did not change.
WORKLOAD_TYPES: dict[tuple[str, str], type[Workload]] = {
    ("apps/v1", "Deployment"): Deployment,
    ("apps/v1beta1", "Deployment"): Deployment,
    ("apps/v1beta2", "Deployment"): Deployment,
    ("extensions/v1beta1", "Deployment"): Deployment,
    ("apps/v1", "StatefulSet"): StatefulSet,
    ("apps/v1beta1", "StatefulSet"): StatefulSet,
    ("apps/v1beta2", "StatefulSet"): StatefulSet,
    ("apps/v1", "DaemonSet"): DaemonSet,
    ("apps/v1beta2", "DaemonSet"): DaemonSet,
    ("extensions/v1beta1", "DaemonSet"): DaemonSet,
    ("batch/v1", "Job"): Job,
    ("batch/v1", "CronJob"): CronJob,
    ("batch/v1beta1", "CronJob"): CronJob,
    ("v1", "Pod"): Pod,
    ("apps.openshift.io/v1", "DeploymentConfig"): DeploymentConfig,
    ("v1", "DeploymentConfig"): DeploymentConfig,
}


def is_supported(api_version: str, kind: str) -> bool:
    """Return True if ``apiVersion``/``kind`` decode into a known workload."""
    return (api_version, kind) in WORKLOAD_TYPES


def iter_documents(stream: str | bytes | IO[str] | IO[bytes]) -> Iterator[dict[str, Any]]:
    """Yield the documents of a multi-document YAML stream.

    Empty documents (e.g. a trailing ``---``) are skipped.

    Raises:
        ManifestDecodeError: If the stream is not valid YAML or not valid
            UTF-8.
    """
    try:
        for document in yaml.safe_load_all(stream):
            if document is None:
                continue
            yield document
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ManifestDecodeError(f"reading input: {exc}") from exc


def decode_workload(document: Any) -> Workload:
    """Decode one manifest document into its workload model.

    Args:
        document: A parsed YAML document.

    Returns:
        The typed workload.

    Raises:
        ManifestDecodeError: The document is not a manifest or does not
            match the schema of its kind.
        UnsupportedResourceError: The kind is not a supported workload.
    """
    if not isinstance(document, dict):
        raise ManifestDecodeError(
            f"expected a mapping, got {type(document).__name__}"
        )

    api_version = document.get("apiVersion")
    kind = document.get("kind")
    if not api_version or not kind:
        raise ManifestDecodeError("object 'apiVersion' and 'kind' must be set")
    api_version, kind = str(api_version), str(kind)

    model = WORKLOAD_TYPES.get((api_version, kind))
    if model is None:
        raise UnsupportedResourceError(api_version, kind)

    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise ManifestDecodeError(str(exc), version=api_version, kind=kind) from exc


def resource_usage_from_document(document: Any) -> ResourceUsage:
    """Decode a manifest document and calculate its resource usage.

    Raises:
        ManifestDecodeError: See ``decode_workload``.
        UnsupportedResourceError: See ``decode_workload``.
        CalculationError: The workload's strategy is malformed.
    """
    return calculate_usage(decode_workload(document))


def resource_usage_from_yaml(
    stream: str | bytes | IO[str] | IO[bytes],
) -> list[ResourceUsage]:
    """Calculate the usage of every supported workload in a YAML stream.

    Unsupported kinds are skipped with a warning; any other error propagates.
    """
    usages: list[ResourceUsage] = []
    for document in iter_documents(stream):
        try:
            usages.append(resource_usage_from_document(document))
        except UnsupportedResourceError as exc:
            logger.warning("skipping %s", exc)
    return usages
