"""kuota-calc: size resource quotas for workloads and their rollouts."""

__version__ = "0.1.0"

from kuotacalc.calculator import calc_pod_resources, calculate_usage, total
from kuotacalc.errors import (
    CalculationError,
    KuotaCalcError,
    ManifestDecodeError,
    ReplicaOverflowError,
    StrategyError,
    UnsupportedResourceError,
)
from kuotacalc.models import Details, PodResources, Quantity, Resources, ResourceUsage
from kuotacalc.parsers import (
    decode_workload,
    is_supported,
    iter_documents,
    resource_usage_from_document,
    resource_usage_from_yaml,
)

__all__ = [
    "CalculationError",
    "Details",
    "KuotaCalcError",
    "ManifestDecodeError",
    "PodResources",
    "Quantity",
    "ReplicaOverflowError",
    "ResourceUsage",
    "Resources",
    "StrategyError",
    "UnsupportedResourceError",
    "__version__",
    "calc_pod_resources",
    "calculate_usage",
    "decode_workload",
    "is_supported",
    "iter_documents",
    "resource_usage_from_document",
    "resource_usage_from_yaml",
    "total",
]
