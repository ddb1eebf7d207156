"""Constants module for kuota-calc.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, labels, env var names)
- limits.py: Integer bounds
- defaults.py: Default values for strategies and settings
"""

from kuotacalc.constants.defaults import (
    DEPLOYMENT_MAX_SURGE_DEFAULT,
    DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT,
    MAX_ROLLOUTS_DEFAULT,
    REPLICAS_DEFAULT,
    STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT,
)
from kuotacalc.constants.enums import (
    DeploymentConfigStrategyType,
    DeploymentStrategyType,
    ResourceName,
    StatefulSetStrategyType,
    WorkloadKind,
)
from kuotacalc.constants.limits import INT32_MAX, INT32_MIN, INT64_MAX
from kuotacalc.constants.values import APP_DESCRIPTION, APP_NAME

__all__ = [
    "APP_DESCRIPTION",
    "APP_NAME",
    "DEPLOYMENT_MAX_SURGE_DEFAULT",
    "DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "MAX_ROLLOUTS_DEFAULT",
    "REPLICAS_DEFAULT",
    "STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT",
    "DeploymentConfigStrategyType",
    "DeploymentStrategyType",
    "ResourceName",
    "StatefulSetStrategyType",
    "WorkloadKind",
]
