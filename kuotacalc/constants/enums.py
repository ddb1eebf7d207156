"""All enum definitions for kuota-calc.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Workload Enums
# =============================================================================


class WorkloadKind(Enum):
    """Workload kinds the calculators understand."""

    DEPLOYMENT = "Deployment"
    DEPLOYMENT_CONFIG = "DeploymentConfig"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    JOB = "Job"
    CRON_JOB = "CronJob"
    POD = "Pod"


class ResourceName(Enum):
    """Compute resources tracked per container."""

    CPU = "cpu"
    MEMORY = "memory"


# =============================================================================
# Strategy Enums
# =============================================================================


class DeploymentStrategyType(Enum):
    """apps/v1 Deployment strategy types."""

    RECREATE = "Recreate"
    ROLLING_UPDATE = "RollingUpdate"


class DeploymentConfigStrategyType(Enum):
    """apps.openshift.io/v1 DeploymentConfig strategy types."""

    RECREATE = "Recreate"
    ROLLING = "Rolling"


class StatefulSetStrategyType(Enum):
    """apps/v1 StatefulSet update strategy types."""

    ON_DELETE = "OnDelete"
    ROLLING_UPDATE = "RollingUpdate"
