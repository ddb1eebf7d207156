"""Scalar constants for kuota-calc."""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kuota-calc"
APP_DESCRIPTION: Final = "Calculate the resource quota needs of your deployment(s)."

# ============================================================================
# Environment variables
# ============================================================================

ENV_MAX_ROLLOUTS: Final = "KUOTA_CALC_MAX_ROLLOUTS"
ENV_DETAILED: Final = "KUOTA_CALC_DETAILED"
ENV_DEBUG: Final = "KUOTA_CALC_DEBUG"

# ============================================================================
# Report labels
# ============================================================================

LABEL_CPU_REQUEST: Final = "CPU Request"
LABEL_CPU_LIMIT: Final = "CPU Limit"
LABEL_MEMORY_REQUEST: Final = "Memory Request"
LABEL_MEMORY_LIMIT: Final = "Memory Limit"

DETAILED_COLUMNS: Final = (
    "Version",
    "Kind",
    "Name",
    "Replicas",
    "Strategy",
    "MaxReplicas",
    "CPURequest",
    "CPULimit",
    "MemoryRequest",
    "MemoryLimit",
)

__all__ = [
    "APP_DESCRIPTION",
    "APP_NAME",
    "DETAILED_COLUMNS",
    "ENV_DEBUG",
    "ENV_DETAILED",
    "ENV_MAX_ROLLOUTS",
    "LABEL_CPU_LIMIT",
    "LABEL_CPU_REQUEST",
    "LABEL_MEMORY_LIMIT",
    "LABEL_MEMORY_REQUEST",
]
