"""Default values for strategies and settings."""

from typing import Final

# ============================================================================
# Strategy defaults
# ============================================================================

DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT: Final = "25%"
DEPLOYMENT_MAX_SURGE_DEFAULT: Final = "25%"
STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT: Final = 1
REPLICAS_DEFAULT: Final = 1

# ============================================================================
# Settings defaults
# ============================================================================

MAX_ROLLOUTS_DEFAULT: Final = -1
DETAILED_DEFAULT: Final = False
DEBUG_DEFAULT: Final = False

__all__ = [
    "DEBUG_DEFAULT",
    "DEPLOYMENT_MAX_SURGE_DEFAULT",
    "DEPLOYMENT_MAX_UNAVAILABLE_DEFAULT",
    "DETAILED_DEFAULT",
    "MAX_ROLLOUTS_DEFAULT",
    "REPLICAS_DEFAULT",
    "STATEFUL_SET_MAX_UNAVAILABLE_DEFAULT",
]
