"""Limit values for replica arithmetic and quantities."""

from typing import Final

# ============================================================================
# Integer bounds (Kubernetes replica fields are int32)
# ============================================================================

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1

# Largest quantity the API server accepts, in base units
INT64_MAX: Final = 2**63 - 1

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
]
