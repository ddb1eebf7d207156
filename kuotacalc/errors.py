"""Exception types raised while decoding manifests and calculating usage."""

from __future__ import annotations


class KuotaCalcError(Exception):
    """Base exception for kuota-calc errors."""


class UnsupportedResourceError(KuotaCalcError):
    """Raised when a manifest's kind is not one of the supported workloads."""

    def __init__(self, version: str, kind: str) -> None:
        self.version = version
        self.kind = kind
        super().__init__(f"{version}/{kind}: resource not supported")


class ManifestDecodeError(KuotaCalcError):
    """Raised when a manifest document cannot be decoded structurally."""

    def __init__(self, message: str, *, version: str = "", kind: str = "") -> None:
        self.version = version
        self.kind = kind
        if version or kind:
            message = f"decoding {version}/{kind}: {message}"
        super().__init__(message)


class StrategyError(KuotaCalcError):
    """Raised for malformed rollout strategy configuration."""


class ReplicaOverflowError(StrategyError):
    """Raised when a replica count leaves the int32 range."""


class CalculationError(KuotaCalcError):
    """Wraps a calculator failure with the workload's version and kind."""

    def __init__(self, version: str, kind: str, cause: Exception) -> None:
        self.version = version
        self.kind = kind
        self.cause = cause
        super().__init__(f"calculating {version}/{kind} resource usage: {cause}")


class SettingsError(KuotaCalcError):
    """Raised when settings fail to load or validate."""
