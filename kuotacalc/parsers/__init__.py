"""Manifest parsers."""

from kuotacalc.parsers.manifest_parser import (
    WORKLOAD_TYPES,
    decode_workload,
    is_supported,
    iter_documents,
    resource_usage_from_document,
    resource_usage_from_yaml,
)

__all__ = [
    "WORKLOAD_TYPES",
    "decode_workload",
    "is_supported",
    "iter_documents",
    "resource_usage_from_document",
    "resource_usage_from_yaml",
]
