"""Resource usage calculators."""

from kuotacalc.calculator.intstr import IntOrPercent, scaled_value
from kuotacalc.calculator.pod_resources import calc_pod_resources
from kuotacalc.calculator.total import total
from kuotacalc.calculator.workloads import (
    calculate_usage,
    daemon_set_usage,
    deployment_config_usage,
    deployment_usage,
    single_pod_usage,
    stateful_set_usage,
)

__all__ = [
    "IntOrPercent",
    "calc_pod_resources",
    "calculate_usage",
    "daemon_set_usage",
    "deployment_config_usage",
    "deployment_usage",
    "scaled_value",
    "single_pod_usage",
    "stateful_set_usage",
    "total",
]
