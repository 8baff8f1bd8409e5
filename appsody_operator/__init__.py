"""
Package exports
"""

# Local
from . import config, constants
from .affinity import compile_node_affinity
from .application import AppsodyApplication
from .customizers import (
    customize_deployment,
    customize_hpa,
    customize_persistence,
    customize_pod_template,
    customize_route,
    customize_service,
    customize_service_account,
    customize_statefulset,
    get_workload_kind,
)
from .desired_state import build_desired_state, index_objects
from .exceptions import (
    AppsodyError,
    ConfigError,
    ContractViolationError,
    MalformedQuantityError,
    assert_config,
    assert_contract,
)
from .labels import get_labels, get_selector_labels
