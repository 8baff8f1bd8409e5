"""
Customizer for the HorizontalPodAutoscaler and the choice of the workload kind
it scales
"""

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..utils import ensure_dict
from .base import customizer, set_labels, set_or_clear

log = alog.use_channel("HPA")


def get_workload_kind(app: AppsodyApplication) -> str:
    """Get the kind of workload that runs the application. Declaring storage
    makes it a StatefulSet, otherwise it is a Deployment.
    """
    if app.storage is not None:
        return constants.STATEFULSET_KIND
    return constants.DEPLOYMENT_KIND


@customizer(constants.HPA_KIND)
def customize_hpa(hpa: dict, app: AppsodyApplication):
    """Copy the autoscaling bounds from the CR and target the workload.

    NOTE: The CR must declare autoscaling.maxReplicas. Calling this for a CR
        without it raises ContractViolationError.

    NOTE: The scale target kind is derived from the CR alone. It is up to the
        caller to build the matching workload with customize_deployment or
        customize_statefulset.
    """
    set_labels(hpa, app)
    spec = ensure_dict(hpa, "spec")
    spec["maxReplicas"] = app.max_replicas
    set_or_clear(spec, "minReplicas", app.min_replicas)
    set_or_clear(
        spec,
        "targetCPUUtilizationPercentage",
        app.target_cpu_utilization_percentage,
    )

    target_ref = ensure_dict(spec, "scaleTargetRef")
    target_ref["name"] = app.name
    target_ref["apiVersion"] = constants.APPS_API_VERSION
    target_ref["kind"] = get_workload_kind(app)
    log.debug("Scaling %s/%s for %s", target_ref["kind"], app.name, app)
