"""
Customizers for the Deployment or StatefulSet that runs the application
"""

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..exceptions import assert_config
from ..labels import get_selector_labels
from ..utils import ensure_dict
from .base import customizer, set_labels
from .persistence import customize_persistence
from .pod import customize_pod_template

log = alog.use_channel("WKLD")


def _customize_workload_spec(workload: dict, app: AppsodyApplication) -> dict:
    set_labels(workload, app)
    spec = ensure_dict(workload, "spec")

    # With autoscaling on, the HPA owns the replica count
    if app.autoscaling is None and app.replicas is not None:
        spec["replicas"] = app.replicas
    else:
        log.debug2("Leaving replicas of %s unmanaged", app)

    spec["selector"] = {"matchLabels": get_selector_labels(app)}
    spec["template"] = customize_pod_template(spec.get("template"), app)
    return spec


@customizer(constants.DEPLOYMENT_KIND)
def customize_deployment(deployment: dict, app: AppsodyApplication):
    """Run the application as a Deployment"""
    _customize_workload_spec(deployment, app)


@customizer(constants.STATEFULSET_KIND)
def customize_statefulset(statefulset: dict, app: AppsodyApplication):
    """Run the application as a StatefulSet with a volume claim per replica"""
    assert_config(
        app.storage is not None,
        f"{app} needs storage to run as a {constants.STATEFULSET_KIND}",
    )
    spec = _customize_workload_spec(statefulset, app)
    spec["serviceName"] = app.name
    statefulset.update(customize_persistence(statefulset, app))
