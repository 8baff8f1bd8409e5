"""
Customizer for the pod template shared by the Deployment and StatefulSet
"""

# First Party
import alog

# Local
from .. import constants
from ..affinity import compile_node_affinity
from ..application import AppsodyApplication
from ..utils import ensure_dict, ensure_first_item
from .base import customizer, set_labels, set_or_clear

log = alog.use_channel("POD")


def get_service_account_name(app: AppsodyApplication) -> str:
    """Get the ServiceAccount the pods run as. Without an explicit name, every
    application gets its own ServiceAccount named after itself.
    """
    return app.service_account_name or app.name


@customizer("PodTemplateSpec")
def customize_pod_template(pts: dict, app: AppsodyApplication):
    """Set up the single application container and the pod-level policies.

    NOTE: When the CR has no architectures, any affinity already on the
        template is left in place rather than cleared.
    """
    set_labels(pts, app)
    pod_spec = ensure_dict(pts, "spec")

    container = ensure_first_item(pod_spec, "containers")
    container["name"] = constants.CONTAINER_NAME
    ensure_first_item(container, "ports")["containerPort"] = app.service_port
    set_or_clear(container, "image", app.application_image)
    set_or_clear(container, "resources", app.resource_constraints)
    set_or_clear(container, "readinessProbe", app.readiness_probe)
    set_or_clear(container, "livenessProbe", app.liveness_probe)
    set_or_clear(container, "volumeMounts", app.volume_mounts)
    set_or_clear(container, "imagePullPolicy", app.pull_policy)
    set_or_clear(container, "env", app.env)
    set_or_clear(container, "envFrom", app.env_from)
    set_or_clear(pod_spec, "volumes", app.volumes)

    pod_spec["serviceAccountName"] = get_service_account_name(app)
    pod_spec["restartPolicy"] = constants.RESTART_POLICY
    pod_spec["dnsPolicy"] = constants.DNS_POLICY

    architectures = app.architecture
    if architectures:
        log.debug("Restricting %s to architectures %s", app, architectures)
        pod_spec["affinity"] = {"nodeAffinity": compile_node_affinity(architectures)}
