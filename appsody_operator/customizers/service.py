"""
Customizer for the application's Service
"""

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..labels import get_selector_labels
from ..utils import ensure_dict, ensure_first_item
from .base import customizer, set_labels

log = alog.use_channel("SVC")


@customizer(constants.SERVICE_KIND)
def customize_service(svc: dict, app: AppsodyApplication):
    """Point the Service at the application's pods.

    Only the first port is managed. Extra ports added to the Service out of
    band are left as they are.
    """
    set_labels(svc, app)
    spec = ensure_dict(svc, "spec")
    port = ensure_first_item(spec, "ports")
    port["port"] = app.service_port
    port["targetPort"] = app.service_port
    spec["type"] = app.service_type
    spec["selector"] = get_selector_labels(app)
    log.debug3("Service spec for %s: %s", app, spec)
