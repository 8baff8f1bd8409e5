"""
Customizer for the OpenShift Route that exposes the application
"""

# Local
from .. import constants
from ..application import AppsodyApplication
from ..utils import ensure_dict
from .base import customizer, set_labels


@customizer(constants.ROUTE_KIND)
def customize_route(route: dict, app: AppsodyApplication):
    """Send all of the Route's traffic to the application's Service"""
    set_labels(route, app)
    spec = ensure_dict(route, "spec")
    to = ensure_dict(spec, "to")  # pylint: disable=invalid-name
    to["kind"] = constants.SERVICE_KIND
    to["name"] = app.name
    to["weight"] = constants.ROUTE_TARGET_WEIGHT
    ensure_dict(spec, "port")["targetPort"] = app.service_port
