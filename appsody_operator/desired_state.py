"""
Compose the full set of objects owned by an AppsodyApplication
"""

# Standard
from typing import Dict, Iterable, List, Optional, Tuple

# First Party
import alog

# Local
from . import constants
from .application import AppsodyApplication
from .customizers import (
    customize_deployment,
    customize_hpa,
    customize_route,
    customize_service,
    customize_service_account,
    customize_statefulset,
    get_workload_kind,
)
from .customizers.base import CUSTOMIZER_TYPE
from .utils import ensure_dict

log = alog.use_channel("DSTAT")

# Key used to look up a live object: (kind, name)
OBJECT_KEY = Tuple[str, str]

_WORKLOAD_CUSTOMIZERS = {
    constants.DEPLOYMENT_KIND: customize_deployment,
    constants.STATEFULSET_KIND: customize_statefulset,
}


def index_objects(objects: Iterable[dict]) -> Dict[OBJECT_KEY, dict]:
    """Index a list of live manifests by (kind, name) for use as the existing
    argument to build_desired_state
    """
    index = {}
    for obj in objects:
        if not obj:
            continue
        key = (obj.get("kind"), (obj.get("metadata") or {}).get("name"))
        log.debug3("Indexing existing object %s", key)
        index[key] = obj
    return index


def build_desired_state(
    app: AppsodyApplication,
    existing: Optional[Dict[OBJECT_KEY, dict]] = None,
) -> List[dict]:
    """Build every object the application should own in the cluster.

    The workload kind and the HPA scale target are both derived from
    get_workload_kind, so they always agree in the returned list.

    Args:
        app:  AppsodyApplication
            The application to render
        existing:  Optional[Dict[OBJECT_KEY, dict]]
            Live objects keyed by (kind, name). A live object is used as the
            starting point for its customizer.

    Returns:
        objects:  List[dict]
            The desired manifests, in apply order
    """
    existing = existing or {}
    workload_kind = get_workload_kind(app)
    log.debug("Building desired state for %s with a %s", app, workload_kind)

    plan = []
    if not app.service_account_name:
        plan.append((constants.CORE_API_VERSION, customize_service_account))
    plan.append((constants.APPS_API_VERSION, _WORKLOAD_CUSTOMIZERS[workload_kind]))
    plan.append((constants.CORE_API_VERSION, customize_service))
    if app.autoscaling is not None:
        plan.append((constants.HPA_API_VERSION, customize_hpa))
    if app.expose:
        plan.append((constants.ROUTE_API_VERSION, customize_route))

    return [
        _build_object(app, api_version, func, existing.get((func.kind, app.name)))
        for api_version, func in plan
    ]


def _build_object(
    app: AppsodyApplication,
    api_version: str,
    func: CUSTOMIZER_TYPE,
    current: Optional[dict],
) -> dict:
    """Run one customizer and stamp the object's identity onto the result"""
    kind = func.kind
    if current is not None:
        log.debug2("Customizing live %s/%s", kind, app.name)
    obj = func(current, app)
    obj["apiVersion"] = api_version
    obj["kind"] = kind
    metadata = ensure_dict(obj, "metadata")
    metadata["name"] = app.name
    metadata["namespace"] = app.namespace
    return obj
