"""
Customizer for the volume claim of a StatefulSet
"""

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..exceptions import assert_contract
from ..labels import get_labels
from ..utils import ensure_dict, parse_storage_size
from .base import customizer

log = alog.use_channel("PVC")


def build_volume_claim(app: AppsodyApplication) -> dict:
    """Get the volume claim template for the application. An explicit template
    on the CR is used as is. Otherwise a single ReadWriteOnce claim of the
    requested size is built.

    Raises:
        MalformedQuantityError:  If the storage size is not a valid quantity
    """
    template = app.volume_claim_template
    if template is not None:
        log.debug2("Using volumeClaimTemplate from %s", app)
        return template

    size = parse_storage_size(app.storage_size)
    return {
        "metadata": {
            "name": constants.CLAIM_NAME,
            "namespace": app.namespace,
            "labels": get_labels(app),
        },
        "spec": {
            "resources": {"requests": {constants.STORAGE_RESOURCE: size}},
            "accessModes": [constants.CLAIM_ACCESS_MODE],
        },
    }


@customizer(constants.STATEFULSET_KIND)
def customize_persistence(statefulset: dict, app: AppsodyApplication):
    """Add the volume claim template to a StatefulSet that has none.

    NOTE: Once a claim template exists it is never replaced, so later changes
        to the CR's storage size do not reach the StatefulSet.
    """
    assert_contract(app.storage is not None, f"{app} does not declare storage")
    spec = ensure_dict(statefulset, "spec")
    if spec.get("volumeClaimTemplates"):
        log.debug3("%s already has a volume claim template", app)
        return
    spec["volumeClaimTemplates"] = [build_volume_claim(app)]
