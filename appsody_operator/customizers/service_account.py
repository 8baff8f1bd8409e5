"""
Customizer for the application's ServiceAccount
"""

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..utils import ensure_first_item
from .base import customizer, set_labels

log = alog.use_channel("SA")


@customizer(constants.SERVICE_ACCOUNT_KIND)
def customize_service_account(sa: dict, app: AppsodyApplication):
    """Attach the application's pull secret. The ServiceAccount always ends up
    with exactly one imagePullSecrets entry.
    """
    set_labels(sa, app)
    secret_ref = ensure_first_item(sa, "imagePullSecrets")
    secret_ref["name"] = app.pull_secret or ""
    if len(sa["imagePullSecrets"]) > 1:
        log.debug(
            "Dropping %d extra pull secrets from %s",
            len(sa["imagePullSecrets"]) - 1,
            app,
        )
        del sa["imagePullSecrets"][1:]
