"""
Identity labels for the objects owned by an AppsodyApplication
"""

# Standard
from typing import Dict

# First Party
import alog

# Local
from . import config, constants
from .application import AppsodyApplication

log = alog.use_channel("LABEL")


def get_labels(app: AppsodyApplication) -> Dict[str, str]:
    """Get the full set of metadata.labels for an object owned by the given
    application. Customizers always replace the target's labels with this dict
    rather than merging into it.

    Args:
        app:  AppsodyApplication
            The application that owns the object

    Returns:
        labels:  Dict[str, str]
            The name and managed-by labels
    """
    return {
        constants.NAME_LABEL: app.name,
        constants.MANAGED_BY_LABEL: config.operator_id,
    }


def get_selector_labels(app: AppsodyApplication) -> Dict[str, str]:
    """Get the label selector that matches the pods of the given application"""
    return {constants.NAME_LABEL: app.name}
