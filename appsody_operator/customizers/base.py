"""
Decorator shared by all customizers
"""

# Standard
from typing import Callable, Optional
import copy
import functools

# First Party
import alog

# Local
from ..application import AppsodyApplication
from ..labels import get_labels
from ..utils import ensure_dict

log = alog.use_channel("CUSTM")

CUSTOMIZER_TYPE = Callable[[Optional[dict], AppsodyApplication], dict]


def customizer(kind: str) -> Callable[[Callable], CUSTOMIZER_TYPE]:
    """The @customizer decorator turns a function that edits a manifest in
    place into a value-in/value-out transform.

    The wrapped function receives a deep copy of the target (or an empty dict
    when the target is None) and edits it. The caller's object is never
    modified, so a failure part way through leaves the caller's state intact.

    Args:
        kind:  str
            The kind of object the customizer handles, used for logging

    Returns:
        decorator:  Callable[[Callable], CUSTOMIZER_TYPE]
            The decorator to apply to the in-place customizer function
    """

    def decorator(func: Callable[[dict, AppsodyApplication], None]):
        @functools.wraps(func)
        def wrapper(target: Optional[dict], app: AppsodyApplication) -> dict:
            result = copy.deepcopy(target) if target is not None else {}
            log.debug2("Customizing %s for %s", kind, app)
            func(result, app)
            return result

        wrapper.kind = kind
        return wrapper

    return decorator


def set_labels(obj: dict, app: AppsodyApplication):
    """Replace the object's labels with the application's identity labels"""
    ensure_dict(obj, "metadata")["labels"] = get_labels(app)


def set_or_clear(dct: dict, key: str, value):
    """Copy a CR value onto the target, removing the key when the CR leaves the
    value unset
    """
    if value is None:
        dct.pop(key, None)
    else:
        dct[key] = value
