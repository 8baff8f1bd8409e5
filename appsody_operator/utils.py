"""
Common utilities shared across the customizers
"""

# Standard
from typing import Any
import datetime
import re

# Third Party
from kubernetes.utils import parse_quantity

# First Party
import alog

# Local
from . import constants
from .exceptions import MalformedQuantityError

log = alog.use_channel("UTILS")

# Sentinel for missing dict values
__MISSING__ = "__MISSING__"

## Dicts #######################################################################


def nested_set(dct: dict, key: str, val: Any):
    """Helper to set values in a dict using 'foo.bar' key notation

    Args:
        dct:  dict
            The dict into which the key will be set
        key:  str
            Key that may contain '.' notation indicating dict nesting
        val:  Any
            The value to place at the nested key
    """
    parts = key.split(constants.NESTED_DICT_DELIM)
    for i, part in enumerate(parts[:-1]):
        dct = dct.setdefault(part, {})
        if not isinstance(dct, dict):
            raise TypeError(
                f"Intermediate key {constants.NESTED_DICT_DELIM.join(parts[:i+1])} is not a dict"
            )
    dct[parts[-1]] = val


def nested_get(dct: dict, key: str, dflt=None) -> Any:
    """Helper to get values from a dict using 'foo.bar' key notation

    Args:
        dct:  dict
            The dict to read from
        key:  str
            Key that may contain '.' notation indicating dict nesting

    Returns:
        val:  Any
            Whatever is found at the given key or dflt if the key is not found.
            This includes missing intermediate dicts.
    """
    parts = key.split(constants.NESTED_DICT_DELIM)
    for i, part in enumerate(parts[:-1]):
        dct = dct.get(part, __MISSING__)
        if dct is __MISSING__ or dct is None:
            return dflt
        if not isinstance(dct, dict):
            raise TypeError(
                f"Intermediate key {constants.NESTED_DICT_DELIM.join(parts[:i+1])} is not a dict"
            )
    return dct.get(parts[-1], dflt)


def ensure_dict(dct: dict, key: str) -> dict:
    """Get the dict stored at key, allocating an empty one if the key is missing
    or holds None
    """
    if not isinstance(dct.get(key), dict):
        dct[key] = {}
    return dct[key]


def ensure_first_item(dct: dict, key: str) -> dict:
    """Get the first dict in the list stored at key, appending a zero-valued
    entry if the list is missing or empty. Entries beyond the first are never
    touched.
    """
    items = dct.get(key)
    if not items:
        items = [{}]
        dct[key] = items
    if not isinstance(items[0], dict):
        items[0] = {}
    return items[0]


# Adapted from the kubernetes client with None pruning
# https://github.com/kubernetes-client/python/blob/d67bc8c2bdb89b29c17c1ba0edb03a48d977c0e2/kubernetes/client/api_client.py#L202
def sanitize_for_serialization(obj):  # pylint: disable=too-many-return-statements
    """Convert an object into plain json-compatible python types.

    If obj is None, return None.
    If obj is str, int, float, bool, return directly.
    If obj is datetime.datetime, datetime.date convert to iso8601 string.
    If obj is list or tuple, sanitize each element.
    If obj is dict, sanitize each value.
    If obj is an OpenAPI model, return the properties dict keyed by the json
        attribute names.
    """
    if obj is None:  # pylint: disable=no-else-return
        return None
    elif isinstance(obj, (float, bool, bytes, str, int)):
        return obj
    elif isinstance(obj, (list, tuple)):
        return [sanitize_for_serialization(sub_obj) for sub_obj in obj]
    elif isinstance(obj, (datetime.datetime, datetime.date)):
        return obj.isoformat()

    if isinstance(obj, dict):
        obj_dict = obj
    elif hasattr(obj, "attribute_map"):
        obj_dict = {
            name: getattr(obj, attr)
            for attr, name in obj.attribute_map.items()
            if hasattr(obj, attr)
        }
    else:
        raise TypeError(f"Cannot serialize object of type {type(obj)}")

    # Prune fields which are None but keep empty arrays or dictionaries
    return_dict = {}
    for key, val in obj_dict.items():
        updated_obj = sanitize_for_serialization(val)
        if updated_obj is not None:
            return_dict[key] = updated_obj
    return return_dict


## Quantities ##################################################################

# Signed decimal with an optional exponent, SI suffix or binary suffix
QUANTITY_PATTERN = re.compile(
    r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+|[numkMGTPE]|[KMGTPE]i)?"
)


def parse_storage_size(size: Any) -> str:
    """Validate a storage size string as a kubernetes resource quantity

    Args:
        size:  Any
            The size from the CR (e.g. "1Gi")

    Returns:
        size:  str
            The validated quantity string, unchanged

    Raises:
        MalformedQuantityError:  If the size is not a valid quantity
    """
    if not isinstance(size, str) or not QUANTITY_PATTERN.fullmatch(size):
        log.debug("Storage size [%s] is not a quantity", size)
        raise MalformedQuantityError(size)
    try:
        parse_quantity(size)
    except (ValueError, ArithmeticError) as err:
        log.debug("Failed to parse storage size [%s]: %s", size, err)
        raise MalformedQuantityError(size) from err
    return size


## Errors ######################################################################


def error_is_no_matches_for_kind(err: Exception, kind: str, version: str) -> bool:
    """Check whether an API error reports that the cluster does not serve the
    given kind (e.g. a Route on a cluster that is not OpenShift)
    """
    return str(err).startswith(f'no matches for kind "{kind}" in version "{version}"')
