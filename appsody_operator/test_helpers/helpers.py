"""
This module holds common helper functions for making testing easy
"""

# Standard
from contextlib import contextmanager
import copy
import os

# First Party
import aconfig
import alog

# Local
from appsody_operator import constants
from appsody_operator.application import AppsodyApplication
from appsody_operator.config import library_config as config_detail_dict

log = alog.use_channel("TEST")


def configure_logging():
    alog.configure(
        os.environ.get("LOG_LEVEL", "off"),
        os.environ.get("LOG_FILTERS", ""),
        formatter="json"
        if os.environ.get("LOG_JSON", "").lower() == "true"
        else "pretty",
        thread_id=os.environ.get("LOG_THREAD_ID", "").lower() == "true",
    )


configure_logging()

TEST_INSTANCE_NAME = "example-app"
TEST_NAMESPACE = "test"
TEST_PORT = 8000
TEST_IMAGE = "appsody:v1"


def setup_cr(
    spec=None,
    name=TEST_INSTANCE_NAME,
    namespace=TEST_NAMESPACE,
    port=TEST_PORT,
    **kwargs,
):
    """Build a minimal AppsodyApplication CR manifest. Any spec values given
    are layered on top of the required image and service port.
    """
    cr_dict = kwargs or {}
    cr_dict.setdefault("kind", constants.CR_KIND)
    cr_dict.setdefault("apiVersion", constants.CR_API_VERSION)
    cr_dict.setdefault("metadata", {}).setdefault("name", name)
    cr_dict["metadata"].setdefault("namespace", namespace)
    cr_spec = cr_dict.setdefault("spec", {})
    cr_spec.setdefault("applicationImage", TEST_IMAGE)
    cr_spec.setdefault("service", {}).setdefault("port", port)
    spec = copy.deepcopy(spec or {})
    cr_spec["service"].update(spec.pop("service", None) or {})
    cr_spec.update(spec)
    return aconfig.Config(cr_dict, override_env_vars=False)


def setup_app(spec=None, **kwargs) -> AppsodyApplication:
    """Build an AppsodyApplication around a CR from setup_cr"""
    return AppsodyApplication(setup_cr(spec=spec, **kwargs))


@contextmanager
def library_config(**config_overrides):
    """This context manager sets library config values temporarily and reverts
    them on completion
    """
    # Override the configs and hang onto the old values
    old_vals = {}
    for key, val in config_overrides.items():
        if key in config_detail_dict:
            old_vals[key] = config_detail_dict[key]
        config_detail_dict[key] = val

    try:
        yield
    finally:
        for key in config_overrides:
            if key in old_vals:
                config_detail_dict[key] = old_vals[key]
            else:
                del config_detail_dict[key]
