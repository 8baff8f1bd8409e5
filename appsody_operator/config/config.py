"""
Loading and validation of the library config. The shipped config is loaded
once at import time and used to do the initial log setup.
"""

# Standard
from typing import Optional
import os

# First Party
import aconfig
import alog

# Local
from ..exceptions import ConfigError
from .validation import get_invalid_params

CONFIG_DIR = os.path.dirname(__file__)
DEFAULT_CONFIG_PATH = os.path.join(CONFIG_DIR, "config.yaml")
DEFAULT_VALIDATION_PATH = os.path.join(CONFIG_DIR, "config_validation.yaml")


def load_library_config(
    config_path: Optional[str] = None,
    validation_path: Optional[str] = None,
    override_env_vars: bool = True,
) -> aconfig.Config:
    """Load a library config yaml and check it against its validation yaml

    Args:
        config_path:  Optional[str]
            Path to the config yaml (default is the shipped config.yaml)
        validation_path:  Optional[str]
            Path to the validation yaml (default is the shipped
            config_validation.yaml)
        override_env_vars:  bool
            Whether env vars (e.g. OPERATOR_ID) override values from the yaml

    Returns:
        library_config:  aconfig.Config
            The loaded config

    Raises:
        ConfigError:  If any value fails validation
    """
    loaded = aconfig.Config.from_yaml(
        config_path or DEFAULT_CONFIG_PATH,
        override_env_vars=override_env_vars,
    )
    # Env vars never change what counts as valid
    validation = aconfig.Config.from_yaml(
        validation_path or DEFAULT_VALIDATION_PATH,
        override_env_vars=False,
    )
    invalid_params = get_invalid_params(loaded, validation)
    if invalid_params:
        raise ConfigError(
            f"Library configuration found invalid values: {invalid_params}"
        )
    return loaded


def configure_logging(config: aconfig.Config, formatter=None):
    """Apply the logging section of a library config to alog"""
    alog.configure(
        default_level=config.log_level,
        filters=config.log_filters,
        formatter=formatter or ("json" if config.log_json else "pretty"),
        thread_id=config.log_thread_id,
    )


library_config = load_library_config()
configure_logging(library_config)
