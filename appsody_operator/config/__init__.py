"""
Base library config module. Values here control logging and the identity the
operator stamps on the objects it manages.
"""

# Local
from . import validation
from .config import library_config


# Define __getattr__ on this module to delegate to the library config.
def __getattr__(name):
    if name in library_config or hasattr({}, name):
        return getattr(library_config, name)
    raise AttributeError(f"No such config attribute {name}")


# Only expose the library config keys
__all__ = list(library_config.keys())
