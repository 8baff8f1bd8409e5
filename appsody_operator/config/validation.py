"""
Module to validate values in the loaded library config against the parallel
config_validation.yaml description
"""

# Standard
from typing import Any, Dict, List, Optional
import abc

# First Party
import aconfig
import alog

# Local
from .. import constants
from ..utils import nested_get

log = alog.use_channel("CONFG")


## Public ######################################################################


def get_invalid_params(
    config: aconfig.Config,
    validation_config: aconfig.Config,
) -> List[str]:
    """Get a list of any params that are invalid

    Args:
        config:  aconfig.Config
            The parsed config with any override values
        validation_config:  aconfig.Config
            The parallel config holding validation setup

    Returns:
        invalid_params:  List[str]
            A list of all nested string keys for parameters that fail
            validation
    """
    invalid_params = []
    for val_key, validator in _parse_validation_config(validation_config).items():
        if not validator.validate(nested_get(config, val_key)):
            log.warning("Found invalid config key [%s]", val_key)
            invalid_params.append(val_key)
    return invalid_params


## Parameter Types #############################################################

# pylint: disable=too-few-public-methods


class _ValidatedParameter(abc.ABC):
    """A single config value with a required type and optional value rules"""

    TYPES: List[type] = []
    TYPE_KEY: Optional[str] = None

    def __init__(self, optional: bool = False):
        self.optional = optional

    def validate(self, value: Any) -> bool:
        """Return True if the value has a valid type and passes the value
        rules for this parameter
        """
        if self.optional and value is None:
            return True

        # NOTE: bool is a subclass of int, so it is excluded explicitly unless
        #   it is one of the allowed types
        if not any(isinstance(value, typ) for typ in self.TYPES) or (
            isinstance(value, bool) and bool not in self.TYPES
        ):
            log.warning("Invalid type <%s>", type(value))
            return False

        valid_value = self._validate_value(value)
        if not valid_value:
            log.warning("Invalid value [%s]", value)
        return valid_value

    @abc.abstractmethod
    def _validate_value(self, value: Any) -> bool:
        """Type-specific value rules"""


class _IntParameter(_ValidatedParameter):
    """An int with optional inclusive bounds"""

    TYPES = [int]
    TYPE_KEY = "int"

    def __init__(
        self,
        *,
        min: Optional[int] = None,  # pylint: disable=redefined-builtin
        max: Optional[int] = None,  # pylint: disable=redefined-builtin
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._min = min
        self._max = max

    def _validate_value(self, value: int) -> bool:
        return (self._min is None or value >= self._min) and (
            self._max is None or value <= self._max
        )


class _StrParameter(_ValidatedParameter):
    """A str with optional inclusive length bounds"""

    TYPES = [str]
    TYPE_KEY = "str"

    def __init__(
        self,
        *,
        min_len: Optional[int] = None,
        max_len: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._min_len = min_len
        self._max_len = max_len

    def _validate_value(self, value: str) -> bool:
        return (self._min_len is None or len(value) >= self._min_len) and (
            self._max_len is None or len(value) <= self._max_len
        )


class _BoolParameter(_ValidatedParameter):
    TYPES = [bool]
    TYPE_KEY = "bool"

    def _validate_value(self, value: bool) -> bool:
        return True


class _EnumParameter(_ValidatedParameter):
    """One of a fixed set of str or int values"""

    TYPES = [str, int, type(None)]
    TYPE_KEY = "enum"

    def __init__(self, *, values: List[Any], **kwargs):
        super().__init__(**kwargs)
        assert (
            isinstance(values, list) and values
        ), "Must specify at least one enum value!"
        self.values = values

    def _validate_value(self, value: Any) -> bool:
        return value in self.values


# pylint: enable=too-few-public-methods

## Factory #####################################################################

_factory_map = {
    param_class.TYPE_KEY: param_class
    for param_class in [_IntParameter, _StrParameter, _BoolParameter, _EnumParameter]
}


def _construct_parameter(param_args: Dict[str, Any]) -> Optional[_ValidatedParameter]:
    """Construct a parameter from the args parsed out of a validation file. If
    the type is unknown, None is returned.
    """
    assert "type" in param_args, "All parameters must have a 'type'"
    param_args = dict(param_args)
    param_type = param_args.pop("type")
    if not (isinstance(param_type, str) and param_type in _factory_map):
        return None
    return _factory_map[param_type](**param_args)


def _parse_validation_config(
    validation_config: aconfig.Config,
    prefix_parts: Optional[List[str]] = None,
) -> Dict[str, _ValidatedParameter]:
    """Recursively parse the validation config into a flat dict from nested
    keys to parameters
    """
    output_dict = {}
    prefix_parts = prefix_parts or []
    for key, val in validation_config.items():
        assert isinstance(key, str), "Only string keys allowed!"
        if not isinstance(val, dict):
            continue
        key_parts = prefix_parts + [key]
        nested_key = constants.NESTED_DICT_DELIM.join(key_parts)

        param = _construct_parameter(val) if "type" in val else None
        if param:
            log.debug3("Found parameter at %s", nested_key)
            output_dict[nested_key] = param
        else:
            log.debug3("Recursing into %s", nested_key)
            output_dict.update(_parse_validation_config(val, prefix_parts=key_parts))
    return output_dict
