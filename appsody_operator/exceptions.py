"""
This module implements custom exceptions
"""

## Base Error ##################################################################


class AppsodyError(Exception):
    """Base class for all appsody_operator exceptions"""

    def __init__(self, message: str, is_fatal_error: bool):
        """Construct with a flag indicating whether this is a fatal error. This
        will be a static property of all children.
        """
        super().__init__(message)
        self._is_fatal_error = is_fatal_error

    @property
    def is_fatal_error(self):
        """Property indicating whether or not the reconcile loop should give up
        on the current CR rather than requeue it
        """
        return self._is_fatal_error


## Fatal Errors ################################################################


class AppsodyFatalError(AppsodyError):
    """An AppsodyFatalError is one that will not resolve itself by retrying the
    same CR against the same cluster state.
    """

    def __init__(self, message: str = ""):
        super().__init__(message=message, is_fatal_error=True)


class ConfigError(AppsodyFatalError):
    """Exception caused during usage of user-provided configuration"""


class MalformedQuantityError(ConfigError):
    """The storage size on the CR could not be parsed as a resource quantity"""

    def __init__(self, quantity=None, message: str = ""):
        self.quantity = quantity
        super().__init__(message or f"Malformed resource quantity: {quantity!r}")


class ContractViolationError(AppsodyFatalError):
    """A caller invoked a customizer without meeting its preconditions (e.g.
    building an HPA for a CR with no maxReplicas). This is a bug in the caller,
    not a problem with the CR.
    """


## Assertions ##################################################################


def assert_config(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a ConfigError. This should be
    used when a customizer requires that certain conditions be true in the CR.
    """
    if not condition:
        raise ConfigError(message)


def assert_contract(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a ContractViolationError. This
    should be used to guard the preconditions a customizer places on its caller.
    """
    if not condition:
        raise ContractViolationError(message)
