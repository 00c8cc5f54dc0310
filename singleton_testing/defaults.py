"""
Defaults used by the verifier when a parameter is not supplied.
MappingProxyType prevents mutation of the defaults inside the code.
"""
import copy
import pickle
from types import MappingProxyType


# Factory names tried in order when none is given
DEFAULT_FACTORY_METHODS = ("get_instance", "getInstance")

# Expected message of the SingletonError raised on unpickling; formatted
# with the fully qualified class name.
UNSERIALIZE_MESSAGE = "Cannot unserialize singleton {}"

# Exceptions that mean "copying is not accessible". TypeError is what Python
# itself raises for objects that refuse copying. RuntimeError also covers
# SingletonError.
RESTRICTION_ERRORS = (TypeError, RuntimeError, copy.Error)

# Values that are never accepted as a singleton instance
PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes, bytearray)

VERIFIER_DEFAULTS = MappingProxyType(
    {
        "factory_methods": DEFAULT_FACTORY_METHODS,
        "unserialize_message": UNSERIALIZE_MESSAGE,
        "pickle_protocol": pickle.HIGHEST_PROTOCOL,
        "restriction_errors": RESTRICTION_ERRORS,
        "primitive_types": PRIMITIVE_TYPES,
    }
)
