"""
Assertions verifying that a class implements the singleton pattern.

``assert_is_singleton`` runs the individual checks below in a fixed order
and raises at the first one that fails:

1. the name resolves to a class
2. calling the class directly is refused
3. a public static/class method serves the instance
4. that method is callable
5. it returns an instance of exactly that class
6. it returns the same object every time
7. the instance cannot be copied
8. the instance is a real object
9. unpickling the instance raises SingletonError
"""
import logging
import pickle
from typing import (Any,
                    Callable,
                    Optional,
                    Sequence,
                    Union)
from pydantic import ValidationError
from .constraints import (assert_that,
                          is_cloneable,
                          logical_not)
from .defaults import VERIFIER_DEFAULTS
from .exceptions import (BehavioralViolation,
                         InternalInconsistencyError,
                         InvalidParameterError,
                         SingletonError,
                         StructuralViolation)
from .inspection import (TypeInspector,
                         fully_qualified_name)
from .models import SingletonCheckParams

logger = logging.getLogger(__name__)

_inspector = TypeInspector()


def assert_is_class(value: Union[str, type], message: str = "") -> type:
    """
    Assert that value is a class or a dotted path to one.

    :param value: Class or "package.module.Class" path
    :param message: Optional replacement for the default failure message
    :return: The resolved class
    """
    cls = _inspector.resolve_class(value)
    if cls is None:
        raise StructuralViolation(message or f"Failed asserting that {value} is a class")
    return cls


def assert_has_private_constructor(value: Union[str, type], message: str = "") -> None:
    """
    Assert that instantiating the class directly is refused.

    :param value: Class or path to it
    :param message: Optional replacement for the default failure message
    :return: None
    """
    cls = assert_is_class(value)
    if not _inspector.has_private_constructor(cls):
        raise StructuralViolation(
            message or f"Failed asserting that '{fully_qualified_name(cls)}' has private constructor")


def assert_has_public_static_method(value: Union[str, type],
                                    name: Union[str, Sequence[str]],
                                    message: str = "") -> str:
    """
    Assert that the class declares a public staticmethod or classmethod.
    Given several names, the first one declared wins.

    :param value: Class or path to it
    :param name: Method name, or candidate names in lookup order
    :param message: Optional replacement for the default failure message
    :return: The name of the method found
    """
    cls = assert_is_class(value)
    names = (name,) if isinstance(name, str) else tuple(name)
    for candidate in names:
        if _inspector.find_static_method(cls, candidate) is not None:
            return candidate

    wanted = " or ".join(f"{candidate}()" for candidate in names)
    raise StructuralViolation(
        message or f"Failed asserting that '{fully_qualified_name(cls)}' "
                   f"has public static method {wanted}")


def assert_is_idempotent(function: Callable[[], Any], name: str, message: str = "") -> None:
    """
    Assert that two successive calls return the very same object.

    :param function: Zero-argument callable
    :param name: Name of the callable used in the failure message
    :param message: Optional replacement for the default failure message
    :return: None
    """
    first = function()
    second = function()
    if first is not second:
        raise BehavioralViolation(message or f"Failed asserting that {name}() is idempotent")


def assert_not_cloneable(value: Any, message: str = "") -> None:
    """
    Assert that value (an instance, a class or a path to one) cannot be
    copied.

    :param value: Value under test
    :param message: Optional replacement for the default failure message
    :return: None
    """
    matcher = logical_not(is_cloneable())
    if not message:
        assert_that(value, matcher)
    elif not matcher.matches(value):
        raise BehavioralViolation(message)


def assert_is_object(value: Any, message: str = "") -> None:
    """Assert that value is neither None nor a primitive"""
    if value is None or isinstance(value, VERIFIER_DEFAULTS["primitive_types"]):
        raise BehavioralViolation(message or f"Failed asserting that {value!r} is an object")


def assert_throws_singleton_error_on_unserialize(obj: Any, message: str = "") -> None:
    """
    Pickle the object and assert that loading it back raises SingletonError
    with the message "Cannot unserialize singleton <module>.<class>".

    Any other outcome of the load, including success, fails the assertion
    with the same message, whatever the object actually raised.

    :param obj: Instance to round-trip
    :param message: Optional replacement for the "exception not thrown"
        failure message
    :return: None
    """
    class_name = fully_qualified_name(type(obj))

    try:
        payload = pickle.dumps(obj, protocol=VERIFIER_DEFAULTS["pickle_protocol"])
    except Exception as err:  # pylint: disable=broad-except
        raise BehavioralViolation(
            f"Failed asserting that {class_name} instance can be serialized") from err

    expect = VERIFIER_DEFAULTS["unserialize_message"].format(class_name)
    try:
        pickle.loads(payload)
    except SingletonError as err:
        if str(err) != expect:
            raise BehavioralViolation(
                f"Failed asserting that exception message is '{expect}'\n"
                f"Actual message: '{err}'") from err
        logger.debug("Unpickling %s was refused as expected", class_name)
        return
    except Exception as err:  # pylint: disable=broad-except
        logger.debug("Unpickling %s raised %r instead of SingletonError", class_name, err)

    raise BehavioralViolation(
        message or "Failed asserting that exception of type "
                   f"\"{fully_qualified_name(SingletonError)}\" is thrown")


def _factory_callable(cls: type, name: str) -> Callable[[], Any]:
    """
    Fetch the factory method. Reflection has already found a public
    static/class method by this name, so anything uncallable here means
    the descriptor itself is broken.
    """
    factory = getattr(cls, name, None)
    if not callable(factory):
        raise InternalInconsistencyError(
            f"{fully_qualified_name(cls)}.{name} is declared as a static method "
            f"but resolves to non-callable {factory!r}")
    return factory


def assert_is_singleton(class_name: Union[str, type],
                        factory_method: Optional[str] = None
                        ) -> None:
    """
    Assert that a class implements the singleton pattern.

    :param class_name: Class or "package.module.Class" path
    :param factory_method: Name of the static method serving the instance;
        when omitted, get_instance and then getInstance are looked up
    :raises InvalidParameterError: if the arguments have the wrong type
    :raises StructuralViolation: checks 1-3
    :raises InternalInconsistencyError: the factory is not callable
    :raises BehavioralViolation: checks 5-9
    :return: None
    """
    try:
        params = SingletonCheckParams(class_name=class_name, factory_method=factory_method)
    except ValidationError as err:
        raise InvalidParameterError(err) from err

    cls = assert_is_class(params.class_name)
    name = fully_qualified_name(cls)
    logger.debug("Verifying that %s is a singleton served by %s", name,
                 " or ".join(params.factory_methods))

    assert_has_private_constructor(cls)
    logger.debug("%s: constructor is private", name)

    method = assert_has_public_static_method(cls, params.factory_methods)
    factory = _factory_callable(cls, method)
    logger.debug("%s: %s() is a public static method", name, method)

    instance = factory()
    if type(instance) is not cls:  # pylint: disable=unidiomatic-typecheck
        raise BehavioralViolation(
            f"Failed asserting that {name}.{method}() returns an instance of {name}")

    assert_is_idempotent(factory, f"{name}.{method}")
    logger.debug("%s: %s() is idempotent", name, method)

    assert_not_cloneable(cls)
    logger.debug("%s: instances are not cloneable", name)

    assert_is_object(instance)
    assert_throws_singleton_error_on_unserialize(instance)
    logger.debug("%s is a singleton", name)
