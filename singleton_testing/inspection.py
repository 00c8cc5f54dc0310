"""
Narrow reflection helpers used by the matchers and assertions.

Python has no declared member visibility, so "restricted" is answered the
way the interpreter itself answers it: an operation is restricted when
invoking it is refused.
"""
import copy
import inspect
import logging
import pkgutil
from typing import (Any,
                    Optional,
                    Union)
from .defaults import VERIFIER_DEFAULTS

logger = logging.getLogger(__name__)

# Parameters that must be supplied for a call to succeed
_BINDABLE_KINDS = (inspect.Parameter.POSITIONAL_ONLY,
                   inspect.Parameter.POSITIONAL_OR_KEYWORD,
                   inspect.Parameter.KEYWORD_ONLY)


def fully_qualified_name(cls: type) -> str:
    """
    Dotted path of a class, resolvable again with ``TypeInspector.resolve_class``.

    :param cls: Class to name
    :return: "<module>.<qualname>"
    """
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeInspector:
    """
    Answers the yes/no structural questions asked about a class under test.
    """
    def __init__(self, restriction_errors=VERIFIER_DEFAULTS["restriction_errors"]):
        self.restriction_errors = restriction_errors

    @staticmethod
    def resolve_class(name_or_class: Union[str, type, Any]) -> Optional[type]:
        """
        Resolve a dotted path ("pkg.mod.Cls" or "pkg.mod:Cls") to a class.

        :param name_or_class: Path to resolve, or an already resolved class
        :return: The class, or None if the value does not name one
        """
        if isinstance(name_or_class, type):
            return name_or_class
        if not isinstance(name_or_class, str) or not name_or_class:
            return None

        try:
            resolved = pkgutil.resolve_name(name_or_class)
        except (ImportError, AttributeError, ValueError) as err:
            logger.debug("Unable to resolve %r: %s", name_or_class, err)
            return None

        return resolved if isinstance(resolved, type) else None

    def is_class(self, value: Any) -> bool:
        """True if value is a class or a path resolving to one"""
        return self.resolve_class(value) is not None

    def has_private_constructor(self, cls: type) -> bool:
        """
        Check whether ``cls()`` is refused.

        A constructor with required parameters is public: it can be called
        by anyone who supplies them, so it is never invoked here. Otherwise
        the class is called once without arguments and any exception it
        raises counts as a refusal.

        :param cls: Class under test
        :return: True if direct instantiation is refused
        """
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            signature = None

        if signature is not None:
            required = [name for name, param in signature.parameters.items()
                        if param.kind in _BINDABLE_KINDS and param.default is param.empty]
            if required:
                logger.debug("%s() requires %s; constructor is public",
                             cls.__qualname__, ", ".join(required))
                return False

        try:
            cls()
        except Exception as err:  # pylint: disable=broad-except
            logger.debug("%s() refused: %s", cls.__qualname__, err)
            return True
        return False

    @staticmethod
    def find_static_method(cls: type, name: str) -> Optional[Union[staticmethod, classmethod]]:
        """
        Look up a public, class-level method without triggering descriptors.

        :param cls: Class under test
        :param name: Method name
        :return: The staticmethod/classmethod object, or None
        """
        if name.startswith("_"):
            return None
        try:
            attribute = inspect.getattr_static(cls, name)
        except AttributeError:
            return None
        if isinstance(attribute, (staticmethod, classmethod)):
            return attribute
        return None

    def is_duplication_restricted(self, value: Any) -> bool:
        """
        Decide whether a class, or an instance, refuses to be copied. Both
        are judged by actually copying: a class is represented by a bare
        instance allocated with object.__new__, so its __new__ and __init__
        are not run until copying itself reconstructs the object.

        :param value: A class or an instance
        :return: True if both shallow and deep copies are refused
        """
        if not isinstance(value, type):
            return self._refuses_duplication(value)

        try:
            bare = object.__new__(value)
        except TypeError as err:
            logger.debug("Cannot allocate a bare %s to copy: %s",
                         value.__qualname__, err)
            return False
        return self._refuses_duplication(bare)

    def _refuses_duplication(self, instance: Any) -> bool:
        for duplicate in (copy.copy, copy.deepcopy):
            try:
                duplicate(instance)
            except self.restriction_errors as err:
                logger.debug("%s refused for %s: %s",
                             duplicate.__name__, type(instance).__qualname__, err)
                continue
            except Exception as err:  # pylint: disable=broad-except
                # The hook ran and failed on its own terms; it is reachable
                logger.debug("%s reached the copy hook of %s, which raised %r",
                             duplicate.__name__, type(instance).__qualname__, err)
            return False
        return True
