"""
Composable matchers and the generic ``assert_that`` entry point.

A matcher answers a yes/no question about a value and describes itself so a
failed assertion reads as a sentence: "Failed asserting that 'x' is not
cloneable."
"""
import logging
from abc import (ABC,
                 abstractmethod)
from typing import (Any,
                    Optional)
from .defaults import VERIFIER_DEFAULTS
from .exceptions import BehavioralViolation
from .inspection import (TypeInspector,
                         fully_qualified_name)

logger = logging.getLogger(__name__)

_NEGATABLE_VERBS = ("is", "has")


def export_value(value: Any) -> str:
    """
    Render a value for a failure message. Classes are shown by their quoted
    dotted path so they read the same as a class name passed as a string.
    """
    if isinstance(value, type):
        return repr(fully_qualified_name(value))
    return repr(value)


class Matcher(ABC):
    """
    Base class for all matchers.
    """

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """
        Evaluate the matcher against a value.

        :param value: Value under test
        :return: True if the value satisfies the matcher
        """

    @abstractmethod
    def describe(self) -> str:
        """
        Predicate phrase used in failure messages, e.g. "is cloneable".
        """

    def failure_description(self, value: Any) -> str:
        """Subject and predicate of a failure message"""
        return f"{export_value(value)} {self.describe()}"

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f"<{type(self).__name__} {self.describe()!r}>"


class LogicalNot(Matcher):
    """
    Inverts another matcher.
    """

    def __init__(self, matcher: Matcher) -> None:
        self.matcher = matcher

    def matches(self, value: Any) -> bool:
        return not self.matcher.matches(value)

    def describe(self) -> str:
        description = self.matcher.describe()
        verb, _, rest = description.partition(" ")
        if verb in _NEGATABLE_VERBS and rest:
            return f"{verb} not {rest}"
        return f"not {description}"


class IsCloneable(Matcher):
    """
    Accepts an instance, a class, or a path to a class whose copies are not
    refused. Anything else (None, numbers, unresolvable strings) simply does
    not match.
    """

    def __init__(self, inspector: Optional[TypeInspector] = None) -> None:
        self.inspector = inspector or TypeInspector()

    def matches(self, value: Any) -> bool:
        if isinstance(value, (str, type)):
            target = self.inspector.resolve_class(value)
            if target is None:
                logger.debug("%r does not name a class; not cloneable", value)
                return False
        elif value is None or isinstance(value, VERIFIER_DEFAULTS["primitive_types"]):
            return False
        else:
            target = value

        return not self.inspector.is_duplication_restricted(target)

    def describe(self) -> str:
        return "is cloneable"


def is_cloneable() -> IsCloneable:
    """Factory for the IsCloneable matcher"""
    return IsCloneable()


def logical_not(matcher: Matcher) -> LogicalNot:
    """Factory for LogicalNot"""
    return LogicalNot(matcher)


def assert_that(value: Any, matcher: Matcher, message: str = "") -> None:
    """
    Raise a BehavioralViolation unless the matcher accepts the value.

    :param value: Value under test
    :param matcher: Matcher to evaluate
    :param message: Optional text placed before the generated description
    :return: None
    """
    if matcher.matches(value):
        return

    failure = f"Failed asserting that {matcher.failure_description(value)}."
    if message:
        failure = f"{message}\n{failure}"
    logger.debug("%s", failure)
    raise BehavioralViolation(failure)
