"""
Exception definitions for singleton_testing.

Two families live here. Assertion failures subclass AssertionError so that
pytest and unittest report them as ordinary test failures. Runtime errors
subclass SingletonTestingError and signal misuse of this package or an
inconsistent view of the class under test.
"""
import logging
from string import Template

logger = logging.getLogger(__name__)


class SingletonError(RuntimeError):
    """
    Distinguished error a singleton raises from its reconstruction hook
    (``__reduce__`` callable or ``__setstate__``) to refuse being rebuilt
    from a pickle. Singleton classes under test import it from here.
    """


class SingletonTestingError(Exception):
    """
    Base Exception class for errors generated during runtime
    """


class InvalidParameterError(SingletonTestingError):
    """
    Exception to be raised when a parameter has been supplied with an
    invalid value or of an unexpected type. If a Pydantic exception object
    is received, extract the messages, reformat, and use the new string as
    the error message
    """

    def __init__(self, err_obj):
        errmsg_template = Template("Invalid value for parameter '$field_name':\n"
                                   "  $message\n"
                                   "    expected_type: $expected_type\n"
                                   "    received_val:  $received_val\n"
                                   "    received_type: $received_type\n"
                                   "**********\n")

        def format_exception(exc_err):
            pretty_error = ("Error occurred during parameter validation\n"
                            "**********\n")

            for err_dict in exc_err.errors():
                pretty_error += errmsg_template.substitute(field_name=err_dict["loc"][0],
                                                           message=err_dict["msg"],
                                                           expected_type=err_dict["type"],
                                                           received_val=err_dict["input"],
                                                           received_type=type(err_dict["input"])
                                                           )
            return pretty_error

        if hasattr(err_obj, "errors"):
            error_string = format_exception(err_obj)
        else:
            error_string = err_obj

        super().__init__(error_string)


class InternalInconsistencyError(SingletonTestingError):
    """
    Raised when reflection reports a public static factory method that
    cannot actually be called. This points at a broken descriptor on the
    class under test, not at a failed expectation.
    """


class SingletonAssertionError(AssertionError):
    """
    Base class for failed singleton expectations
    """


class StructuralViolation(SingletonAssertionError):
    """
    The class under test lacks a required member, or the member has the
    wrong shape or visibility.
    """


class BehavioralViolation(SingletonAssertionError):
    """
    The class under test has the right shape but misbehaves at runtime.
    """
