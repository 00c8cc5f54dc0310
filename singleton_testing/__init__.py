"""
Define public interface imports
"""
from .assertions import (assert_is_singleton,
                         assert_is_class,
                         assert_has_private_constructor,
                         assert_has_public_static_method,
                         assert_is_idempotent,
                         assert_not_cloneable,
                         assert_is_object,
                         assert_throws_singleton_error_on_unserialize)
from .constraints import (Matcher,
                          LogicalNot,
                          IsCloneable,
                          assert_that,
                          is_cloneable,
                          logical_not)
from .exceptions import (SingletonError,
                         SingletonTestingError,
                         InvalidParameterError,
                         InternalInconsistencyError,
                         SingletonAssertionError,
                         StructuralViolation,
                         BehavioralViolation)
from .inspection import TypeInspector
from .testcase import AssertIsSingletonMixin


__all__ = [
    "assert_is_singleton",
    "assert_is_class",
    "assert_has_private_constructor",
    "assert_has_public_static_method",
    "assert_is_idempotent",
    "assert_not_cloneable",
    "assert_is_object",
    "assert_throws_singleton_error_on_unserialize",
    "Matcher",
    "LogicalNot",
    "IsCloneable",
    "assert_that",
    "is_cloneable",
    "logical_not",
    "SingletonError",
    "SingletonTestingError",
    "InvalidParameterError",
    "InternalInconsistencyError",
    "SingletonAssertionError",
    "StructuralViolation",
    "BehavioralViolation",
    "TypeInspector",
    "AssertIsSingletonMixin",
]
