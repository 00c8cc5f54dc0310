"""
unittest integration. Mix AssertIsSingletonMixin into a TestCase to get the
singleton assertions with the framework's camel-case naming:

    class ConfigTest(AssertIsSingletonMixin, unittest.TestCase):
        def test_config_is_singleton(self):
            self.assertIsSingleton("myapp.config.Config")
"""
# pylint: disable=invalid-name
from . import assertions
from . import constraints


class AssertIsSingletonMixin:
    """
    Delegates to the module-level assertions. Failures are AssertionError
    subclasses, so unittest reports them as test failures.
    """

    @staticmethod
    def assertIsSingleton(class_name, factory_method=None):
        """
        Assert that a class implements the singleton pattern.

        :param class_name: Class or "package.module.Class" path
        :param factory_method: Name of the static method serving the
            instance; get_instance, then getInstance, when omitted
        :return: None
        """
        assertions.assert_is_singleton(class_name, factory_method)

    @staticmethod
    def assertIsClass(value, message=""):
        """
        Assert that value is a class or a path to one.

        :param value: Class or "package.module.Class" path
        :param message: Optional replacement for the default failure message
        :return: The resolved class
        """
        return assertions.assert_is_class(value, message)

    @staticmethod
    def assertIsIdempotent(function, name, message=""):
        """
        Assert that two calls of function return the same object.

        :param function: Zero-argument callable
        :param name: Name of the callable used in the failure message
        :param message: Optional replacement for the default failure message
        :return: None
        """
        assertions.assert_is_idempotent(function, name, message)

    @staticmethod
    def assertNotCloneable(value, message=""):
        """
        Assert that an instance, a class or a class path cannot be copied.

        :param value: Value under test
        :param message: Optional replacement for the default failure message
        :return: None
        """
        assertions.assert_not_cloneable(value, message)

    @staticmethod
    def assertThrowsSingletonErrorOnUnserialize(obj, message=""):
        """Assert that loading a pickle of obj raises SingletonError"""
        assertions.assert_throws_singleton_error_on_unserialize(obj, message)

    @staticmethod
    def assertThat(value, matcher, message=""):
        """
        Assert that matcher accepts value.

        :param value: Value under test
        :param matcher: Matcher to evaluate
        :param message: Optional text placed before the generated description
        :return: None
        """
        constraints.assert_that(value, matcher, message)

    @staticmethod
    def isCloneable():
        """IsCloneable matcher"""
        return constraints.is_cloneable()

    @staticmethod
    def logicalNot(matcher):
        """Negation of matcher"""
        return constraints.logical_not(matcher)
