"""
Test cases for the TypeInspector reflection helpers.
"""
import logging
import pytest
import singleton_fixtures as fx
from singleton_testing import TypeInspector  # pylint: disable=import-error
from singleton_testing.inspection import fully_qualified_name  # pylint: disable=import-error

logger = logging.getLogger(__name__)

pytestmark = [pytest.mark.code,]


@pytest.fixture(name="inspector")
def fixture_inspector():
    """
    Fixture for a TypeInspector with the default restriction errors

    :return: TypeInspector instance
    """
    yield TypeInspector()


def test_fully_qualified_name():
    """Test the dotted path of a class"""
    assert fully_qualified_name(fx.CloneableClass) == "singleton_fixtures.CloneableClass"
    assert fully_qualified_name(TypeInspector) == "singleton_testing.inspection.TypeInspector"


def test_resolve_class(inspector):
    """Test class resolution from paths and class objects"""
    assert inspector.resolve_class("singleton_fixtures.CloneableClass") is fx.CloneableClass
    assert inspector.resolve_class(fx.CloneableClass) is fx.CloneableClass
    assert inspector.resolve_class("collections.OrderedDict") is not None


@pytest.mark.parametrize("value", [None, 0, "", "os", "os.sep", "no_such_module", "a b"])
def test_resolve_class_unresolvable(inspector, value):
    """
    Test that anything not naming a class resolves to None.

    :param inspector: TypeInspector fixture
    :param value: Reference that does not name a class
    :return: None
    """
    assert inspector.resolve_class(value) is None
    assert inspector.is_class(value) is False


def test_has_private_constructor(inspector):
    """Test the constructor check on refusing and accepting classes"""
    assert inspector.has_private_constructor(fx.ClassThatIsASingleton) is True
    assert inspector.has_private_constructor(fx.ClassWithRuntimeErrorConstructor) is True
    assert inspector.has_private_constructor(fx.ClassWithPublicConstructor) is False
    assert inspector.has_private_constructor(fx.CloneableClass) is False


@pytest.mark.parametrize("subject", [fx.ClassWithValueErrorConstructor,
                                     fx.ClassWithPermissionErrorConstructor,
                                     fx.SetstateGuardedSingleton])
def test_any_constructor_error_is_a_refusal(inspector, subject):
    """
    Test that whatever a zero-argument constructor raises counts as a refusal.

    :param inspector: TypeInspector fixture
    :param subject: Class whose constructor raises
    :return: None
    """
    assert inspector.has_private_constructor(subject) is True


def test_constructor_with_required_arguments_is_not_called(inspector):
    """A constructor with required parameters is public and never invoked"""
    assert inspector.has_private_constructor(fx.ClassWithConstructorArguments) is False


def test_find_static_method(inspector):
    """Test lookup of public class-level methods"""
    assert isinstance(inspector.find_static_method(fx.ClassThatIsASingleton, "get_instance"),
                      classmethod)
    assert isinstance(inspector.find_static_method(fx.ClassWithStaticGetInstance, "get_instance"),
                      staticmethod)
    assert inspector.find_static_method(fx.ClassWithNonStaticGetInstance, "get_instance") is None
    assert inspector.find_static_method(fx.ClassWithMissingGetInstance, "get_instance") is None
    assert inspector.find_static_method(fx.ClassWithPrivateGetInstance, "_get_instance") is None


def test_is_duplication_restricted(inspector):
    """Test restriction on classes and instances"""
    assert inspector.is_duplication_restricted(fx.NonCloneableClass) is True
    assert inspector.is_duplication_restricted(fx.NonCloneableClass()) is True
    assert inspector.is_duplication_restricted(fx.CloneableClass) is False
    assert inspector.is_duplication_restricted(fx.CloneableClass()) is False
    assert inspector.is_duplication_restricted(fx.ShallowCloneableClass()) is False


def test_custom_restriction_errors():
    """Test that the exceptions meaning "restricted" can be narrowed"""
    inspector = TypeInspector(restriction_errors=(KeyError,))
    assert inspector.is_duplication_restricted(fx.NonCloneableClass()) is False


def test_classes_are_judged_by_copying(inspector):
    """
    Test that a class without copy hooks is judged by what copying does:
    refusing in __init__ leaves copies possible, refusing in __new__ does not.
    """
    assert inspector.is_duplication_restricted(fx.ClassWithMissingClone) is False
    assert inspector.is_duplication_restricted(fx.ClassBlockingCopiesThroughNew) is True
    assert inspector.is_duplication_restricted(fx.ClassGuardedOnlyByReduce) is True


def test_setstate_guard_restricts_duplication(inspector):
    """Test that a __setstate__ guard refuses copies of classes and instances"""
    assert inspector.is_duplication_restricted(fx.SetstateGuardedSingleton) is True
    assert inspector.is_duplication_restricted(fx.SetstateGuardedSingleton.get_instance()) is True
