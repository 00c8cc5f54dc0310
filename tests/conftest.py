"""
Pytest configuration for this test suite.
"""
import logging
import pytest
import singleton_fixtures
from singleton_testing.inspection import fully_qualified_name  # pylint: disable=import-error

logger = logging.getLogger(__name__)


def pytest_sessionfinish(session, exitstatus):
    """
    Taken from https://github.com/pytest-dev/pytest/issues/2393

    If pytest does not run tests (even when it's expected) when run with the
    '--last-failed --last-failed-no-failures none' arguments, it exits with
    a result of 5 (instead of 0), which causes pipelines to fail.

    :param session: Pytest session fixture
    :param exitstatus: Exit status returned by pytest
    :return: None
    """
    if exitstatus == 5:
        session.exitstatus = 0


@pytest.fixture(params=[singleton_fixtures.ClassThatIsASingleton,
                        singleton_fixtures.ClassWithStaticGetInstance,
                        singleton_fixtures.ClassWithRuntimeErrorConstructor,
                        singleton_fixtures.ClassGuardedOnlyByReduce,
                        singleton_fixtures.ClassWithValueErrorConstructor,
                        singleton_fixtures.ClassWithPermissionErrorConstructor,
                        singleton_fixtures.SetstateGuardedSingleton,
                        singleton_fixtures.ClassWithCamelCaseGetInstance])
def singleton_class(request):
    """
    Fixture for classes that implement the singleton pattern correctly

    :param request: pytest param for this fixture
    :yields: The next class for the test
    """
    yield request.param


@pytest.fixture(params=["class", "path"])
def class_reference(request):
    """
    Fixture returning a function that refers to a class either by the class
    object itself or by its dotted path. Every public assertion accepts both.

    :param request: pytest param for this fixture
    :yields: Function mapping a class to the reference under test
    """
    if request.param == "class":
        yield lambda cls: cls
    else:
        yield fully_qualified_name
