"""Behavior tests for the pytest fixture."""

from __future__ import annotations

import textwrap

from littlemock import MockContext, current_context

TEST_MODULE = textwrap.dedent(
    """
    from abc import ABC, abstractmethod

    from littlemock import any_int, current_context, mock, verify


    class Greeter(ABC):
        @abstractmethod
        def greet(self, name: str) -> str: ...


    def test_leaks_a_matcher(littlemock):
        any_int()


    def test_uses_the_fixture_context(littlemock):
        assert current_context() is littlemock
        greeter = mock(Greeter)
        greeter.greet("ada")
        verify(greeter).greet("ada")
    """
)


def test_fixture_installs_the_current_context(littlemock):
    assert isinstance(littlemock, MockContext)
    assert current_context() is littlemock


def test_leaked_matchers_fail_at_teardown(pytester):
    pytester.makeconftest('pytest_plugins = ["littlemock.pytest_plugin"]')
    pytester.makepyfile(test_greeter=TEST_MODULE)

    result = pytester.runpytest()

    result.assert_outcomes(passed=2, errors=1)
    result.stdout.fnmatch_lines(["*Found 1 unconsumed matcher(s)*"])


def test_teardown_check_can_be_disabled(pytester, monkeypatch):
    monkeypatch.setenv("LITTLEMOCK_CHECK_ON_TEARDOWN", "false")
    pytester.makeconftest('pytest_plugins = ["littlemock.pytest_plugin"]')
    pytester.makepyfile(test_greeter=TEST_MODULE)

    result = pytester.runpytest()

    result.assert_outcomes(passed=2)


def test_teardown_check_reads_project_settings(pytester):
    pytester.makeconftest('pytest_plugins = ["littlemock.pytest_plugin"]')
    (pytester.path / ".littlemock.toml").write_text("check_on_teardown = false\n")
    pytester.makepyfile(test_greeter=TEST_MODULE)

    result = pytester.runpytest()

    result.assert_outcomes(passed=2)
