"""Behavior tests for verifying calls on mocks."""

from __future__ import annotations

import pytest

from littlemock import (
    UsageError,
    VerificationError,
    any_int,
    any_str,
    any_times,
    at_least,
    at_least_once,
    at_most,
    between,
    check_for_programming_errors,
    do_return,
    mock,
    never,
    times,
    verify,
    verify_no_more_interactions,
    verify_zero_interactions,
)
from tests.test_doubles.interfaces import Bar, BarSubtype, Foo


def test_verify_a_call_that_happened():
    foo = mock(Foo)
    foo.add("jim")

    verify(foo).add("jim")


def test_verify_defaults_to_exactly_once():
    foo = mock(Foo)
    foo.add("jim")
    foo.add("jim")

    with pytest.raises(VerificationError):
        verify(foo).add("jim")

    verify(foo, times(2)).add("jim")


def test_verify_call_that_did_not_happen():
    foo = mock(Foo)
    foo.add("jim")

    with pytest.raises(VerificationError):
        verify(foo).add("bob")
    with pytest.raises(VerificationError):
        verify(foo).clear()


def test_verification_errors_are_assertion_errors():
    foo = mock(Foo)

    with pytest.raises(AssertionError):
        verify(foo).clear()


def test_never():
    foo = mock(Foo)
    foo.add("jim")

    verify(foo, never()).add("bob")
    with pytest.raises(VerificationError):
        verify(foo, never()).add("jim")


def test_lower_and_upper_bounds():
    foo = mock(Foo)
    for _ in range(3):
        foo.clear()

    verify(foo, at_least_once()).clear()
    verify(foo, at_least(3)).clear()
    verify(foo, at_most(3)).clear()
    verify(foo, between(2, 4)).clear()
    verify(foo, any_times()).clear()
    verify(foo, any_times()).an_int()
    with pytest.raises(VerificationError):
        verify(foo, at_least(4)).clear()
    with pytest.raises(VerificationError):
        verify(foo, at_most(2)).clear()


def test_verified_calls_can_be_verified_again():
    foo = mock(Foo)
    foo.add("jim")

    verify(foo).add("jim")
    verify(foo).add("jim")


def test_verify_with_matchers():
    foo = mock(Foo)
    foo.get(1)
    foo.get(2)
    foo.lookup("x")

    verify(foo, times(2)).get(any_int())
    verify(foo).lookup(any_str())


def test_positional_and_keyword_arguments_are_equivalent():
    foo = mock(Foo)
    foo.lookup(string="k")

    verify(foo).lookup("k")


def test_inherited_methods_verify_through_subtype_mocks():
    subtype = mock(BarSubtype)
    subtype.do_something()
    subtype.do_something_else()

    verify(subtype).do_something()
    verify(subtype).do_something_else()


def test_verify_with_explicit_none_mode():
    foo = mock(Foo)

    with pytest.raises(UsageError):
        verify(foo, None)


def test_verify_something_that_is_not_a_mock():
    with pytest.raises(UsageError):
        verify("not a mock")


def test_verifying_proxy_is_single_use():
    foo = mock(Foo)
    foo.clear()
    verification = verify(foo)
    verification.clear()

    with pytest.raises(UsageError) as excinfo:
        verification.clear()

    assert "call verify() again" in str(excinfo.value)


def test_verify_zero_interactions():
    foo = mock(Foo)
    bar = mock(Bar)

    verify_zero_interactions(foo, bar)

    bar.do_something()

    verify_zero_interactions(foo)
    with pytest.raises(VerificationError):
        verify_zero_interactions(foo, bar)


def test_verify_no_more_interactions_after_verifying_everything():
    foo = mock(Foo)
    foo.add("jim")
    foo.clear()

    verify(foo).add("jim")
    with pytest.raises(VerificationError):
        verify_no_more_interactions(foo)

    verify(foo).clear()
    verify_no_more_interactions(foo)


def test_stubbed_calls_do_not_need_verification():
    foo = mock(Foo)
    do_return("x").when(foo).lookup("a")

    foo.lookup("a")

    verify_no_more_interactions(foo)
    foo.lookup("b")
    with pytest.raises(VerificationError):
        verify_no_more_interactions(foo)


def test_failed_verification_does_not_mark_calls_verified():
    foo = mock(Foo)
    foo.clear()

    with pytest.raises(VerificationError):
        verify(foo, times(2)).clear()

    with pytest.raises(VerificationError):
        verify_no_more_interactions(foo)


def test_mocks_keep_separate_ledgers():
    first = mock(Foo)
    second = mock(Foo)
    first.add("a")

    verify(first).add("a")
    verify(second, never()).add("a")
    verify_zero_interactions(second)


def test_identity_calls_are_not_interactions():
    foo = mock(Foo)

    assert foo == foo
    hash(foo)
    repr(foo)

    verify_zero_interactions(foo)


def test_reusing_verifying_proxy_with_matchers_discards_them():
    foo = mock(Foo)
    foo.lookup("k")
    verification = verify(foo)
    verification.lookup(any_str())

    with pytest.raises(UsageError):
        verification.lookup(any_str())

    check_for_programming_errors()
