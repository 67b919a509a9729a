"""Behavior tests for stub actions and the stub table."""

from __future__ import annotations

import pytest

from littlemock import UsageError
from littlemock.core.callsite import UNKNOWN_SITE
from littlemock.core.ledger import Invocation
from littlemock.core.matchers import Anything, Captor, Equals
from littlemock.core.methods import MethodIdentity
from littlemock.core.stubs import Answer, DoNothing, ReturnValue, StubEntry, StubTable, ThrowValue
from tests.test_doubles.interfaces import Bar, Foo

LOOKUP = MethodIdentity.from_function(Foo, Foo.lookup)
AN_INT = MethodIdentity.from_function(Foo, Foo.an_int)
ADD = MethodIdentity.from_function(Foo, Foo.add)
TWO_STRINGS = MethodIdentity.from_function(Bar, Bar.two_strings)


def entry(method, matchers, action):
    return StubEntry(method, tuple(matchers), action, UNKNOWN_SITE)


def invocation(method, *arguments):
    return Invocation(method, arguments, 1, UNKNOWN_SITE)


def test_newest_matching_entry_wins():
    table = StubTable("foo")
    table.register(entry(LOOKUP, [Anything()], ReturnValue("any")))
    table.register(entry(LOOKUP, [Equals("x")], ReturnValue("x")))

    assert table.resolve(LOOKUP, ("x",)).action.value == "x"
    assert table.resolve(LOOKUP, ("y",)).action.value == "any"
    assert table.resolve(ADD, ("x",)) is None


def test_register_rejects_wrong_matcher_count():
    table = StubTable("bar")

    with pytest.raises(UsageError) as excinfo:
        table.register(entry(TWO_STRINGS, [Anything()], ReturnValue("x")))

    assert str(excinfo.value) == "bar.two_strings(str, str) takes 2 argument(s) but 1 matcher(s) were given"
    assert len(table) == 0


def test_register_rejects_incompatible_return_value():
    table = StubTable("foo")

    with pytest.raises(UsageError):
        table.register(entry(AN_INT, [], ReturnValue("text")))
    with pytest.raises(UsageError):
        table.register(entry(ADD, [Anything()], ReturnValue(1)))


def test_deferred_actions_are_not_checked_at_registration():
    table = StubTable("foo")

    table.register(entry(AN_INT, [], Answer(lambda: "text")))

    assert len(table) == 1


def test_clear_removes_every_entry():
    table = StubTable("foo")
    table.register(entry(ADD, [Anything()], DoNothing()))

    table.clear()

    assert list(table) == []


def test_observe_feeds_captors():
    captor = Captor()
    stub = entry(TWO_STRINGS, [captor, Equals("b")], ReturnValue("ab"))

    assert stub.matches(TWO_STRINGS, ("a", "b"))
    stub.observe(("a", "b"))

    assert captor.get_all_values() == ["a"]


def test_throw_value_raises_instance_or_class():
    error = OSError("disk")

    with pytest.raises(OSError) as excinfo:
        ThrowValue(error).perform(invocation(ADD, "x"))
    assert excinfo.value is error

    with pytest.raises(KeyError):
        ThrowValue(KeyError).perform(invocation(ADD, "x"))


def test_throw_value_requires_an_exception():
    with pytest.raises(UsageError):
        ThrowValue("not an exception")


def test_answer_receives_call_arguments():
    answer = Answer(lambda first, second: first + second)

    assert answer.perform(invocation(TWO_STRINGS, "a", "b")) == "ab"


def test_answer_requires_a_callable():
    with pytest.raises(UsageError):
        Answer(42)
