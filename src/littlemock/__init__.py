"""littlemock - A small mocking runtime for interfaces."""

__version__ = "0.1.0"

from littlemock.api import (
    Stubber,
    any_bool,
    any_bytes,
    any_complex,
    any_float,
    any_int,
    any_object,
    any_str,
    arg_that,
    captor,
    check_for_programming_errors,
    do_answer,
    do_nothing,
    do_return,
    do_throw,
    eq,
    is_a,
    mock,
    reset,
    verify,
    verify_no_more_interactions,
    verify_zero_interactions,
)
from littlemock.config import Settings
from littlemock.core.context import MockContext, current_context, use_context
from littlemock.core.errors import LittleMockError, MatcherLeakError, UsageError, VerificationError
from littlemock.core.matchers import Captor
from littlemock.core.modes import (
    VerificationMode,
    any_times,
    at_least,
    at_least_once,
    at_most,
    between,
    never,
    times,
)

__all__ = [
    "Captor",
    "LittleMockError",
    "MatcherLeakError",
    "MockContext",
    "Settings",
    "Stubber",
    "UsageError",
    "VerificationError",
    "VerificationMode",
    "any_bool",
    "any_bytes",
    "any_complex",
    "any_float",
    "any_int",
    "any_object",
    "any_str",
    "any_times",
    "arg_that",
    "at_least",
    "at_least_once",
    "at_most",
    "between",
    "captor",
    "check_for_programming_errors",
    "current_context",
    "do_answer",
    "do_nothing",
    "do_return",
    "do_throw",
    "eq",
    "is_a",
    "mock",
    "never",
    "reset",
    "times",
    "use_context",
    "verify",
    "verify_no_more_interactions",
    "verify_zero_interactions",
]
