"""Exceptions raised by the mocking runtime."""


class LittleMockError(Exception):
    """Base class for every error raised by littlemock."""


class UsageError(LittleMockError, ValueError):
    """The mocking API was called incorrectly.

    Raised immediately at the offending statement: stubbing or verifying an
    object that is not a mock, a matcher count that does not fit the method,
    an incompatible stubbed value, and similar mistakes.
    """


class MatcherLeakError(LittleMockError, RuntimeError):
    """Matchers were created but never consumed by a stub or verification.

    Detected lazily by the next operation that consumes matchers. The pending
    matchers are discarded before this is raised.
    """


class VerificationError(LittleMockError, AssertionError):
    """The recorded calls do not satisfy a verification."""
