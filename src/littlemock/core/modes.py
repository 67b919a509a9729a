"""Verification modes: inclusive bounds on an expected call count."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from littlemock.core.errors import UsageError


class VerificationMode(BaseModel):
    """Inclusive ``[minimum, maximum]`` bound; ``maximum=None`` is unbounded."""

    model_config = ConfigDict(frozen=True)

    minimum: int = Field(ge=0, description="Fewest calls accepted")
    maximum: int | None = Field(default=None, ge=0, description="Most calls accepted, None for no limit")

    @model_validator(mode="after")
    def _check_order(self) -> VerificationMode:
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError(f"maximum ({self.maximum}) is lower than minimum ({self.minimum})")
        return self

    def accepts(self, count: int) -> bool:
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def describe(self, actual: int) -> str:
        """Bound wording for a failure header, e.g. ``exactly 2 calls``.

        For a two-sided range the side that ``actual`` violated is named.
        """
        if self.minimum == self.maximum:
            return _calls("exactly", self.minimum)
        if self.maximum is None:
            return _calls("at least", self.minimum)
        if self.minimum == 0 or actual > self.maximum:
            return _calls("at most", self.maximum)
        return _calls("at least", self.minimum)


def _calls(qualifier: str, count: int) -> str:
    return f"{qualifier} {count} {'call' if count == 1 else 'calls'}"


def _mode(minimum: int, maximum: int | None) -> VerificationMode:
    try:
        return VerificationMode(minimum=minimum, maximum=maximum)
    except ValidationError as e:
        raise UsageError(f"Invalid verification mode: {e}") from e


def times(count: int) -> VerificationMode:
    """Exactly ``count`` calls."""
    return _mode(count, count)


def never() -> VerificationMode:
    return _mode(0, 0)


def at_least_once() -> VerificationMode:
    return _mode(1, None)


def at_least(count: int) -> VerificationMode:
    return _mode(count, None)


def at_most(count: int) -> VerificationMode:
    return _mode(0, count)


def between(minimum: int, maximum: int) -> VerificationMode:
    """Between ``minimum`` and ``maximum`` calls, both inclusive."""
    return _mode(minimum, maximum)


def any_times() -> VerificationMode:
    """Any number of calls, including none."""
    return _mode(0, None)
