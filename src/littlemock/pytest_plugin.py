"""pytest integration: a fresh mock context per test."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from littlemock.config import Settings
from littlemock.core.context import MockContext, use_context

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def littlemock() -> Iterator[MockContext]:
    """Current mock context for the test.

    At teardown, matchers that were created but never consumed fail the test
    (unless ``check_on_teardown`` is disabled) and are discarded.
    """
    context = MockContext(Settings.load())
    with use_context(context):
        yield context
        if context.settings.check_on_teardown:
            context.check_for_programming_errors()
