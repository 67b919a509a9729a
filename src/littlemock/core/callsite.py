"""Call-site capture for diagnostics."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass

_PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


@dataclass(frozen=True, slots=True)
class CallSite:
    """Location of a statement in test code."""

    filename: str
    lineno: int
    function: str

    @classmethod
    def capture(cls) -> CallSite:
        """Locate the innermost frame outside the littlemock package."""
        frame = inspect.currentframe()
        try:
            while frame is not None:
                filename = frame.f_code.co_filename
                if not os.path.abspath(filename).startswith(_PACKAGE_ROOT):
                    return cls(filename, frame.f_lineno, frame.f_code.co_name)
                frame = frame.f_back
        finally:
            del frame
        return UNKNOWN_SITE

    def __str__(self) -> str:
        if self is UNKNOWN_SITE or self.lineno < 0:
            return "unknown location"
        return f"{self.function}({os.path.basename(self.filename)}:{self.lineno})"


UNKNOWN_SITE = CallSite("<unknown>", -1, "<unknown>")
