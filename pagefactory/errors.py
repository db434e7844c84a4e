from __future__ import annotations

import re
from typing import Any


class PageFactoryError(Exception):
    """Base class for errors raised by page definitions and page instances."""


class DuplicateDefinitionError(PageFactoryError):
    def __init__(self, name: str, page: str) -> None:
        super().__init__(f"{name} is being defined twice in {page}!")
        self.name = name
        self.page = page


class PageTimeoutError(PageFactoryError, TimeoutError):
    """A bounded wait ran out before its condition held."""

    def __init__(self, message: str, target: str, timeout: float) -> None:
        super().__init__(message)
        self.target = target
        self.timeout = timeout


class TitleMismatchError(PageFactoryError):
    def __init__(self, expected: str | re.Pattern[str], actual: Any) -> None:
        shown = expected.pattern if isinstance(expected, re.Pattern) else expected
        super().__init__(f"Expected title '{shown}' instead of '{actual}'")
        self.expected = expected
        self.actual = actual


class CollectionError(PageFactoryError):
    pass
