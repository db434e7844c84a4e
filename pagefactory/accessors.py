from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

Locator = Callable[..., Any]


class AccessorKind(str, Enum):
    ELEMENT = "element"
    ACTION = "action"


# Declaration aliases. Each one is registered the same way; the kind only
# records what the author meant the accessor to do.
DECLARATION_KINDS: dict[str, AccessorKind] = {
    "element": AccessorKind.ELEMENT,
    "value": AccessorKind.ELEMENT,
    "p_element": AccessorKind.ELEMENT,
    "p_value": AccessorKind.ELEMENT,
    "action": AccessorKind.ACTION,
    "p_action": AccessorKind.ACTION,
}


@dataclass(frozen=True)
class Accessor:
    name: str
    kind: AccessorKind
    locator: Locator
    page: str

    def bind(self) -> Callable[..., Any]:
        """Build the method installed on the page class for this accessor."""
        locator = self.locator

        def accessor(page: Any, *args: Any, **kwargs: Any) -> Any:
            return locator(page.browser, *args, **kwargs)

        accessor.__name__ = self.name
        accessor.__qualname__ = f"{self.page}.{self.name}"
        accessor.__doc__ = getattr(locator, "__doc__", None) or f"{self.kind.value.capitalize()} '{self.name}'."
        return accessor


class Undefined:
    """Class attribute that hides an inherited attribute from one page class down."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        raise AttributeError(self.name)

    def __repr__(self) -> str:
        return f"<undefined {self.name}>"
