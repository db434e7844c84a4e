from __future__ import annotations

from typing import Any, Callable

from playwright.sync_api import Locator, Page

BUTTON_INPUT_TYPES = ("submit", "button", "reset", "image")


def css_string(text: str) -> str:
    """Quote ``text`` as a CSS string, escaping quotes, backslashes and control characters."""
    escaped = []
    for char in text:
        if char in ('"', "\\"):
            escaped.append(f"\\{char}")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            # Hex escapes end with a space so following hex digits are not swallowed.
            escaped.append(f"\\{ord(char):x} ")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def link_by_text(browser: Page, text: str) -> Locator:
    return browser.get_by_role("link", name=text, exact=True)


def button_by_value(browser: Page, text: str) -> Locator:
    value = css_string(text)
    selectors = [f'input[type="{kind}"][value={value}]' for kind in BUTTON_INPUT_TYPES]
    selectors.append(f"button[value={value}]")
    return browser.locator(", ".join(selectors))


LOOKUPS: dict[str, Callable[[Any, str], Locator]] = {
    "link": link_by_text,
    "button": button_by_value,
}
