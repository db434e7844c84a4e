from unittest.mock import MagicMock

import pytest

from pagefactory.locators import button_by_value, css_string, link_by_text


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Save", '"Save"'),
        ('Say "hi"', '"Say \\"hi\\""'),
        ("C:\\temp", '"C:\\\\temp"'),
        ("Line\nBreak", '"Line\\a Break"'),
        ("Tab\tbed", '"Tab\\9 bed"'),
        ("Café", '"Café"'),
    ],
)
def test_css_string(text: str, expected: str) -> None:
    assert css_string(text) == expected


def test_button_by_value_only_matches_button_inputs() -> None:
    browser = MagicMock()

    button_by_value(browser, "Go")

    selector = browser.locator.call_args[0][0]
    assert selector.split(", ") == [
        'input[type="submit"][value="Go"]',
        'input[type="button"][value="Go"]',
        'input[type="reset"][value="Go"]',
        'input[type="image"][value="Go"]',
        'button[value="Go"]',
    ]
    assert 'input[value="Go"]' not in selector


def test_link_by_text_uses_exact_role_name() -> None:
    browser = MagicMock()

    assert link_by_text(browser, "Sign In") is browser.get_by_role.return_value
    browser.get_by_role.assert_called_once_with("link", name="Sign In", exact=True)
