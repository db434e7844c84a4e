"""
PageFactory - declarative page objects on top of Playwright.

Subclass PageFactory once per page of the application under test and
declare what the page contains. Declarations are registered on the page
class, and anything a page does not declare is looked up on the wrapped
Playwright page instead:

    class SearchPage(PageFactory):

        @classmethod
        def define(cls):
            cls.page_url("https://example.com/search")
            cls.expected_element("query")
            cls.expected_title(re.compile("Search"))
            cls.element("query", lambda b: b.locator("#q"))
            cls.value("result_count", lambda b: int(b.locator(".count").inner_text()))
            cls.p_action("open_result", lambda b, n: b.locator(".result").nth(n).click())
            cls.button("Search")            # search, search_button
            cls.link("Advanced", "advanced") # advanced, advanced_link

    page = SearchPage(browser, visit=True)
    page.query().fill("playwright")
    page.search()
    page.wait_for_ajax()
    page.url                                # forwarded to the browser

The declaration helpers (``element``, ``link``, ``value``, ...) live on the
PageType metaclass, so page instances never see them and declared names
such as ``value`` or ``settings`` do not collide with them.

Names declared on a class cannot be declared again by a subclass. Use
``undefine`` on the subclass first when a parent's version really does not
apply.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType, MethodType
from typing import Any, Callable, Mapping

from playwright.sync_api import Page

from pagefactory import waits
from pagefactory.accessors import DECLARATION_KINDS, Accessor, AccessorKind, Locator, Undefined
from pagefactory.config import FactoryConfig, load_config
from pagefactory.errors import DuplicateDefinitionError, TitleMismatchError
from pagefactory.locators import LOOKUPS
from pagefactory.string_factory import damballa

logger = logging.getLogger("pagefactory.page")

# Set on every page instance; an accessor with one of these names would be shadowed.
_INSTANCE_ATTRIBUTES = frozenset({"_browser", "_navigated"})


def _declaration(variant: str) -> Callable[..., Any]:
    kind = DECLARATION_KINDS[variant]

    def declare(cls: PageType, name: str, locator: Locator | None = None) -> Any:
        return cls._declare(name, kind, locator)

    declare.__name__ = variant
    declare.__qualname__ = f"PageType.{variant}"
    declare.__doc__ = (
        f"Declare a {kind.value} accessor called ``name``.\n\n"
        "``locator`` receives the browser followed by the caller's arguments.\n"
        "Without ``locator`` this returns a decorator."
    )
    return declare


def _build_ajax_waiter(cls: type) -> Callable[..., bool]:
    def wait_for_ajax(self: PageFactory, timeout: float | None = None, message: str = "") -> bool:
        """
        Wait until the page has no outstanding ajax calls.

        Raises PageTimeoutError, carrying ``message``, once ``timeout``
        seconds pass with calls still running.
        """
        config = type(self).settings()
        return waits.wait_for_ajax(
            self.browser,
            config.ajax_timeout if timeout is None else timeout,
            message,
            probe=config.ajax_probe,
            intervals=config.ajax_poll_intervals,
        )

    wait_for_ajax.__qualname__ = f"{cls.__qualname__}.wait_for_ajax"
    return wait_for_ajax


class PageType(type):
    """Metaclass of page classes; holds the class-level declaration DSL."""

    _accessors: dict[str, Accessor]
    _undefined: set[str]
    _config: FactoryConfig | None
    _page_url: str | None
    _expected_element: tuple[str, float | None] | None
    _expected_title: str | re.Pattern[str] | None

    def settings(cls) -> FactoryConfig:
        return cls._config or load_config()

    def page_url(cls, url: str) -> None:
        """Declare the URL that ``visit=True`` (or ``goto()``) opens."""

        def goto(self: PageFactory) -> Any:
            return self.browser.goto(url)

        goto.__qualname__ = f"{cls.__qualname__}.goto"
        cls._page_url = url
        cls.goto = goto  # type: ignore[attr-defined]

    def expected_element(cls, name: str, timeout: float | None = None) -> None:
        """Wait for the ``name`` element every time the page is instantiated."""
        cls._expected_element = (str(name), timeout)

    def expected_title(cls, title: str | re.Pattern[str]) -> None:
        """Check the browser title, exactly or by pattern search, on instantiation."""
        cls._expected_title = title

    element = _declaration("element")
    action = _declaration("action")
    value = _declaration("value")
    p_element = _declaration("p_element")
    p_action = _declaration("p_action")
    p_value = _declaration("p_value")

    def _declare(cls, name: str, kind: AccessorKind, locator: Locator | None) -> Any:
        if locator is None:

            def decorator(fn: Locator) -> Locator:
                cls._declare(name, kind, fn)
                return fn

            return decorator

        name = str(name)
        if not name:
            raise ValueError(f"Empty accessor name declared in {cls.__name__}")
        if cls.is_defined(name):
            raise DuplicateDefinitionError(name, cls.__name__)

        accessor = Accessor(name=name, kind=kind, locator=locator, page=cls.__qualname__)
        cls._accessors[name] = accessor
        cls._undefined.discard(name)
        logger.debug(f"[PageFactory] {cls.__name__}.{name} declared ({kind.value})")
        return accessor

    def find_accessor(cls, name: str) -> Accessor | None:
        """The accessor ``name`` resolves to on this class, if any."""
        for klass in cls.__mro__:
            registry = vars(klass).get("_accessors")
            if registry is None:
                continue
            if name in registry:
                return registry[name]
            if name in vars(klass)["_undefined"]:
                return None
        return None

    def _resolves_on_class(cls, name: str) -> bool:
        for klass in cls.__mro__:
            if name in vars(klass):
                return not isinstance(vars(klass)[name], Undefined)
        return False

    def is_defined(cls, name: str) -> bool:
        """Whether ``name`` already resolves on instances of this page class."""
        return (
            name in _INSTANCE_ATTRIBUTES
            or cls.find_accessor(name) is not None
            or cls._resolves_on_class(name)
        )

    def link(cls, link_text: str, alias: str | None = None) -> tuple[Accessor, Accessor]:
        """
        Declare a link found by its text.

        Creates ``<name>_link`` for the link itself and ``<name>`` to click it,
        where ``<name>`` is the snake-cased text unless ``alias`` is given:

            link("Click Me For Fun!")           -> click_me_for_fun, click_me_for_fun_link
            link("Click Me For Fun!", "click_me") -> click_me, click_me_link
        """
        return cls._elementize("link", link_text, alias)

    def button(cls, button_text: str, alias: str | None = None) -> tuple[Accessor, Accessor]:
        """Like ``link`` but for buttons found by their value attribute; suffix ``_button``."""
        return cls._elementize("button", button_text, alias)

    def _elementize(cls, kind: str, text: str, alias: str | None) -> tuple[Accessor, Accessor]:
        lookup = LOOKUPS[kind]
        if alias is None:
            element_name = damballa(f"{text}_{kind}")
            action_name = damballa(text)
        else:
            element_name = f"{alias}_{kind}"
            action_name = str(alias)
        found = cls.element(element_name, lambda b: lookup(b, text))
        clicked = cls.action(action_name, lambda b: lookup(b, text).click())
        return found, clicked

    def maintainable(
        cls, method_name: str, id_string: str, element: str = "input", frame: str | None = None
    ) -> None:
        """
        Declare the four accessors of a Kuali "maintainable" field.

        ``id_string`` is the field's name attribute after the
        ``document.newMaintainableObject.`` prefix. Creates ``<m>``,
        ``<m>_readonly``, ``<m>_old`` and ``<m>_new``; the last one reads the
        editable field when it exists and the read-only span otherwise.
        When ``frame`` is given, every lookup happens inside that iframe.
        """
        field = f'{element}[name="document.newMaintainableObject.{id_string}"]'
        readonly_span = f'span[id="document.newMaintainableObject.{id_string}.div"]'
        old_span = f'span[id="document.oldMaintainableObject.{id_string}.div"]'

        def root(browser: Any) -> Any:
            return browser.frame_locator(frame) if frame else browser

        def readonly(browser: Any) -> str:
            return root(browser).locator(readonly_span).inner_text().strip()

        def new_value(browser: Any) -> str:
            editable = root(browser).locator(field)
            if editable.count() == 0:
                return readonly(browser)
            if element == "select":
                return editable.evaluate("el => el.options[el.selectedIndex].text").strip()
            return editable.input_value().strip()

        cls.element(method_name, lambda b: root(b).locator(field))
        cls.value(f"{method_name}_readonly", readonly)
        cls.value(f"{method_name}_old", lambda b: root(b).locator(old_span).inner_text().strip())
        cls.value(f"{method_name}_new", new_value)

    def undefine(cls, *names: str) -> None:
        """
        Remove accessors, own or inherited, from this class and its subclasses.

        The names can then be declared again here. Reaching for this often
        suggests too much is declared on the parent page classes.
        """
        for name in names:
            if cls.find_accessor(name) is not None:
                cls._accessors.pop(name, None)
                if cls.find_accessor(name) is not None:
                    cls._undefined.add(name)
            elif cls._resolves_on_class(name):
                own = vars(cls).get(name)
                if own is not None and not isinstance(own, Undefined):
                    delattr(cls, name)
                if cls._resolves_on_class(name):
                    setattr(cls, name, Undefined(name))
            else:
                raise AttributeError(f"undefined method '{name}' for class '{cls.__name__}'")
            logger.debug(f"[PageFactory] {cls.__name__}.{name} undefined")

    def accessors(cls) -> Mapping[str, Accessor]:
        """Every accessor that resolves on this class, inherited ones included."""
        names: dict[str, None] = {}
        for klass in reversed(cls.__mro__):
            names.update(dict.fromkeys(vars(klass).get("_accessors", ())))
        resolved = {name: cls.find_accessor(name) for name in names}
        return MappingProxyType({name: accessor for name, accessor in resolved.items() if accessor is not None})


class PageFactory(metaclass=PageType):
    """
    Superclass for page classes.

    Args:
        browser: Playwright page the page object drives
        visit: Navigate to the declared page URL before the readiness checks

    Pass ``config=FactoryConfig(...)`` in the class statement to override
    timeouts and probes for one page class and its subclasses.
    """

    _accessors: dict[str, Accessor] = {}
    _undefined: set[str] = set()
    _config: FactoryConfig | None = None
    _page_url: str | None = None
    _expected_element: tuple[str, float | None] | None = None
    _expected_title: str | re.Pattern[str] | None = None

    def __init_subclass__(cls, config: FactoryConfig | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._accessors = {}
        cls._undefined = set()
        if config is not None:
            cls._config = config
        # Installed directly: every page class gets its own copy.
        cls.wait_for_ajax = _build_ajax_waiter(cls)  # type: ignore[attr-defined]
        if "define" in cls.__dict__:
            cls.define()  # type: ignore[attr-defined]

    def __init__(self, browser: Page, visit: bool = False) -> None:
        self._browser = browser
        self._navigated = False
        if visit:
            self._navigate()
        if self._expected_element is not None:
            self._await_expected_element()
        if self._expected_title is not None:
            self._verify_expected_title()

    @property
    def browser(self) -> Page:
        return self._browser

    @property
    def navigated(self) -> bool:
        return self._navigated

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: declared accessors, then the browser.
        browser = self.__dict__.get("_browser")
        if browser is None or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        accessor = type(self).find_accessor(name)
        if accessor is not None:
            return MethodType(accessor.bind(), self)
        return getattr(browser, name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(type(self).accessors()))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} url={self._page_url!r}>"

    # Lifecycle

    def _navigate(self) -> None:
        if self._page_url is None:
            logger.debug(f"[PageFactory] {type(self).__name__} has no page URL, not navigating")
            return
        logger.info(f"[PageFactory] Visiting {self._page_url}")
        self.goto()  # type: ignore[attr-defined]
        self._navigated = True

    def _await_expected_element(self) -> None:
        name, timeout = self._expected_element  # type: ignore[misc]
        config = type(self).settings()
        if timeout is None:
            timeout = config.expected_element_timeout
        logger.debug(f"[PageFactory] Waiting up to {timeout}s for '{name}'")
        waits.wait_for_element(getattr(self, name)(), name, timeout, config.expected_element_state)

    def _verify_expected_title(self) -> None:
        expected = self._expected_title
        actual = self._browser.title()
        if isinstance(expected, re.Pattern):
            matched = expected.search(actual) is not None
        else:
            matched = expected == actual
        if not matched:
            logger.warning(f"[PageFactory] Title mismatch on {type(self).__name__}: {actual!r}")
            raise TitleMismatchError(expected, actual)  # type: ignore[arg-type]
