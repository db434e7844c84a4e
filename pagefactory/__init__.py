"""Declarative page objects and data collections for Playwright test suites."""

from pagefactory.accessors import Accessor, AccessorKind
from pagefactory.collections_factory import CollectionsFactory
from pagefactory.config import FactoryConfig, load_config
from pagefactory.errors import (
    CollectionError,
    DuplicateDefinitionError,
    PageFactoryError,
    PageTimeoutError,
    TitleMismatchError,
)
from pagefactory.page_factory import PageFactory, PageType
from pagefactory.string_factory import damballa

__all__ = [
    "Accessor",
    "AccessorKind",
    "CollectionError",
    "CollectionsFactory",
    "DuplicateDefinitionError",
    "FactoryConfig",
    "PageFactory",
    "PageFactoryError",
    "PageType",
    "PageTimeoutError",
    "TitleMismatchError",
    "damballa",
    "load_config",
]
