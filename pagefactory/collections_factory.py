from __future__ import annotations

import logging
from typing import Any, ClassVar

from pagefactory.errors import CollectionError

logger = logging.getLogger("pagefactory.collections")


class CollectionsFactory(list):
    """
    Superclass for collections of data objects.

        class Notes(CollectionsFactory):
            pass

        Notes.method_to_add(NoteObject)
        notes = Notes()
        notes.add(browser, subject="Hello")

    The data object class must accept ``(browser, **opts)`` and provide a
    ``create()`` method.
    """

    data_class: ClassVar[type | None] = None

    @classmethod
    def method_to_add(cls, klass: type) -> None:
        cls.data_class = klass

    def add(self, browser: Any, **opts: Any) -> Any:
        if self.data_class is None:
            raise CollectionError(f"{type(self).__name__} has no data object class; call method_to_add first")
        item = self.data_class(browser, **opts)
        item.create()
        self.append(item)
        logger.debug(f"[Collections] Added {type(item).__name__} to {type(self).__name__} ({len(self)} items)")
        return item
