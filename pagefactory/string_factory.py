from __future__ import annotations

import re
from typing import Any

_UNWANTED = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def damballa(text: Any) -> str:
    """
    Snake-case a label so it can serve as a method name.

    Punctuation is dropped, runs of spaces, dashes and underscores become a
    single underscore, and the result is lower-cased.

        damballa("Click Me For Fun!")  ->  "click_me_for_fun"
    """
    stripped = _UNWANTED.sub("", str(text))
    return _SEPARATORS.sub("_", stripped).lower()
