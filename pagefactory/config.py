from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_AJAX_PROBE = "() => (window.jQuery ? window.jQuery.active : 0)"


@dataclass(frozen=True)
class FactoryConfig:
    """Timeouts and probes shared by every page class."""
    expected_element_timeout: float = 30.0
    expected_element_state: str = "visible"
    ajax_timeout: float = 10.0
    ajax_probe: str = DEFAULT_AJAX_PROBE
    ajax_poll_intervals: tuple[float, float] = (0.3, 0.7)

    @classmethod
    def from_env(cls) -> FactoryConfig:
        defaults = cls()
        return cls(
            expected_element_timeout=float(
                os.getenv("PAGEFACTORY_EXPECTED_ELEMENT_TIMEOUT", defaults.expected_element_timeout)
            ),
            expected_element_state=os.getenv(
                "PAGEFACTORY_EXPECTED_ELEMENT_STATE", defaults.expected_element_state
            ),
            ajax_timeout=float(os.getenv("PAGEFACTORY_AJAX_TIMEOUT", defaults.ajax_timeout)),
            ajax_probe=os.getenv("PAGEFACTORY_AJAX_PROBE", defaults.ajax_probe),
        )


@lru_cache(maxsize=1)
def load_config() -> FactoryConfig:
    return FactoryConfig.from_env()
