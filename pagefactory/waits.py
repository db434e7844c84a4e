"""
Bounded waits used while building and driving page objects.

Readiness waits lean on Playwright's own locator waiting. The background
activity wait polls a probe script because there is no browser event for
"all XHR calls have settled".
"""

from __future__ import annotations

import logging
from time import monotonic, sleep
from typing import Any

from playwright.sync_api import TimeoutError as PlaywrightTimeout

from pagefactory.errors import PageTimeoutError

logger = logging.getLogger("pagefactory.waits")


def wait_for_element(locator: Any, target: str, timeout: float, state: str = "visible") -> None:
    """
    Block until ``locator`` reaches ``state``.

    Args:
        locator: Playwright locator returned by the page accessor
        target: Accessor name, reported in the error
        timeout: Seconds to wait
        state: Playwright wait state ("attached", "visible", ...)
    """
    try:
        locator.wait_for(state=state, timeout=timeout * 1000)
    except PlaywrightTimeout as exc:
        logger.warning(f"[Waits] '{target}' not {state} after {timeout}s")
        raise PageTimeoutError(
            f"Timed out after {timeout} seconds waiting for '{target}' to be {state}",
            target=target,
            timeout=timeout,
        ) from exc


def outstanding_requests(browser: Any, probe: str) -> int:
    return int(browser.evaluate(probe) or 0)


def wait_for_ajax(
    browser: Any,
    timeout: float,
    message: str = "",
    *,
    probe: str,
    intervals: tuple[float, float] = (0.3, 0.7),
) -> bool:
    """Poll ``probe`` until it reports no outstanding requests or ``timeout`` seconds pass."""
    short_pause, long_pause = intervals
    deadline = monotonic() + timeout
    attempts = 0
    while True:
        sleep(short_pause)
        attempts += 1
        if outstanding_requests(browser, probe) == 0:
            logger.debug(f"[Waits] Ajax idle after {attempts} probe(s)")
            return True
        if monotonic() >= deadline:
            break
        sleep(long_pause)

    logger.warning(f"[Waits] Ajax still active after {attempts} probe(s)")
    raise PageTimeoutError(
        f"Ajax calls continued beyond {timeout} seconds. {message}".rstrip(),
        target="ajax",
        timeout=timeout,
    )
