"""
Retry wrapper for sitemap writes.

UrlSet never retries on its own. A failed write leaves its buffer and file
counter untouched, so hosts that see transient filesystem errors can wrap
write_file() or finish() with this helper and call again.
"""

from typing import Callable, TypeVar
import logging

from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from ..config import WRITE_RETRY_ATTEMPTS
from ..exceptions import IOFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_retry(
    func: Callable[..., T],
    attempts: int = WRITE_RETRY_ATTEMPTS,
    min_wait: float = 1,
    max_wait: float = 30,
) -> Callable[..., T]:
    """
    Wrap func so that IOFailure triggers retries with exponential backoff.

    Args:
        func: Callable to wrap, e.g. urlset.finish
        attempts: Total number of attempts, including the first
        min_wait: Lower bound on the wait between attempts, in seconds
        max_wait: Upper bound on the wait between attempts, in seconds

    Returns:
        Wrapped callable; the last IOFailure is re-raised once attempts run out
    """
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(IOFailure),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )(func)
