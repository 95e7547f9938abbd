"""Reference clock for demonstrations that read the current time.

`features.fixed_now` in the configuration pins the clock so that output
and tests are reproducible.
"""

from datetime import UTC, datetime

from src.app.runtime.context import get_config


def local_now() -> datetime:
    """Current local date-time without a zone."""
    fixed = get_config().features.fixed_now
    if fixed is None:
        return datetime.now()
    return fixed.replace(tzinfo=None)


def utc_now() -> datetime:
    """Current instant as an aware UTC date-time."""
    fixed = get_config().features.fixed_now
    if fixed is None:
        return datetime.now(UTC)
    if fixed.tzinfo is None:
        return fixed.replace(tzinfo=UTC)
    return fixed.astimezone(UTC)
