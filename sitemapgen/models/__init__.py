from .entry import (
    Entry,
    CHANGE_ALWAYS, CHANGE_HOURLY, CHANGE_DAILY, CHANGE_WEEKLY,
    CHANGE_MONTHLY, CHANGE_YEARLY, CHANGE_NEVER, CHANGE_FREQUENCIES
)

__all__ = [
    "Entry",
    "CHANGE_ALWAYS", "CHANGE_HOURLY", "CHANGE_DAILY", "CHANGE_WEEKLY",
    "CHANGE_MONTHLY", "CHANGE_YEARLY", "CHANGE_NEVER", "CHANGE_FREQUENCIES"
]
