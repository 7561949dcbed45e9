"""
Sitemap entry data model.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
import math
from typing import List, Optional, Tuple, Union

from ..exceptions import InvalidValue
from ..utils.date_utils import format_lastmod
from ..utils.xml_utils import render_element, byte_length

CHANGE_ALWAYS = "always"
CHANGE_HOURLY = "hourly"
CHANGE_DAILY = "daily"
CHANGE_WEEKLY = "weekly"
CHANGE_MONTHLY = "monthly"
CHANGE_YEARLY = "yearly"
CHANGE_NEVER = "never"

CHANGE_FREQUENCIES = (
    CHANGE_ALWAYS,
    CHANGE_HOURLY,
    CHANGE_DAILY,
    CHANGE_WEEKLY,
    CHANGE_MONTHLY,
    CHANGE_YEARLY,
    CHANGE_NEVER,
)


def _decimal_text(value: float) -> str:
    """Plain decimal notation (xsd:decimal has no exponent), trailing zeros dropped: 1.0 -> "1"."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Entry:
    """
    One <url> element, or a <sitemap> element when is_index_entry is set.

    Entries are immutable. The set_* methods return a modified copy, so they
    can be chained:

        Entry("https://example.com/").set_change_frequency("daily").set_priority(0.8)
    """

    location: str
    last_modified: Optional[str] = None  # formatted; date/datetime values are formatted on construction
    change_frequency: Optional[str] = None
    priority: float = 0.0  # 0.0 means unset
    is_index_entry: bool = False

    def __post_init__(self):
        if not isinstance(self.location, str) or not self.location:
            raise InvalidValue(f"Entry location must be a non-empty string, got {self.location!r}")

        if isinstance(self.last_modified, date):
            object.__setattr__(self, "last_modified", format_lastmod(self.last_modified))
        elif self.last_modified is not None and not isinstance(self.last_modified, str):
            raise InvalidValue(
                f"Last modified must be a string, date or datetime, got {type(self.last_modified).__name__}"
            )

        if self.change_frequency is not None and self.change_frequency not in CHANGE_FREQUENCIES:
            raise InvalidValue(f"Invalid frequency `{self.change_frequency}`")

        try:
            priority = float(self.priority)
        except (TypeError, ValueError):
            raise InvalidValue(f"Priority must be a number, got {self.priority!r}") from None
        if not math.isfinite(priority):
            raise InvalidValue(f"Priority must be a finite number, got {priority}")
        object.__setattr__(self, "priority", priority)

    @property
    def tag(self) -> str:
        """Element name this entry serializes under."""
        return "sitemap" if self.is_index_entry else "url"

    def set_change_frequency(self, value: str) -> "Entry":
        """Return a copy with <changefreq> set. Raises InvalidValue for unknown values."""
        if value not in CHANGE_FREQUENCIES:
            raise InvalidValue(f"Invalid frequency `{value}`")
        return replace(self, change_frequency=value)

    def set_last_modified(self, when: Union[datetime, date, str], fmt: Optional[str] = None) -> "Entry":
        """Return a copy with <lastmod> set to `when` formatted with `fmt` (ISO 8601 if None)."""
        return replace(self, last_modified=format_lastmod(when, fmt))

    def set_priority(self, value: float) -> "Entry":
        # No range check: the protocol recommends 0.0-1.0 but does not require it
        return replace(self, priority=value)

    def mark_as_index_entry(self) -> "Entry":
        """Return a copy that serializes as a <sitemap> reference."""
        return replace(self, is_index_entry=True)

    def _children(self) -> List[Tuple[str, str]]:
        children = [("loc", self.location)]
        if self.last_modified:
            children.append(("lastmod", self.last_modified))
        if self.change_frequency:
            children.append(("changefreq", self.change_frequency))
        if self.priority != 0.0:
            children.append(("priority", _decimal_text(self.priority)))
        return children

    def serialize(self) -> Tuple[str, int]:
        """
        Render this entry as an XML fragment.

        Returns:
            (fragment, byte_length) where byte_length counts UTF-8 bytes,
            not characters
        """
        fragment = render_element(self.tag, self._children())
        return fragment, byte_length(fragment)
