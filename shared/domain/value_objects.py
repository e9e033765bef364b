"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Represents a range of dates (e.g. the days shown by a calendar)
- HexColor: Represents an sRGB color written as a hex string
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Tuple

from shared.domain.base import ValueObject


HEX_COLOR_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Used for the span of days displayed by a month calendar.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # Validation
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def contains(self, check_date: date) -> bool:
        """
        Check if a date is within this range

        Note: start_date is inclusive, end_date is exclusive
        """
        return self.start_date <= check_date < self.end_date

    def days(self) -> Iterator[date]:
        """Iterate over every date in the range, in order."""
        current = self.start_date
        while current < self.end_date:
            yield current
            current += timedelta(days=1)

    @property
    def last_date(self) -> date:
        """Last date included in the range."""
        return self.end_date - timedelta(days=1)

    def __len__(self) -> int:
        """Return the number of days in this range"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.last_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


@dataclass(frozen=True)
class HexColor(ValueObject):
    """
    Hex color value object

    Accepts ``#RRGGBB`` and the ``#RGB`` shorthand, with or without the
    leading ``#``. The stored value is always the normalized lowercase
    ``#rrggbb`` form.
    """
    value: str

    def __post_init__(self):
        match = HEX_COLOR_RE.match((self.value or "").strip())
        if not match:
            raise ValueError(f"Invalid hex color: {self.value!r}")
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "value", f"#{digits}")

    @classmethod
    def parse(cls, value: str) -> "HexColor | None":
        """Return a HexColor or None when ``value`` is not a valid hex color."""
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        digits = self.value[1:]
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    @property
    def relative_luminance(self) -> float:
        """
        WCAG relative luminance in the range 0..1

        Each channel is linearized from sRGB before weighting.
        """
        def linearize(channel: int) -> float:
            c = channel / 255
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        r, g, b = (linearize(c) for c in self.rgb)
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def is_light(self, threshold: float = 0.5) -> bool:
        return self.relative_luminance > threshold

    def __str__(self):
        return self.value
