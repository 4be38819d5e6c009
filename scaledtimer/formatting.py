"""
Unit conversion and human-readable breakdown of elapsed microseconds.
"""

import math
from dataclasses import dataclass

US_PER_MS = 1_000.0
US_PER_SECOND = 1_000_000.0
US_PER_MINUTE = 60_000_000.0
US_PER_HOUR = 3_600_000_000.0
US_PER_DAY = 86_400_000_000.0


@dataclass(frozen=True)
class TimeComponents:
    """
    Clock-style breakdown of an elapsed duration.

    Hours are unbounded; every other field wraps at its natural modulus.
    `days` is a plain day counter alongside, not a calendar field.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    microseconds: int
    days: int = 0

    @classmethod
    def from_microseconds(cls, elapsed_us: float) -> "TimeComponents":
        """Break an elapsed value in microseconds into components."""
        return cls(
            hours=math.floor(elapsed_us / US_PER_HOUR),
            minutes=math.floor(elapsed_us / US_PER_MINUTE) % 60,
            seconds=math.floor(elapsed_us / US_PER_SECOND) % 60,
            milliseconds=math.floor(elapsed_us / US_PER_MS) % 1000,
            microseconds=math.floor(elapsed_us) % 1000,
            days=math.floor(elapsed_us / US_PER_DAY),
        )

    # Plain string forms
    @property
    def hours_str(self) -> str:
        return str(abs(self.hours))

    @property
    def minutes_str(self) -> str:
        return str(abs(self.minutes))

    @property
    def seconds_str(self) -> str:
        return str(abs(self.seconds))

    @property
    def milliseconds_str(self) -> str:
        return str(abs(self.milliseconds))

    @property
    def microseconds_str(self) -> str:
        return str(abs(self.microseconds))

    @property
    def days_str(self) -> str:
        return str(abs(self.days))

    # Zero-padded forms
    @property
    def hours_padded(self) -> str:
        return f"{abs(self.hours):02d}"

    @property
    def minutes_padded(self) -> str:
        return f"{abs(self.minutes):02d}"

    @property
    def seconds_padded(self) -> str:
        return f"{abs(self.seconds):02d}"

    @property
    def milliseconds_padded(self) -> str:
        return f"{abs(self.milliseconds):03d}"

    def formatted_string(
        self, include_milliseconds: bool = True, delimiter: str = ":"
    ) -> str:
        """
        Join padded hours, minutes and seconds, optionally with milliseconds.

        Args:
            include_milliseconds: Append the 3-digit millisecond field
            delimiter: Separator placed between fields

        Returns:
            e.g. "01:02:05:000"
        """
        parts = [self.hours_padded, self.minutes_padded, self.seconds_padded]
        if include_milliseconds:
            parts.append(self.milliseconds_padded)
        return delimiter.join(parts)

    def as_dict(self) -> dict:
        return {
            "days": self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "milliseconds": self.milliseconds,
            "microseconds": self.microseconds,
        }


def format_elapsed_us(
    elapsed_us: float, include_milliseconds: bool = True, delimiter: str = ":"
) -> str:
    """Format a raw microsecond value without needing a timer instance."""
    return TimeComponents.from_microseconds(elapsed_us).formatted_string(
        include_milliseconds, delimiter
    )
