"""Instant: a point on the UTC timeline at millisecond precision.

Instants carry no zone, locale or calendar; those belong to the formatter.
Conversion to and from aware datetimes is the only bridge to wall-clock
representations.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

__all__ = ["EPOCH", "Instant"]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_ONE_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """Milliseconds since 1970-01-01T00:00:00Z.

    Ordered and hashable, so instants sort and key dicts naturally.

    Example:
        >>> Instant.of(2010, 3, 11).epoch_millis
        1268265600000
        >>> str(Instant(0))
        '1970-01-01T00:00:00.000Z'
    """

    epoch_millis: int

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """Convert an aware datetime, truncating to milliseconds.

        Raises:
            ValueError: If the datetime is naive (its zone would be a guess)
        """
        if value.tzinfo is None or value.utcoffset() is None:
            msg = "Instant.from_datetime() requires a timezone-aware datetime"
            raise ValueError(msg)
        return cls((value - EPOCH) // _ONE_MILLISECOND)

    @classmethod
    def of(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        zone: tzinfo = UTC,
    ) -> "Instant":
        """Build an instant from wall-clock components in ``zone`` (UTC default)."""
        local = datetime(year, month, day, hour, minute, second, millisecond * 1000, tzinfo=zone)
        return cls.from_datetime(local)

    @classmethod
    def now(cls) -> "Instant":
        """Current instant from the system clock."""
        return cls.from_datetime(datetime.now(UTC))

    def to_datetime(self, zone: tzinfo = UTC) -> datetime:
        """Aware datetime for this instant, expressed in ``zone``.

        Raises:
            OverflowError: If the instant is outside datetime's year range
        """
        return (EPOCH + timedelta(milliseconds=self.epoch_millis)).astimezone(zone)

    def __str__(self) -> str:
        return self.to_datetime().replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
