from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from babel import UnknownLocaleError
from babel.dates import format_datetime

from sales_core.domain.exceptions import InvalidArgumentError
from sales_core.domain.value_objects.currency import DEFAULT_LOCALE, normalize_locale


def parse_instant(value: datetime | str) -> datetime:
    """Parse a datetime or ISO-8601 string into an aware UTC datetime.

    Naive values (no offset) are read as UTC.

    Raises:
        InvalidArgumentError: If the value is not a datetime or a valid
            ISO-8601 string.
    """
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid date: {value!r}") from e
    elif isinstance(value, datetime):
        parsed = value
    else:
        raise InvalidArgumentError(f"Invalid date: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as e:
        raise InvalidArgumentError(f"Date out of range: {value!r}") from e


@dataclass(frozen=True, slots=True)
class DateTime:
    """Value object for an instant that is not in the future.

    Use the create() factory method to construct instances with validation.
    """

    value: datetime

    @classmethod
    def create(cls, value: datetime | str | None = None, *, now: datetime) -> DateTime:
        """Factory method to create a DateTime with validation.

        Args:
            value: A datetime or ISO-8601 string. None or an empty
                string defaults to ``now``.
            now: Reference instant (UTC) used as "the present".

        Returns:
            A new DateTime instance normalized to UTC.

        Raises:
            InvalidArgumentError: If the value cannot be parsed or is
                strictly after ``now``.
        """
        reference = parse_instant(now)
        if value is None or value == "":
            return cls(value=reference)

        instant = parse_instant(value)
        if instant > reference:
            raise InvalidArgumentError(f"Date cannot be in the future: {instant.isoformat()}")

        return cls(value=instant)

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        """Human-readable date and time (medium length, UTC) for the locale."""
        try:
            return format_datetime(
                self.value,
                format="medium",
                tzinfo=UTC,
                locale=normalize_locale(locale),
            )
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid locale: {locale!r}") from e

    def __str__(self) -> str:
        return self.value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
