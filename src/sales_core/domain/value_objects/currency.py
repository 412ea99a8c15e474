from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from babel import UnknownLocaleError
from babel.numbers import format_currency

from sales_core.domain.exceptions import InvalidArgumentError

DEFAULT_LOCALE = "en_US"
CODE_PATTERN = re.compile(r"[A-Z]{3}")


def normalize_locale(locale: str) -> str:
    """Accept both BCP 47 (``en-US``) and POSIX (``en_US``) locale tags."""
    return locale.replace("-", "_")


@dataclass(frozen=True, slots=True)
class Currency:
    """Value object for an ISO 4217 shaped currency code.

    Only the shape is checked (three upper-case letters); the code is not
    looked up in a registry.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not CODE_PATTERN.fullmatch(self.code):
            raise InvalidArgumentError(
                f"Currency code must be three upper-case letters: {self.code!r}"
            )

    def format_amount(self, amount: Decimal | int, locale: str = DEFAULT_LOCALE) -> str:
        """Render an amount in this currency for the given locale.

        Always uses two fraction digits, whatever the currency's usual
        precision is.

        Raises:
            InvalidArgumentError: If the locale is unknown or malformed.
        """
        try:
            return format_currency(
                amount,
                self.code,
                locale=normalize_locale(locale),
                currency_digits=False,
            )
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid locale: {locale!r}") from e

    def __str__(self) -> str:
        return self.code
