"""Currency formatting used in report rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyFormatter:
    """Group an integer amount by thousands and append a currency unit.

    The defaults reproduce the ``ko-KR`` rendering (``1,500,000원``); other
    locales are handled by passing a different separator or suffix.
    """

    separator: str = ","
    suffix: str = "원"

    def format(self, amount: int) -> str:
        grouped = f"{int(amount):,}"
        if self.separator != ",":
            grouped = grouped.replace(",", self.separator)
        return f"{grouped}{self.suffix}"


DEFAULT_FORMATTER = CurrencyFormatter()
