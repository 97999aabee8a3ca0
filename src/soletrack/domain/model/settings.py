"""Shop-wide settings: currency, AI billing switch and company identity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from soletrack.domain.exceptions import ValidationError


class Currency(Enum):
    INR = "INR"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @staticmethod
    def parse(code: str) -> Currency:
        try:
            return Currency(code.strip().upper())
        except ValueError as exc:
            choices = ", ".join(c.value for c in Currency)
            raise ValidationError(
                f"Unsupported currency {code!r} (choose from {choices})"
            ) from exc


_SYMBOLS = {
    Currency.INR: "₹",
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
}


@dataclass(frozen=True)
class CompanyInfo:
    """Identity printed at the top of every receipt."""

    name: str = "SoleTrack Elite Footwear"
    address: str = "Shop No. 42, Galleria Market, New Delhi"
    phone: str = "+91 98765 43210"
    logo: str | None = None


@dataclass(frozen=True)
class Settings:
    ai_recognition_enabled: bool = True
    currency: Currency = Currency.INR
    company: CompanyInfo = field(default_factory=CompanyInfo)

    @property
    def currency_symbol(self) -> str:
        return self.currency.symbol

    def with_company(self, **changes: str | None) -> Settings:
        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError("Company name is required")
        return replace(self, company=replace(self.company, **changes))
