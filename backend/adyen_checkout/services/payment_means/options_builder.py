"""Builds the /paymentMethods query options for the current cart."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CheckoutContext:
    """Request-scoped cart and shopper data needed at checkout."""

    country_code: str = ""
    currency: str = ""
    value: Decimal = Decimal("0")
    user_id: int | None = None
    stored_method_id: str | None = None
    payment_id: int | None = None


class PaymentMethodOptionsBuilder:
    def __init__(self, context: CheckoutContext):
        self.context = context

    def __call__(self) -> dict[str, Any]:
        return {
            "countryCode": self.context.country_code.upper(),
            "currency": self.context.currency.upper(),
            "value": float(self.context.value),
        }
