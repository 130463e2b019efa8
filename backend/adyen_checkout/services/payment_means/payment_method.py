"""Adyen-side payment method descriptors as returned by /paymentMethods."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


def code_from_name(name: str) -> str:
    """Snake-case a payment method name, e.g. ``"Credit Card"`` -> ``"credit_card"``."""
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


@dataclass(frozen=True)
class PaymentMethod:
    type: str
    code: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> PaymentMethod:
        return cls(type=str(raw.get("type", "")), raw=MappingProxyType(dict(raw)))

    def with_code(self, code: str) -> PaymentMethod:
        return replace(self, code=code)

    @property
    def identifier(self) -> str:
        """Composite ``{type}_{code}`` identifier stored on imported payment means."""
        return f"{self.type}_{self.code}"

    @property
    def name(self) -> str:
        return str(self.raw.get("name", ""))

    @property
    def is_stored_payment(self) -> bool:
        return bool(self.raw.get("id"))

    @property
    def stored_payment_method_id(self) -> str | None:
        value = self.raw.get("id")
        return None if value is None else str(value)

    def get_value(self, key: str, fallback: Any = None) -> Any:
        value = self.raw.get(key)
        return fallback if value is None else value

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)


class PaymentMethodCollection:
    def __init__(self, *payment_methods: PaymentMethod):
        self._payment_methods: tuple[PaymentMethod, ...] = tuple(payment_methods)

    @classmethod
    def from_adyen_response(cls, payload: Mapping[str, Any]) -> PaymentMethodCollection:
        """Build the collection from a /paymentMethods response body.

        Regular methods get their code bound from the method name; stored
        methods follow them in the order Adyen returned them.
        """
        regular: Iterable[Mapping[str, Any]] = payload.get("paymentMethods") or []
        stored: Iterable[Mapping[str, Any]] = payload.get("storedPaymentMethods") or []
        return cls(
            *(
                PaymentMethod.from_raw(raw).with_code(code_from_name(str(raw.get("name", ""))))
                for raw in regular
            ),
            *(PaymentMethod.from_raw(raw) for raw in stored),
        )

    def __iter__(self) -> Iterator[PaymentMethod]:
        return iter(self._payment_methods)

    def __len__(self) -> int:
        return len(self._payment_methods)

    def fetch_by_identifier(self, identifier: str) -> PaymentMethod | None:
        return next((pm for pm in self._payment_methods if pm.identifier == identifier), None)

    def filter_stored(self) -> PaymentMethodCollection:
        return PaymentMethodCollection(*(pm for pm in self._payment_methods if pm.is_stored_payment))

    def filter_regular(self) -> PaymentMethodCollection:
        return PaymentMethodCollection(
            *(pm for pm in self._payment_methods if not pm.is_stored_payment)
        )
