"""Payment mean value objects and the ordered collection used at checkout.

A payment mean is a store-configured payment option, either native to the
store or backed by an imported Adyen payment method. Instances are immutable
snapshots of a storage row; every transformation builds a new collection.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from adyen_checkout.core.config import settings

ADYEN_CODE = "adyen_type"


class SourceType(int, Enum):
    """Where a payment mean comes from."""

    SHOPWARE_DEFAULT = 0
    ADYEN = 1425514

    @classmethod
    def load(cls, value: Any) -> SourceType:
        """Load a source from its storage value; anything but the Adyen id is native."""
        try:
            return cls.ADYEN if int(value) == cls.ADYEN.value else cls.SHOPWARE_DEFAULT
        except (TypeError, ValueError):
            return cls.SHOPWARE_DEFAULT


@dataclass(frozen=True)
class PaymentType:
    """Adyen payment method type, e.g. ``scheme`` or ``bcmc``."""

    type: str

    @classmethod
    def load(cls, value: Any) -> PaymentType:
        return cls(type=str(value or ""))

    def __str__(self) -> str:
        return self.type


@dataclass(frozen=True)
class PaymentMean:
    id: int
    source: SourceType
    raw: Mapping[str, Any]
    enriched: bool = False
    adyen_type: PaymentType | None = None

    @classmethod
    def from_raw(cls, payment_mean: Mapping[str, Any]) -> PaymentMean:
        """Build a payment mean from a raw storage (or enricher) payload."""
        enriched = bool(payment_mean.get("enriched", False))
        return cls(
            id=int(payment_mean.get("id") or 0),
            source=SourceType.load(payment_mean.get("source")),
            raw=MappingProxyType(dict(payment_mean)),
            enriched=enriched,
            adyen_type=PaymentType.load(payment_mean.get("adyenType")) if enriched else None,
        )

    def get_value(self, key: str, fallback: Any = None) -> Any:
        value = self.raw.get(key)
        return fallback if value is None else value

    @property
    def name(self) -> str | None:
        return self.get_value("name")

    @property
    def is_hidden(self) -> bool:
        return bool(self.get_value("hide", False))

    @property
    def is_adyen_source(self) -> bool:
        return self.source is SourceType.ADYEN

    @property
    def attribute(self) -> Mapping[str, Any]:
        return self.get_value("attribute", {})

    @property
    def adyen_code(self) -> str | None:
        """Composite Adyen identifier recorded on the attribute, if any."""
        code = self.attribute.get(ADYEN_CODE)
        return None if code is None else str(code)

    @property
    def stored_method_id(self) -> str:
        return str(self.get_value("stored_method_id", ""))

    @property
    def stored_method_umbrella_id(self) -> str | None:
        return self.get_value("stored_method_umbrella_id")

    @property
    def is_stored_method_umbrella(self) -> bool:
        return self.name == settings.adyen_stored_payment_umbrella_code

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)


class PaymentMeanCollection:
    """Ordered collection of payment means; order is the render order."""

    def __init__(self, *payment_means: PaymentMean):
        self._payment_means: tuple[PaymentMean, ...] = tuple(payment_means)

    @classmethod
    def from_raw_rows(cls, rows: Iterable[Mapping[str, Any]]) -> PaymentMeanCollection:
        return cls(*(PaymentMean.from_raw(row) for row in rows))

    def __iter__(self) -> Iterator[PaymentMean]:
        return iter(self._payment_means)

    def __len__(self) -> int:
        return len(self._payment_means)

    def __repr__(self) -> str:
        return f"PaymentMeanCollection({[pm.id for pm in self._payment_means]})"

    def map(self, callback: Callable[[PaymentMean], Any]) -> list[Any]:
        """Apply ``callback`` to every payment mean and drop falsy results."""
        return [result for result in (callback(pm) for pm in self._payment_means) if result]

    def filter(self, predicate: Callable[[PaymentMean], bool]) -> PaymentMeanCollection:
        return PaymentMeanCollection(*(pm for pm in self._payment_means if predicate(pm)))

    def filter_by_source(self, source: SourceType) -> PaymentMeanCollection:
        return self.filter(lambda pm: pm.source is source)

    def filter_exclude_adyen(self) -> PaymentMeanCollection:
        return self.filter(lambda pm: not pm.is_adyen_source)

    def filter_exclude_hidden(self) -> PaymentMeanCollection:
        return self.filter(lambda pm: not pm.is_hidden)

    def fetch_stored_method_umbrella_payment_mean(self) -> PaymentMean | None:
        return next((pm for pm in self._payment_means if pm.is_stored_method_umbrella), None)

    def fetch_by_id(self, payment_mean_id: int) -> PaymentMean | None:
        return next((pm for pm in self._payment_means if pm.id == payment_mean_id), None)

    def fetch_by_stored_method_id(self, stored_method_id: str) -> PaymentMean | None:
        return next(
            (pm for pm in self._payment_means if pm.get_value("stored_method_id") == stored_method_id),
            None,
        )

    def fetch_by_umbrella_stored_method_id(self, stored_method_id: str) -> PaymentMean | None:
        return next(
            (
                pm
                for pm in self._payment_means
                if pm.get_value("stored_method_umbrella_id") == stored_method_id
            ),
            None,
        )

    def to_raw_mapping(self) -> dict[int | str, dict[str, Any]]:
        """Payload keyed by payment mean id, as the storage layer expects it back.

        Stored method entries share the umbrella's id and are keyed by their
        ``stored_method_umbrella_id`` instead.
        """
        return {
            pm.stored_method_umbrella_id or pm.id: pm.to_dict() for pm in self._payment_means
        }
