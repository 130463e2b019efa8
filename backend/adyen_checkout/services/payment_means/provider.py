"""Enriched payment mean provider.

Merges the store's payment means with the Adyen payment methods available
for the current cart:

1. An empty cart skips Adyen entirely and only returns native payment means.
2. Otherwise the Adyen methods are fetched once for the cart's country,
   currency and total.
3. Native payment means pass through untouched; Adyen-backed ones are kept
   only when their recorded identifier matches a fetched method, and are then
   enriched with it.
4. The umbrella payment mean is expanded into one enriched entry per stored
   Adyen method, appended after the regular entries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from adyen_checkout.services.payment_means.enricher import PaymentMethodEnricherBase
from adyen_checkout.services.payment_means.payment_mean import PaymentMean, PaymentMeanCollection
from adyen_checkout.services.payment_means.payment_method import (
    PaymentMethod,
    PaymentMethodCollection,
)

logger = logging.getLogger(__name__)


class UmbrellaPaymentMeanNotFoundError(Exception):
    """Raised when the stored payment umbrella mean is not provisioned."""

    def __init__(self, message: str = "Stored payment umbrella payment mean not found"):
        super().__init__(message)


class PaymentMethodService(Protocol):
    def get_payment_methods(
        self, country_code: str, currency: str, value: float
    ) -> PaymentMethodCollection: ...  # pragma: no cover


class StoredPaymentMethodService(PaymentMethodService, Protocol):
    def disable_stored_method(
        self, stored_method_id: str, shopper_reference: str
    ) -> None: ...  # pragma: no cover


OptionsBuilder = Callable[[], Mapping[str, Any]]


class EnrichedPaymentMeanProvider:
    def __init__(
        self,
        payment_method_service: PaymentMethodService,
        options_builder: OptionsBuilder,
        enricher: PaymentMethodEnricherBase | Callable[[Mapping[str, Any], PaymentMethod], dict[str, Any]],
    ):
        self.payment_method_service = payment_method_service
        self.options_builder = options_builder
        self.enricher = enricher

    def __call__(self, payment_means: PaymentMeanCollection) -> PaymentMeanCollection:
        options = self.options_builder()
        if not options.get("value"):
            return payment_means.filter_exclude_adyen()

        adyen_payment_methods = self.payment_method_service.get_payment_methods(
            options.get("countryCode", ""),
            options.get("currency", ""),
            options["value"],
        )

        umbrella = payment_means.fetch_stored_method_umbrella_payment_mean()
        if umbrella is None:
            raise UmbrellaPaymentMeanNotFoundError()

        regular_methods = adyen_payment_methods.filter_regular()
        enriched = payment_means.map(
            lambda payment_mean: self._enrich(payment_mean, regular_methods)
        )
        stored = [
            PaymentMean.from_raw(self.enricher(umbrella.to_dict(), stored_method))
            for stored_method in adyen_payment_methods.filter_stored()
        ]

        logger.info(
            "Enriched %d of %d payment means, %d stored Adyen methods",
            len(enriched),
            len(payment_means),
            len(stored),
        )
        return PaymentMeanCollection(*enriched, *stored)

    def _enrich(
        self, payment_mean: PaymentMean, payment_methods: PaymentMethodCollection
    ) -> PaymentMean | None:
        if not payment_mean.is_adyen_source:
            return payment_mean

        code = payment_mean.adyen_code
        if code is None:
            logger.warning("Dropping Adyen payment mean %s without adyen type", payment_mean.id)
            return None

        payment_method = payment_methods.fetch_by_identifier(code)
        if payment_method is None:
            logger.debug(
                "Dropping Adyen payment mean %s, %s is not available for this cart",
                payment_mean.id,
                code,
            )
            return None

        return PaymentMean.from_raw(self.enricher(payment_mean.to_dict(), payment_method))
