"""Enrichers merge a live Adyen payment method into a payment mean payload."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from adyen_checkout.core.config import settings
from adyen_checkout.services.payment_means.payment_mean import SourceType
from adyen_checkout.services.payment_means.payment_method import PaymentMethod


class PaymentMethodEnricherBase(ABC):
    """Abstract base class for payment mean enrichers."""

    @abstractmethod
    def __call__(self, payment_mean: Mapping[str, Any], payment_method: PaymentMethod) -> dict[str, Any]:
        """Return the enriched raw payment mean."""
        ...  # pragma: no cover


class PaymentMethodEnricher(PaymentMethodEnricherBase):
    """Default enricher.

    Adds the Adyen type, logo, metadata and display description to the payment
    mean. Stored payment methods additionally get their stored method id and a
    per-method umbrella id so the checkout form can post them back.
    """

    def __init__(self, environment: str | None = None):
        self.environment = environment or settings.adyen_environment

    def __call__(self, payment_mean: Mapping[str, Any], payment_method: PaymentMethod) -> dict[str, Any]:
        enriched = {
            **payment_mean,
            "enriched": True,
            "additionaldescription": self._additional_description(payment_mean, payment_method),
            "image": self.logo_url(payment_method.type),
            "isStoredPayment": payment_method.is_stored_payment,
            "isAdyenPaymentMethod": True,
            "adyenType": payment_method.type,
            "metadata": payment_method.to_dict(),
        }

        if payment_method.is_stored_payment:
            return self._enrich_stored_payment_method(enriched, payment_method)

        return enriched

    def logo_url(self, payment_type: str) -> str:
        env = "live" if self.environment == "live" else "test"
        return f"https://checkoutshopper-{env}.adyen.com/checkoutshopper/images/logos/{payment_type}.svg"

    def _enrich_stored_payment_method(
        self, payment_mean: dict[str, Any], payment_method: PaymentMethod
    ) -> dict[str, Any]:
        stored_method_id = payment_method.stored_payment_method_id
        return {
            **payment_mean,
            "stored_method_umbrella_id": f"{payment_mean.get('id')}_{stored_method_id}",
            "stored_method_id": stored_method_id,
            "description": payment_method.get_value("name", payment_mean.get("description", "")),
            "source": SourceType.ADYEN.value,
            "hide": False,
        }

    def _additional_description(
        self, payment_mean: Mapping[str, Any], payment_method: PaymentMethod
    ) -> str:
        fallback = str(payment_mean.get("additionaldescription") or "")
        if not payment_method.is_stored_payment:
            return fallback

        last_four = payment_method.get_value("lastFour")
        if not last_four:
            return fallback

        description = f"************{last_four}"
        expiry_month = payment_method.get_value("expiryMonth")
        expiry_year = payment_method.get_value("expiryYear")
        if expiry_month and expiry_year:
            description += f" ({expiry_month}/{expiry_year})"
        return description
