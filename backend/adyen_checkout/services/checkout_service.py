"""Checkout payment selection service."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from adyen_checkout.repositories.payment_mean_repository import PaymentMeanRepository
from adyen_checkout.repositories.user_preference_repository import UserPreferenceRepository
from adyen_checkout.services.payment_means.enricher import (
    PaymentMethodEnricher,
    PaymentMethodEnricherBase,
)
from adyen_checkout.services.payment_means.options_builder import (
    CheckoutContext,
    PaymentMethodOptionsBuilder,
)
from adyen_checkout.services.payment_means.payment_mean import PaymentMeanCollection
from adyen_checkout.services.payment_means.preselection import (
    SHIPPING_PAYMENT_ACTION,
    CheckoutViewContext,
    enrich_umbrella_payment_mean,
    enrich_user_preference,
)
from adyen_checkout.services.payment_means.provider import (
    EnrichedPaymentMeanProvider,
    StoredPaymentMethodService,
)
from adyen_checkout.services.payment_providers.adyen import AdyenPaymentMethodService

logger = logging.getLogger(__name__)


class CheckoutService:
    """Resolves the payment means shown at checkout for one request."""

    def __init__(
        self,
        db: Session,
        payment_method_service: StoredPaymentMethodService | None = None,
        enricher: PaymentMethodEnricherBase | None = None,
    ):
        self.db = db
        self.payment_mean_repo = PaymentMeanRepository(db)
        self.user_preference_repo = UserPreferenceRepository(db)
        self.payment_method_service = payment_method_service or AdyenPaymentMethodService()
        self.enricher = enricher or PaymentMethodEnricher()

    def load_payment_means(self) -> PaymentMeanCollection:
        """Active payment means in render order, hidden ones included."""
        rows = self.payment_mean_repo.to_raw_rows(self.payment_mean_repo.get_active())
        return PaymentMeanCollection.from_raw_rows(rows)

    def get_payment_means(self, context: CheckoutContext) -> PaymentMeanCollection:
        provider = EnrichedPaymentMeanProvider(
            self.payment_method_service,
            PaymentMethodOptionsBuilder(context),
            self.enricher,
        )
        # the umbrella is usually hidden; its stored method entries are not
        return provider(self.load_payment_means()).filter_exclude_hidden()

    def build_view(
        self,
        context: CheckoutContext,
        payment_means: PaymentMeanCollection,
        view: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Checkout view data with the shopper's stored method preselected.

        The shopper's current payment mean, when known, is exposed as
        ``sUserData.additional.payment`` so a user preference can apply to it.
        """
        view = dict(view or {})
        if context.payment_id is not None and "sUserData" not in view:
            view["sUserData"] = {"additional": {"payment": {"id": context.payment_id}}}
        view = enrich_user_preference(view, context.user_id, self.user_preference_repo)
        return enrich_umbrella_payment_mean(
            CheckoutViewContext(
                action=SHIPPING_PAYMENT_ACTION,
                session_stored_method_id=context.stored_method_id,
                view=view,
            ),
            payment_means,
        )

    def disable_stored_method(self, stored_method_id: str, shopper_reference: str) -> int:
        """Disable a stored method at Adyen and forget it as a user preference.

        Returns the number of user preferences that were cleared.
        """
        self.payment_method_service.disable_stored_method(stored_method_id, shopper_reference)
        cleared = self.user_preference_repo.clear_stored_method(stored_method_id)
        if cleared:
            logger.info("Cleared %d preferences for stored method %s", cleared, stored_method_id)
        return cleared
