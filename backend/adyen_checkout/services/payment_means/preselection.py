"""Checkout view enrichment for preselected stored payment methods.

The checkout view is a plain mapping of template variables (``sUserData``,
``sFormData``, ``adyenUserPreference``). These functions are called
explicitly by the checkout service after the payment means are resolved and
return a new mapping; the input view is never modified.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from adyen_checkout.repositories.user_preference_repository import UserPreferenceRepository
from adyen_checkout.services.payment_means.payment_mean import PaymentMeanCollection

logger = logging.getLogger(__name__)

SHIPPING_PAYMENT_ACTION = "shippingPayment"


@dataclass
class CheckoutViewContext:
    action: str
    is_xhr: bool = False
    session_stored_method_id: str | None = None
    view: dict[str, Any] = field(default_factory=dict)


def enrich_user_preference(
    view: dict[str, Any], user_id: int | None, repo: UserPreferenceRepository
) -> dict[str, Any]:
    """Expose the shopper's stored method preference as ``adyenUserPreference``."""
    if user_id is None:
        return view

    preference = repo.get_by_user_id(user_id)
    if preference is None:
        return view

    return {**view, "adyenUserPreference": preference.to_dict()}


def enrich_umbrella_payment_mean(
    context: CheckoutViewContext, payment_means: PaymentMeanCollection
) -> dict[str, Any]:
    """Preselect the stored payment method in the shipping/payment form.

    The stored method comes from the session first, then from the user
    preference when the shopper's current payment is the umbrella mean.
    """
    view = context.view
    if context.action != SHIPPING_PAYMENT_ACTION or context.is_xhr:
        return view

    stored_method_id = context.session_stored_method_id or _preselected_stored_method_id(
        view, payment_means
    )
    if not stored_method_id:
        return view

    payment_mean = payment_means.fetch_by_stored_method_id(stored_method_id)
    if payment_mean is None:
        logger.debug("No payment mean for stored method %s", stored_method_id)
        return view

    enriched = copy.deepcopy(view)
    enriched.setdefault("sUserData", {}).setdefault("additional", {})["payment"] = payment_mean.to_dict()
    enriched.setdefault("sFormData", {})["payment"] = payment_mean.stored_method_umbrella_id
    return enriched


def _preselected_stored_method_id(
    view: dict[str, Any], payment_means: PaymentMeanCollection
) -> str | None:
    preference = view.get("adyenUserPreference") or {}
    stored_method_id = preference.get("storedMethodId")
    if not stored_method_id:
        return None

    umbrella = payment_means.fetch_stored_method_umbrella_payment_mean()
    if umbrella is None:
        return None

    payment = view.get("sUserData", {}).get("additional", {}).get("payment")
    preselected_id = payment.get("id") if isinstance(payment, dict) else None
    if preselected_id is None or str(preselected_id) != str(umbrella.id):
        return None

    return str(stored_method_id)
