"""Checkout payment selection API endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from adyen_checkout.core.database import get_db
from adyen_checkout.core.dependencies import get_enricher, get_payment_method_service
from adyen_checkout.schemas.checkout import (
    CheckoutPaymentMean,
    CheckoutPaymentMeansResponse,
    DisableStoredMethodRequest,
    DisableStoredMethodResponse,
)
from adyen_checkout.services.checkout_service import CheckoutService
from adyen_checkout.services.payment_means.enricher import PaymentMethodEnricher
from adyen_checkout.services.payment_means.options_builder import CheckoutContext
from adyen_checkout.services.payment_means.payment_mean import PaymentMean
from adyen_checkout.services.payment_means.provider import UmbrellaPaymentMeanNotFoundError
from adyen_checkout.services.payment_providers.adyen import AdyenPaymentMethodService

router = APIRouter()


def _to_checkout_payment_mean(payment_mean: PaymentMean) -> CheckoutPaymentMean:
    return CheckoutPaymentMean(
        id=payment_mean.id,
        name=payment_mean.name,
        description=payment_mean.get_value("description"),
        source=payment_mean.source.value,
        enriched=payment_mean.enriched,
        adyen_type=str(payment_mean.adyen_type) if payment_mean.adyen_type else None,
        stored_method_id=payment_mean.stored_method_id or None,
        stored_method_umbrella_id=payment_mean.stored_method_umbrella_id,
        raw=payment_mean.to_dict(),
    )


@router.get(
    "/payment_means",
    response_model=CheckoutPaymentMeansResponse,
    summary="List checkout payment means",
    responses={
        409: {"description": "Stored payment umbrella payment mean is not configured"},
        502: {"description": "Adyen payment methods could not be fetched"},
    },
)
async def list_checkout_payment_means(
    country_code: str = Query(default="", max_length=2),
    currency: str = Query(default="", max_length=3),
    value: Decimal = Query(default=Decimal("0"), ge=0),
    user_id: int | None = Query(default=None),
    stored_method_id: str | None = Query(default=None),
    payment_id: int | None = Query(
        default=None, description="Payment mean currently selected by the shopper"
    ),
    db: Session = Depends(get_db),
    payment_method_service: AdyenPaymentMethodService = Depends(get_payment_method_service),
    enricher: PaymentMethodEnricher = Depends(get_enricher),
) -> CheckoutPaymentMeansResponse:
    """Payment means for the cart, enriched with live Adyen methods."""
    context = CheckoutContext(
        country_code=country_code,
        currency=currency,
        value=value,
        user_id=user_id,
        stored_method_id=stored_method_id,
        payment_id=payment_id,
    )
    service = CheckoutService(db, payment_method_service, enricher)
    try:
        payment_means = service.get_payment_means(context)
    except UmbrellaPaymentMeanNotFoundError as e:
        raise HTTPException(status_code=409, detail=str(e)) from None
    except RuntimeError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None

    return CheckoutPaymentMeansResponse(
        payment_means=[_to_checkout_payment_mean(pm) for pm in payment_means],
        view=service.build_view(context, payment_means),
    )


@router.post(
    "/stored_methods/disable",
    response_model=DisableStoredMethodResponse,
    summary="Disable stored payment method",
)
async def disable_stored_method(
    data: DisableStoredMethodRequest,
    db: Session = Depends(get_db),
    payment_method_service: AdyenPaymentMethodService = Depends(get_payment_method_service),
) -> DisableStoredMethodResponse:
    """Disable a shopper's recurring token at Adyen."""
    service = CheckoutService(db, payment_method_service)
    try:
        service.disable_stored_method(data.recurring_token, data.shopper_reference)
    except RuntimeError as e:
        return DisableStoredMethodResponse(error=True, message=str(e))
    return DisableStoredMethodResponse(error=False)
