"""Pydantic schemas for the checkout payment selection."""

from typing import Any

from pydantic import BaseModel, Field


class CheckoutPaymentMean(BaseModel):
    id: int | str
    name: str | None = None
    description: str | None = None
    source: int | None = None
    enriched: bool = False
    adyen_type: str | None = None
    stored_method_id: str | None = None
    stored_method_umbrella_id: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)


class CheckoutPaymentMeansResponse(BaseModel):
    payment_means: list[CheckoutPaymentMean]
    view: dict[str, Any] = Field(default_factory=dict)


class DisableStoredMethodRequest(BaseModel):
    shopper_reference: str = Field(..., min_length=1, max_length=255)
    recurring_token: str = Field(..., min_length=1, max_length=255)


class DisableStoredMethodResponse(BaseModel):
    error: bool
    message: str = ""
