"""Pydantic schemas for payment means."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PaymentMeanCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=255)
    additional_description: str = Field(default="", max_length=1024)
    position: int = Field(default=0, ge=0)
    active: bool = True
    hide: bool = False
    source: int | None = None
    attribute: dict[str, Any] = Field(default_factory=dict)


class PaymentMeanUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)
    additional_description: str | None = Field(default=None, max_length=1024)
    position: int | None = Field(default=None, ge=0)
    active: bool | None = None
    hide: bool | None = None
    source: int | None = None
    attribute: dict[str, Any] | None = None


class PaymentMeanResponse(BaseModel):
    id: int
    name: str
    description: str
    additional_description: str
    position: int
    active: bool
    hide: bool
    source: int | None
    attribute: dict[str, Any]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ImportResultResponse(BaseModel):
    identifier: str
    status: str
    payment_mean_id: int | None = None
    error: str | None = None


class ImportRequest(BaseModel):
    country_code: str = Field(..., min_length=2, max_length=2)
    currency: str = Field(..., min_length=3, max_length=3)
    value: float = Field(..., gt=0)
