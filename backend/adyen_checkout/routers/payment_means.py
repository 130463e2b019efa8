"""Payment means API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from adyen_checkout.core.database import get_db
from adyen_checkout.core.dependencies import get_payment_method_service
from adyen_checkout.models.payment_mean import PaymentMeanRecord
from adyen_checkout.repositories.payment_mean_repository import PaymentMeanRepository
from adyen_checkout.schemas.payment_mean import (
    ImportRequest,
    ImportResultResponse,
    PaymentMeanCreate,
    PaymentMeanResponse,
    PaymentMeanUpdate,
)
from adyen_checkout.services.payment_mean_importer import PaymentMeanImporter
from adyen_checkout.services.payment_providers.adyen import AdyenPaymentMethodService

router = APIRouter()


@router.get(
    "/",
    response_model=list[PaymentMeanResponse],
    summary="List payment means",
)
async def list_payment_means(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[PaymentMeanRecord]:
    """List payment means in render order."""
    return PaymentMeanRepository(db).get_all(skip=skip, limit=limit)


@router.get(
    "/{payment_mean_id}",
    response_model=PaymentMeanResponse,
    summary="Get payment mean",
    responses={404: {"description": "Payment mean not found"}},
)
async def get_payment_mean(
    payment_mean_id: int,
    db: Session = Depends(get_db),
) -> PaymentMeanRecord:
    pm = PaymentMeanRepository(db).get_by_id(payment_mean_id)
    if not pm:
        raise HTTPException(status_code=404, detail="Payment mean not found")
    return pm


@router.post(
    "/",
    response_model=PaymentMeanResponse,
    status_code=201,
    summary="Create payment mean",
    responses={
        409: {"description": "Payment mean name already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_payment_mean(
    data: PaymentMeanCreate,
    db: Session = Depends(get_db),
) -> PaymentMeanRecord:
    repo = PaymentMeanRepository(db)
    if repo.exists_by_name(data.name):
        raise HTTPException(status_code=409, detail="Payment mean name already exists")
    return repo.create(data)


@router.patch(
    "/{payment_mean_id}",
    response_model=PaymentMeanResponse,
    summary="Update payment mean",
    responses={
        404: {"description": "Payment mean not found"},
        409: {"description": "Payment mean name already exists"},
    },
)
async def update_payment_mean(
    payment_mean_id: int,
    data: PaymentMeanUpdate,
    db: Session = Depends(get_db),
) -> PaymentMeanRecord:
    repo = PaymentMeanRepository(db)
    if data.name is not None and repo.exists_duplicate(data.name, payment_mean_id):
        raise HTTPException(status_code=409, detail="Payment mean name already exists")
    pm = repo.update(payment_mean_id, data)
    if not pm:
        raise HTTPException(status_code=404, detail="Payment mean not found")
    return pm


@router.delete(
    "/{payment_mean_id}",
    status_code=204,
    summary="Delete payment mean",
    responses={404: {"description": "Payment mean not found"}},
)
async def delete_payment_mean(
    payment_mean_id: int,
    db: Session = Depends(get_db),
) -> None:
    if not PaymentMeanRepository(db).delete(payment_mean_id):
        raise HTTPException(status_code=404, detail="Payment mean not found")


@router.post(
    "/import",
    response_model=list[ImportResultResponse],
    summary="Import Adyen payment methods",
    responses={502: {"description": "Adyen payment methods could not be fetched"}},
)
async def import_payment_means(
    data: ImportRequest,
    db: Session = Depends(get_db),
    payment_method_service: AdyenPaymentMethodService = Depends(get_payment_method_service),
) -> list[ImportResultResponse]:
    """Create or update a payment mean for every Adyen method offered for the given market."""
    try:
        payment_methods = payment_method_service.get_payment_methods(
            data.country_code, data.currency, data.value
        )
    except RuntimeError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None

    results = PaymentMeanImporter(db).import_all(payment_methods)
    return [
        ImportResultResponse(
            identifier=r.identifier,
            status=r.status.value,
            payment_mean_id=r.payment_mean_id,
            error=r.error,
        )
        for r in results
    ]
