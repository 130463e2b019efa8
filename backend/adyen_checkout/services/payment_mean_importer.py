"""Imports Adyen payment methods as store payment means."""

import logging
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Session

from adyen_checkout.repositories.payment_mean_repository import PaymentMeanRepository
from adyen_checkout.schemas.payment_mean import PaymentMeanCreate, PaymentMeanUpdate
from adyen_checkout.services.payment_means.payment_mean import ADYEN_CODE, SourceType
from adyen_checkout.services.payment_means.payment_method import (
    PaymentMethod,
    PaymentMethodCollection,
)

logger = logging.getLogger(__name__)


class ImportStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass
class ImportResult:
    """Result of importing one Adyen payment method."""

    identifier: str
    status: ImportStatus
    payment_mean_id: int | None = None
    error: str | None = None


class PaymentMeanImporter:
    """Creates or updates the payment mean backing each Adyen payment method.

    Payment means are matched on their recorded Adyen identifier. A name that
    is already taken by another payment mean is reported as a failed import.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = PaymentMeanRepository(db)

    def import_all(self, payment_methods: PaymentMethodCollection) -> list[ImportResult]:
        results = [self.import_method(pm) for pm in payment_methods.filter_regular()]
        logger.info(
            "Imported %d Adyen payment methods (%d failed)",
            len(results),
            sum(1 for r in results if r.status == ImportStatus.FAILED),
        )
        return results

    def import_method(self, payment_method: PaymentMethod) -> ImportResult:
        identifier = payment_method.identifier
        attribute = {ADYEN_CODE: identifier}
        description = payment_method.name or identifier
        existing = self.repo.find_by_code(identifier)

        if existing is None:
            if self.repo.exists_by_name(identifier):
                return self._failed(identifier, f"Payment mean with name {identifier} already exists")
            created = self.repo.create(
                PaymentMeanCreate(
                    name=identifier,
                    description=description,
                    source=SourceType.ADYEN.value,
                    attribute=attribute,
                )
            )
            return ImportResult(
                identifier=identifier,
                status=ImportStatus.CREATED,
                payment_mean_id=created.id,  # type: ignore[arg-type]
            )

        existing_id: int = existing.id  # type: ignore[assignment]
        self.repo.update(
            existing_id,
            PaymentMeanUpdate(
                description=description,
                source=SourceType.ADYEN.value,
                attribute={**(existing.attribute or {}), **attribute},
            ),
        )
        return ImportResult(
            identifier=identifier, status=ImportStatus.UPDATED, payment_mean_id=existing_id
        )

    def _failed(self, identifier: str, error: str) -> ImportResult:
        logger.warning("Could not import Adyen payment method %s: %s", identifier, error)
        return ImportResult(identifier=identifier, status=ImportStatus.FAILED, error=error)
