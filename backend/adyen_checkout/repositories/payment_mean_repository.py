"""Repository for PaymentMeanRecord CRUD operations."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from adyen_checkout.models.payment_mean import PaymentMeanRecord
from adyen_checkout.schemas.payment_mean import PaymentMeanCreate, PaymentMeanUpdate


class PaymentMeanRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, skip: int = 0, limit: int = 100) -> list[PaymentMeanRecord]:
        return (
            self.db.query(PaymentMeanRecord)
            .order_by(PaymentMeanRecord.position.asc(), PaymentMeanRecord.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_active(self) -> list[PaymentMeanRecord]:
        return (
            self.db.query(PaymentMeanRecord)
            .filter(PaymentMeanRecord.active == True)  # noqa: E712
            .order_by(PaymentMeanRecord.position.asc(), PaymentMeanRecord.id.asc())
            .all()
        )

    def get_by_id(self, payment_mean_id: int) -> PaymentMeanRecord | None:
        return self.db.query(PaymentMeanRecord).filter(PaymentMeanRecord.id == payment_mean_id).first()

    def get_by_name(self, name: str) -> PaymentMeanRecord | None:
        return self.db.query(PaymentMeanRecord).filter(PaymentMeanRecord.name == name).first()

    def exists_by_name(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def exists_duplicate(self, name: str, payment_mean_id: int) -> bool:
        """Whether a payment mean other than ``payment_mean_id`` already uses ``name``."""
        return (
            self.db.query(PaymentMeanRecord)
            .filter(
                PaymentMeanRecord.name == name,
                PaymentMeanRecord.id != payment_mean_id,
            )
            .first()
            is not None
        )

    def find_by_code(self, code: str) -> PaymentMeanRecord | None:
        """Find the payment mean whose ``attribute.adyen_type`` equals ``code``."""
        return (
            self.db.query(PaymentMeanRecord)
            .filter(PaymentMeanRecord.attribute["adyen_type"].as_string() == code)
            .order_by(PaymentMeanRecord.id.asc())
            .first()
        )

    def create(self, data: PaymentMeanCreate) -> PaymentMeanRecord:
        payment_mean = PaymentMeanRecord(
            name=data.name,
            description=data.description,
            additional_description=data.additional_description,
            position=data.position,
            active=data.active,
            hide=data.hide,
            source=data.source,
            attribute=data.attribute,
        )
        self.db.add(payment_mean)
        self.db.commit()
        self.db.refresh(payment_mean)
        return payment_mean

    def update(self, payment_mean_id: int, data: PaymentMeanUpdate) -> PaymentMeanRecord | None:
        payment_mean = self.get_by_id(payment_mean_id)
        if not payment_mean:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(payment_mean, key, value)
        self.db.commit()
        self.db.refresh(payment_mean)
        return payment_mean

    def delete(self, payment_mean_id: int) -> bool:
        payment_mean = self.get_by_id(payment_mean_id)
        if not payment_mean:
            return False
        self.db.delete(payment_mean)
        self.db.commit()
        return True

    def to_raw_rows(self, payment_means: list[PaymentMeanRecord]) -> list[dict[str, Any]]:
        """Flatten ORM rows into the raw payload shape the checkout pipeline consumes."""
        return [
            {
                "id": pm.id,
                "name": pm.name,
                "description": pm.description,
                "additionaldescription": pm.additional_description,
                "position": pm.position,
                "active": pm.active,
                "hide": pm.hide,
                "source": pm.source,
                "attribute": dict(pm.attribute or {}),
            }
            for pm in payment_means
        ]
