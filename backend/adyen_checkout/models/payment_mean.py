"""PaymentMeanRecord model for the store's configured payment means."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, func

from adyen_checkout.core.database import Base


class PaymentMeanRecord(Base):
    """PaymentMeanRecord model - one row per native or Adyen-backed payment mean."""

    __tablename__ = "payment_means"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(String(255), nullable=False, default="")
    additional_description = Column(String(1024), nullable=False, default="")

    # Render order at checkout
    position = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    hide = Column(Boolean, nullable=False, default=False)

    # 0 for native means, SourceType.ADYEN for imported Adyen methods
    source = Column(Integer, nullable=True)

    # Free-form attributes (adyen_type holds the composite Adyen identifier)
    attribute = Column(JSON, nullable=False, default=dict)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
