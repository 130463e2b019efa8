"""UserPreference model for a shopper's preferred stored Adyen method."""

from sqlalchemy import Column, DateTime, Integer, String, func

from adyen_checkout.core.database import Base


class UserPreference(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)
    stored_method_id = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> dict[str, object]:
        return {"userId": self.user_id, "storedMethodId": self.stored_method_id}
