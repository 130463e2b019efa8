"""Repository for UserPreference operations."""

from __future__ import annotations

from sqlalchemy.orm import Session

from adyen_checkout.models.user_preference import UserPreference


class UserPreferenceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_user_id(self, user_id: int) -> UserPreference | None:
        return self.db.query(UserPreference).filter(UserPreference.user_id == user_id).first()

    def upsert(self, user_id: int, stored_method_id: str | None) -> UserPreference:
        preference = self.get_by_user_id(user_id)
        if preference is None:
            preference = UserPreference(user_id=user_id)
            self.db.add(preference)
        preference.stored_method_id = stored_method_id  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(preference)
        return preference

    def clear_stored_method(self, stored_method_id: str) -> int:
        count = (
            self.db.query(UserPreference)
            .filter(UserPreference.stored_method_id == stored_method_id)
            .update({"stored_method_id": None})
        )
        self.db.commit()
        return count

    def delete(self, user_id: int) -> bool:
        preference = self.get_by_user_id(user_id)
        if not preference:
            return False
        self.db.delete(preference)
        self.db.commit()
        return True
