"""Stored payment method preference API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from adyen_checkout.core.database import get_db
from adyen_checkout.models.user_preference import UserPreference
from adyen_checkout.repositories.user_preference_repository import UserPreferenceRepository
from adyen_checkout.schemas.user_preference import UserPreferenceResponse, UserPreferenceUpdate

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=UserPreferenceResponse,
    summary="Get user preference",
    responses={404: {"description": "User preference not found"}},
)
async def get_user_preference(
    user_id: int,
    db: Session = Depends(get_db),
) -> UserPreference:
    preference = UserPreferenceRepository(db).get_by_user_id(user_id)
    if not preference:
        raise HTTPException(status_code=404, detail="User preference not found")
    return preference


@router.put(
    "/{user_id}",
    response_model=UserPreferenceResponse,
    summary="Set user preference",
)
async def set_user_preference(
    user_id: int,
    data: UserPreferenceUpdate,
    db: Session = Depends(get_db),
) -> UserPreference:
    """Remember the stored method the shopper paid with last."""
    return UserPreferenceRepository(db).upsert(user_id, data.stored_method_id)


@router.delete(
    "/{user_id}",
    status_code=204,
    summary="Delete user preference",
    responses={404: {"description": "User preference not found"}},
)
async def delete_user_preference(
    user_id: int,
    db: Session = Depends(get_db),
) -> None:
    if not UserPreferenceRepository(db).delete(user_id):
        raise HTTPException(status_code=404, detail="User preference not found")
