from datetime import datetime

from pydantic import BaseModel, Field


class UserPreferenceUpdate(BaseModel):
    stored_method_id: str | None = Field(default=None, max_length=255)


class UserPreferenceResponse(BaseModel):
    id: int
    user_id: int
    stored_method_id: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
