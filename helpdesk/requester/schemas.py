# helpdesk/requester/schemas.py
from pydantic import BaseModel, Field, field_validator

class RequesterIn(BaseModel):
    name: str = Field(..., min_length=1)
    email: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class RequesterOut(BaseModel):
    id: int
    name: str
    email: str | None = None

    model_config = {"from_attributes": True}
