# helpdesk/user/schemas.py
from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str | None = None
    admin: bool = False

class UserOut(BaseModel):
    id: int
    name: str
    email: str | None = None
    admin: bool

    model_config = {"from_attributes": True}
