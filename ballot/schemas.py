from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    address: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)


class AccountOut(BaseModel):
    address: str
    is_owner: bool


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
