from pydantic import BaseModel


class Account(BaseModel):
    address: str
    hashed_password: str
