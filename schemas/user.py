import re
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional


def _check_cpf(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if len(re.sub(r"\D", "", value)) != 11:
        raise ValueError("cpf must contain 11 digits")
    return value


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    cpf: str

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, value):
        return _check_cpf(value)


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    cpf: Optional[str] = None

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, value):
        return _check_cpf(value)


class User(BaseModel):
    id: int
    uid: str
    name: str
    email: str
    cpf: str


class UserList(BaseModel):
    users: List[User] = []
