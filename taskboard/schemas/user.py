"""Schemas for users and authentication"""
from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=50, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=50, alias="lastName")

    class Config:
        populate_by_name = True


class UserLogin(BaseModel):
    username: str
    password: str


class UserSummary(BaseModel):
    id: str
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str

    class Config:
        from_attributes = True
        populate_by_name = True


class Token(BaseModel):
    access_token: str = Field(..., alias="accessToken")
    token_type: str = Field("bearer", alias="tokenType")
    username: str

    class Config:
        populate_by_name = True
