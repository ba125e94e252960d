"""Pydantic schemas for authentication endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["student", "teacher", "parent"]


class LoginRequest(BaseModel):
    registration_number: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: Role


class RegisterRequest(BaseModel):
    registration_number: str = Field(min_length=1)
    password: str = Field(min_length=8)
    role: Role
    display_name: str = Field(min_length=1)


class UserInfo(BaseModel):
    id: int
    role: Role
    registration_number: str
    display_name: str


class TokenResponse(BaseModel):
    token: str
    user: UserInfo
