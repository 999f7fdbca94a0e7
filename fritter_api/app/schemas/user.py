"""
Pydantic models for user accounts.

Usernames are validated here rather than in a validator chain because
registration is not an owner-scoped operation: a malformed username is
a plain 422 request error.
"""

import re

from pydantic import BaseModel, Field, field_validator

USERNAME_PATTERN = re.compile(r"^\w+$", re.ASCII)


class UserCreate(BaseModel):
    """Schema for registering a user or logging in."""

    username: str = Field(..., min_length=1, max_length=40, example="alice_w")
    password: str = Field(..., min_length=1, example="strongpassword")

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username must contain only letters, digits and underscores")
        return v


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
    date_joined: str


class UserResponse(BaseModel):
    message: str
    user: UserRead


class TokenResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserRead
