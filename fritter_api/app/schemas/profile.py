"""
Pydantic schemas for profiles.

All body fields are optional here so that blank, overlong or unknown
values reach the validator chain, which answers with 400, 413 or 406
instead of a generic 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProfileBody(BaseModel):
    """Request body for creating or updating a profile.

    On update, ``type`` and ``bio`` may be omitted to keep their
    current values.
    """

    handle: Optional[str] = Field(None, example="alice_w")
    type: Optional[str] = Field(None, example="personal", description="business, personal or private")
    bio: Optional[str] = Field(None, example="hi")


class ProfileRead(BaseModel):
    id: str
    user: str
    handle: str
    type: str
    bio: Optional[str]
    date_created: str
    date_modified: str


class ProfileResponse(BaseModel):
    message: str
    profile: ProfileRead
