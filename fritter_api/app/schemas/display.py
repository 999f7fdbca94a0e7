"""
Pydantic schemas for display preferences.

``display_type`` is optional at the schema level; the validator chain
decides whether a missing or unknown value is acceptable and answers
406 otherwise.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DisplayBody(BaseModel):
    """Request body for creating or updating a display preference."""

    display_type: Optional[str] = Field(None, example="dark", description="default, dark or accessible")


class DisplayRead(BaseModel):
    id: str
    author: str
    display_type: str
    date_modified: str


class DisplayResponse(BaseModel):
    message: str
    display: DisplayRead
