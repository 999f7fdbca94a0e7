"""
Pydantic schemas for reactions.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ReactionBody(BaseModel):
    """Request body for creating or changing a reaction."""

    symbol: Optional[str] = Field(None, example="heart", description="heart, like or dislike")


class ReactionRead(BaseModel):
    id: str
    user: str
    post_id: str
    symbol: str
    date_created: str
    date_modified: str


class ReactionResponse(BaseModel):
    message: str
    reaction: ReactionRead
