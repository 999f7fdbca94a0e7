"""
Pydantic schemas for posts.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    content: Optional[str] = Field(None, example="Hello, Fritter!")


class PostRead(BaseModel):
    id: str
    author: str
    content: str
    date_created: str


class PostResponse(BaseModel):
    message: str
    post: PostRead
