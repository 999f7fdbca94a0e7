"""
Pydantic schemas for incognito sessions.
"""

from pydantic import BaseModel


class IncognitoRead(BaseModel):
    id: str
    user: str


class IncognitoResponse(BaseModel):
    message: str
    incognito: IncognitoRead
