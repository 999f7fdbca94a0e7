"""
Schemas shared by every resource router.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Body returned by endpoints that have nothing else to report (deletes)."""

    message: str = Field(..., example="Your profile was deleted successfully.")
