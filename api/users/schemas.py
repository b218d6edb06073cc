"""
User response schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class PartialUser(BaseModel):
    """
    Public projection of a user. Email is never part of any response.
    """

    id: int
    username: str
