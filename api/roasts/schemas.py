"""
Roast response schema.
"""

from __future__ import annotations

from pydantic import BaseModel


class Roast(BaseModel):
    id: int
    level: str
