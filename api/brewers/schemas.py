from __future__ import annotations

from pydantic import BaseModel


class Brewer(BaseModel):
    id: int
    type: str
