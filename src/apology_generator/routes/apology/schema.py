from __future__ import annotations

from pydantic import BaseModel


class GenerateApologyRequest(BaseModel):
    description: str


class GenerateApologyResponse(BaseModel):
    apology: str
