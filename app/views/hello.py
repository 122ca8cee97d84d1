"""Pydantic schemas for greeting responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class HelloResponse(BaseModel):
    id: int
    name: Optional[str] = None
    message: str

    model_config = ConfigDict(from_attributes=True)
