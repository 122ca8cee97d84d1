from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GreetingRecord(BaseModel):
    """Domain model for a persisted greeting"""
    id: int
    name: Optional[str] = None
    message: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HelloResult(BaseModel):
    """Fields returned by the say-hello use case"""
    id: int
    name: Optional[str] = None
    message: str
