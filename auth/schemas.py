"""
Pydantic schemas for responses of the demo application.
"""

from typing import Dict

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str


class MessageOut(BaseModel):
    """Schema for public endpoints."""
    message: str


class PrivateOut(BaseModel):
    """Schema for protected endpoints: the item and every realm published for it."""
    item: str
    realms: Dict[str, str]
