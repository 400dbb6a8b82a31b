"""
Views of entities owned by the product and user services.

Field names mirror the JSON those services return, so an instance can be
sent back unchanged in an update request.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductData(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    quantity: int


class UserData(BaseModel):
    id: int
    name: str
    role: str
    orders_list: List[int] = Field(default_factory=list)
