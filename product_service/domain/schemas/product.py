from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    """Base Pydantic schema for products"""
    name: str = Field(..., description="Display name of the product")
    description: Optional[str] = Field(None, description="Free text description")
    category: Optional[str] = Field(None, description="Category used for filtering")
    price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., description="Units in stock; must not be negative")


class ProductCreate(ProductBase):
    """Schema for creating products"""


class ProductUpdate(ProductBase):
    """Schema for replacing the mutable fields of a product"""


class ProductResponse(ProductBase):
    """Schema for product responses"""
    id: int = Field(..., description="The unique identifier of the product")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Phone",
                "description": "Six inch screen",
                "category": "Electronics",
                "price": 155.0,
                "quantity": 3
            }
        }
    )
