from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from order_service.domain.models.order import OrderStatus


class OrderCreate(BaseModel):
    """Schema for placing orders; price and status are computed by the service"""
    user_id: int = Field(..., description="The ID of the ordering user")
    order_items: Dict[int, int] = Field(
        ...,
        min_length=1,
        description="Product id to requested quantity"
    )


class OrderResponse(BaseModel):
    """Schema for order responses"""
    id: int = Field(..., description="The unique identifier of the order")
    user_id: int = Field(..., description="The ID of the ordering user")
    order_items: Dict[int, int] = Field(..., description="Product id to requested quantity")
    total_price: float = Field(..., description="Sum of unit price times quantity")
    status: OrderStatus = Field(..., description="The status of the order")
    created_at: Optional[datetime] = Field(None, description="When the order was stored")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "user_id": 1,
                "order_items": {"1": 2},
                "total_price": 20.0,
                "status": "PLACED",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
    )
