from typing import List

from pydantic import BaseModel, ConfigDict, Field

from user_service.domain.models.user import Role


class UserBase(BaseModel):
    """Base Pydantic schema for users"""
    name: str = Field(..., description="Display name of the user; must not be blank")
    role: Role = Field(Role.CUSTOMER, description="Role of the user")


class UserCreate(UserBase):
    """Schema for creating users"""


class UserUpdate(UserBase):
    """Schema for replacing name and role; the order list is not touched"""


class UserResponse(UserBase):
    """Schema for user responses"""
    id: int = Field(..., description="The unique identifier of the user")
    orders_list: List[int] = Field(default_factory=list, description="Ids of the user's orders")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Test User",
                "role": "CUSTOMER",
                "orders_list": [3, 7]
            }
        }
    )
