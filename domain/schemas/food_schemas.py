from pydantic import BaseModel, Field
from typing import Optional, List

from domain.schemas.common import Money, TimestampedResponse


class FoodCreate(BaseModel):
    """Schema for creating a food item"""

    name: str = Field(..., min_length=2, max_length=100)
    price: Money = Field(..., description="Rounded to 2 decimal places on write")
    food_image: str = Field(..., min_length=1, description="Image URL or storage key")
    menu_id: str = Field(..., min_length=1, description="Menu the food belongs to")


class FoodUpdate(BaseModel):
    """Partial update; every field is optional"""

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    price: Optional[Money] = None
    food_image: Optional[str] = Field(None, min_length=1)
    menu_id: Optional[str] = Field(None, min_length=1)


class FoodResponse(TimestampedResponse):
    food_id: str
    name: Optional[str] = None
    price: Optional[float] = None
    food_image: Optional[str] = None
    menu_id: Optional[str] = None


class FoodPage(BaseModel):
    """One page of food items plus the size of the whole collection"""

    total_count: int
    food_items: List[FoodResponse]
