from typing import Optional
from datetime import datetime, timezone
from enum import Enum
from sqlmodel import Field, SQLModel

class Category(str, Enum):
    SMARTPHONE = "Smartphone"
    LAPTOP = "Laptop"
    APPLIANCE = "Appliance"

class Product(SQLModel, table=True):
    # The model name identifies the product across the store
    model: str = Field(primary_key=True)
    category: Category

    # Pricing
    selling_price: float

    # Inventory
    quantity: int = Field(default=0, ge=0)

    # Metadata
    arrival_date: Optional[str] = None
    details: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
