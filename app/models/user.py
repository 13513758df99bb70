from typing import Optional
from datetime import datetime, timezone
from enum import Enum
from sqlmodel import Field, SQLModel

class Role(str, Enum):
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMIN = "Admin"

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    username: str = Field(unique=True, index=True)
    name: str
    surname: str
    password_hash: str
    role: Role = Field(default=Role.CUSTOMER)

    # Profile
    address: Optional[str] = None
    birthdate: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
