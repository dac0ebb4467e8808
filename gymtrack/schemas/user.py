"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)


# Request schemas
class UserCreate(UserBase):
    """Schema for the administrative seed process."""
    access_code: str = Field(..., min_length=4, max_length=64, description="Shared access code")


class UserLogin(BaseModel):
    """Schema for access-code login."""
    access_code: str = Field(..., min_length=1)


# Identity
class UserProfile(UserBase):
    """Identity returned by a successful access-code lookup."""
    id: str
    access_code: str


# Response schemas
class UserResponse(UserBase):
    """Schema for user data in API responses (no access code)."""
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects


# Token schemas
class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"

