"""
User Pydantic Schemas
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from models.enums import UserRole
from schemas.validators import require_capital_letter


class CreateUserRequest(BaseModel):
    """Request schema for creating a user under an owner."""

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    owner_id: UUID = Field(validation_alias=AliasChoices("ownerId", "owner_id"))
    role: UserRole

    @field_validator("password")
    @classmethod
    def password_has_capital(cls, value: str) -> str:
        return require_capital_letter(value)


class UpdateUserRoleRequest(BaseModel):
    """Request schema for changing a user's role."""

    role: UserRole


class UserResponse(BaseModel):
    """Response schema for a user. Never carries a password."""

    id: str
    owner_id: str = Field(
        validation_alias=AliasChoices("owner_id", "ownerId"),
        serialization_alias="ownerId",
    )
    name: str
    email: str
    role: UserRole
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


UserListResponse = List[UserResponse]
