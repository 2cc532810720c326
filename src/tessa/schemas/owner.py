"""
Owner Pydantic Schemas
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from schemas.validators import require_capital_letter


class CreateOwnerRequest(BaseModel):
    """Request schema for registering an owner."""

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def password_has_capital(cls, value: str) -> str:
        return require_capital_letter(value)


class OwnerResponse(BaseModel):
    """Response schema for an owner. Never carries a password."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
