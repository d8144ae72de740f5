"""Pydantic schemas for company resources."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.models.enums import CompanyType, resolve_enum

INN_MIN = 1_000_000_000
INN_MAX = 9_999_999_999


class CompanyBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    inn: int = Field(..., ge=INN_MIN, le=INN_MAX, description="Ten digit taxpayer number.")
    company_type: CompanyType
    has_board_of_directors: bool = Field(default=False)

    @field_validator("company_type", mode="before")
    @classmethod
    def _resolve_company_type(cls, value: object) -> object:
        return resolve_enum(CompanyType, value)


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    inn: int | None = Field(default=None, ge=INN_MIN, le=INN_MAX)
    company_type: CompanyType | None = None
    has_board_of_directors: bool | None = None

    @field_validator("company_type", mode="before")
    @classmethod
    def _resolve_company_type(cls, value: object) -> object:
        return value if value is None else resolve_enum(CompanyType, value)


class CompanyRead(CompanyBase):
    model_config = ConfigDict(from_attributes=True)

    id: str


__all__ = ["CompanyBase", "CompanyCreate", "CompanyRead", "CompanyUpdate"]
