"""Pydantic schemas for meeting resources."""
from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.models.enums import MeetingType, resolve_enum


class MeetingBase(BaseModel):
    type: MeetingType
    date: datetime.date
    address: str = Field(..., min_length=1, max_length=512)
    chairman_id: str | None = Field(default=None, max_length=36)
    secretary_id: str | None = Field(default=None, max_length=36)

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> object:
        return resolve_enum(MeetingType, value)


class MeetingCreate(MeetingBase):
    pass


class MeetingUpdate(BaseModel):
    type: MeetingType | None = None
    date: datetime.date | None = None
    address: str | None = Field(default=None, min_length=1, max_length=512)
    chairman_id: str | None = Field(default=None, max_length=36)
    secretary_id: str | None = Field(default=None, max_length=36)

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> object:
        return value if value is None else resolve_enum(MeetingType, value)


class MeetingRead(MeetingBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    company_id: str


__all__ = ["MeetingBase", "MeetingCreate", "MeetingRead", "MeetingUpdate"]
