"""Pydantic schemas for participants and meeting rosters."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approval.models.enums import ParticipantType, resolve_enum


class ParticipantBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    share: float = Field(default=0.0, ge=0, le=100, description="Ownership percentage.")
    type: ParticipantType
    is_active: bool = Field(default=True)

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> object:
        return resolve_enum(ParticipantType, value)


class ParticipantCreate(ParticipantBase):
    pass


class ParticipantUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    share: float | None = Field(default=None, ge=0, le=100)
    type: ParticipantType | None = None
    is_active: bool | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> object:
        return value if value is None else resolve_enum(ParticipantType, value)


class ParticipantRead(ParticipantBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    company_id: str


class MeetingParticipantCreate(BaseModel):
    participant_id: str = Field(..., max_length=36)
    is_present: bool = Field(default=False)


class MeetingParticipantPresenceUpdate(BaseModel):
    is_present: bool


class MeetingParticipantRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    meeting_id: str
    participant_id: str
    is_present: bool


__all__ = [
    "MeetingParticipantCreate",
    "MeetingParticipantPresenceUpdate",
    "MeetingParticipantRead",
    "ParticipantBase",
    "ParticipantCreate",
    "ParticipantRead",
    "ParticipantUpdate",
]
