"""Pydantic schemas for agenda topics."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TopicCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=1024)


class TopicUpdate(BaseModel):
    title: str = Field(..., min_length=1, max_length=1024)


class TopicRead(TopicCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    meeting_id: str


__all__ = ["TopicCreate", "TopicRead", "TopicUpdate"]
