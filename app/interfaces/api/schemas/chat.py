"""Schemas for the chat endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class MessageRead(BaseModel):
    id: int
    conversation_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None


class ConversationRead(BaseModel):
    id: int
    student_id: int
    last_message: str | None = None
    last_message_time: datetime | None = None
    admin_unread: int
    student_unread: int
