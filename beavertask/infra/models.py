from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from .db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_task_id() -> str:
    return uuid4().hex


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, default=new_task_id)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    tag = Column(String(100), nullable=False, default="")
    due_date = Column(String(10), nullable=False, default="", index=True)
    start_time = Column(String(5), nullable=False, default="")
    end_time = Column(String(5), nullable=False, default="")
    all_day = Column(Boolean, nullable=False, default=False)
    location = Column(String(200), nullable=False, default="")
    reminder_minutes = Column(Integer, nullable=False, default=0)
    color = Column(String(20), nullable=False, default="")
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
