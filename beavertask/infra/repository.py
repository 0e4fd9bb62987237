from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from beavertask.domain.entities import TaskEntity

from .db import SessionLocal
from .models import TaskModel


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        due_date=model.due_date,
        description=model.description,
        tag=model.tag,
        location=model.location,
        all_day=model.all_day,
        start_time=model.start_time,
        end_time=model.end_time,
        reminder_minutes=model.reminder_minutes,
        color=model.color,
        completed=model.completed,
    )


class TaskRepository:
    def __init__(self, session_factory: sessionmaker = SessionLocal) -> None:
        self._session_factory = session_factory

    def ping(self) -> None:
        with self._session_factory() as session:
            session.execute(select(TaskModel.id).limit(1))

    def list_tasks(self) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.created_at.asc(), TaskModel.id.asc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def create_task(self, data: dict) -> TaskEntity:
        with self._session_factory() as session:
            task = TaskModel(**data)
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def update_task(self, task_id: str, data: dict) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return None

            for key, value in data.items():
                setattr(task, key, value)
            if task.all_day:
                task.start_time = ""
                task.end_time = ""
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def delete_task(self, task_id: str) -> bool:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return False
            session.delete(task)
            session.commit()
            return True
