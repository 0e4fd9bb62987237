from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from beavertask.domain.entities import TaskEntity, find_task
from beavertask.infra.api_client import RequestFailed

logger = logging.getLogger(__name__)

Snapshot = tuple[TaskEntity, ...]


@dataclass(frozen=True)
class MutationResult:
    written: bool
    snapshot: Optional[Snapshot] = None


class TaskCollection(Protocol):
    def list(self) -> Any: ...

    def create(self, fields: dict[str, Any]) -> Any: ...

    def update(self, task_id: str, fields: dict[str, Any]) -> Any: ...

    def delete(self, task_id: str) -> Any: ...


def _to_snapshot(data: Any) -> Snapshot:
    if not isinstance(data, list):
        return ()
    return tuple(TaskEntity.from_payload(item) for item in data if isinstance(item, dict))


class TaskStore:
    """In-memory mirror of the task collection.

    Every mutation is followed by a full refetch and the cached list is only
    ever replaced by what the collection returned. The ``run_*`` methods do
    the network round-trip without touching the cache so they can run off the
    UI thread; ``apply`` and ``apply_mutation`` install their result. A
    mutation whose write succeeded reports success even if the refetch after
    it failed.
    """

    def __init__(self, api: TaskCollection) -> None:
        self._api = api
        self._tasks: Snapshot = ()

    @property
    def tasks(self) -> Snapshot:
        return self._tasks

    def get(self, task_id: str) -> TaskEntity | None:
        return find_task(self._tasks, task_id)

    def apply(self, snapshot: Optional[Snapshot]) -> bool:
        if snapshot is None:
            return False
        self._tasks = snapshot
        return True

    def refresh(self) -> bool:
        return self.apply(self.run_refresh())

    def create(self, fields: dict[str, Any]) -> bool:
        return self.apply_mutation(self.run_create(fields))

    def update(self, task_id: str, fields: dict[str, Any]) -> bool:
        return self.apply_mutation(self.run_update(task_id, fields))

    def delete(self, task_id: str) -> bool:
        return self.apply_mutation(self.run_delete(task_id))

    def apply_mutation(self, result: MutationResult) -> bool:
        """Install the refetched list if there is one; report whether the write landed."""
        self.apply(result.snapshot)
        return result.written

    def toggle_completed(self, task_id: str) -> bool:
        fields = self.toggle_fields(task_id)
        if fields is None:
            return False
        return self.update(task_id, fields)

    def toggle_fields(self, task_id: str) -> dict[str, Any] | None:
        task = self.get(task_id)
        if task is None:
            logger.warning("Cannot toggle unknown task %s", task_id)
            return None
        return {"completed": not task.completed}

    def run_refresh(self) -> Optional[Snapshot]:
        try:
            return _to_snapshot(self._api.list())
        except (RequestFailed, ValueError) as exc:
            logger.error("Failed to refresh tasks: %s", exc)
            return None

    def run_create(self, fields: dict[str, Any]) -> MutationResult:
        return self._mutate("add", lambda: self._api.create(fields), require_body=True)

    def run_update(self, task_id: str, fields: dict[str, Any]) -> MutationResult:
        return self._mutate(
            "update",
            lambda: self._api.update(task_id, fields),
            require_body=True,
        )

    def run_delete(self, task_id: str) -> MutationResult:
        return self._mutate("delete", lambda: self._api.delete(task_id), require_body=False)

    def _mutate(
        self,
        action: str,
        call: Callable[[], Any],
        *,
        require_body: bool,
    ) -> MutationResult:
        try:
            echoed = call()
        except (RequestFailed, ValueError) as exc:
            logger.error("Failed to %s task: %s", action, exc)
            return MutationResult(written=False)
        if require_body and not echoed:
            logger.error("Failed to %s task: empty response", action)
            return MutationResult(written=False)
        # The write stands even when the refetch fails; the old list stays cached.
        return MutationResult(written=True, snapshot=self.run_refresh())
