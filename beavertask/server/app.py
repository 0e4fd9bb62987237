from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from beavertask.infra.api_client import API_ENDPOINT
from beavertask.infra.repository import TaskRepository
from beavertask.services.task_service import InvalidTaskPayload, TaskService

logger = logging.getLogger(__name__)


def create_app(repository: TaskRepository | None = None) -> Flask:
    app = Flask(__name__)
    repository = repository or TaskRepository()
    service = TaskService(repository)

    def _read_body():
        return request.get_json(silent=True)

    @app.get("/api/health")
    def health():
        try:
            repository.ping()
        except SQLAlchemyError as exc:
            logger.error("Health check failed: %s", exc)
            return jsonify({"status": "unhealthy", "database": "disconnected"}), 500
        return jsonify({"status": "healthy", "database": "connected"})

    @app.get(API_ENDPOINT)
    def list_tasks():
        return jsonify([task.to_payload() for task in service.list_tasks()])

    @app.post(API_ENDPOINT)
    def create_task():
        try:
            task = service.create_task(_read_body())
        except InvalidTaskPayload as exc:
            logger.warning("Rejected new task: %s", exc)
            return jsonify({"error": "Invalid request body"}), 400
        logger.info("Created task %s", task.id)
        return jsonify(task.to_payload()), 201

    @app.put(f"{API_ENDPOINT}/<path:task_id>")
    def update_task(task_id: str):
        try:
            task = service.update_task(task_id, _read_body())
        except InvalidTaskPayload as exc:
            logger.warning("Rejected update for task %s: %s", task_id, exc)
            return jsonify({"error": "Invalid request body"}), 400
        if task is None:
            logger.warning("Update for unknown task %s", task_id)
            return jsonify({"error": "Task not found"}), 404
        return jsonify(task.to_payload())

    @app.delete(f"{API_ENDPOINT}/<path:task_id>")
    def delete_task(task_id: str):
        if not service.delete_task(task_id):
            logger.warning("Delete for unknown task %s", task_id)
            return jsonify({"error": "Task not found"}), 404
        logger.info("Deleted task %s", task_id)
        return "", 204

    return app
