from taskboard.services.tasks import TaskService, serialize_task

__all__ = ["TaskService", "serialize_task"]
