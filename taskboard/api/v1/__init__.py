from fastapi import APIRouter

from taskboard.api.v1 import boards, tasks, users

router = APIRouter(prefix="/api")
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(boards.router, prefix="/boards", tags=["boards"])
router.include_router(users.router, prefix="/users", tags=["users"])

__all__ = ["router"]
