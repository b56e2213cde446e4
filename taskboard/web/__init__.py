from fastapi import APIRouter

from taskboard.web import account, boards, tasks

router = APIRouter(include_in_schema=False)
router.include_router(account.router)
router.include_router(boards.router)
router.include_router(tasks.router)

__all__ = ["router"]
