from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from taskboard.api.v1 import router as api_router
from taskboard.config import settings
from taskboard.database import init_db
from taskboard.exceptions import NotAuthenticatedException
from taskboard.logging_setup import setup_logging
from taskboard.web import router as web_router


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/") or request.url.path == "/api"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def not_authenticated_handler(request: Request, exc: NotAuthenticatedException):
    if _is_api_request(request):
        return await http_exception_handler(request, exc)
    return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotAuthenticatedException, not_authenticated_handler)

    app.include_router(api_router)
    app.include_router(web_router)

    @app.get("/", include_in_schema=False)
    def index():
        return RedirectResponse("/boards", status_code=status.HTTP_303_SEE_OTHER)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("taskboard.main:app", host=settings.HOST, port=settings.PORT)
