from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizmaster.api.routes.health import router as health_router
from quizmaster.api.routes.questions import router as questions_router
from quizmaster.api.routes.quizzes import router as quizzes_router
from quizmaster.core.config import get_settings
from quizmaster.core.logging import configure_logging
from quizmaster.core.migrations import apply_migrations
from quizmaster.db.session import dispose_engine
from quizmaster.quizzes.constants import ERROR_CODE_VALIDATION

logger = structlog.get_logger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = str(error.get("msg", "invalid value"))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request."


async def _request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": ERROR_CODE_VALIDATION, "message": _format_validation_errors(exc)},
    )


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.apply_migrations_on_startup and settings.app_env == "dev":
        await apply_migrations()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    docs_enabled = settings.enable_openapi_docs
    app = FastAPI(
        title="QuizMaster API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=_lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
    app.include_router(health_router)
    app.include_router(quizzes_router)
    app.include_router(questions_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "quizmaster.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
