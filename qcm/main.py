import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse

from .core.config import Settings, settings as default_settings
from .core.cors import setup_cors
from .api.routers import qcm as qcm_router
from .domain.errors import BankError
from .domain.model import QuizBank
from .repositories.qcm_repository import QcmRepository
from .services.qcm_service import QcmService

logger = logging.getLogger(__name__)

STATIC_FILES = {"/": "index.html", "/style.css": "style.css", "/script.js": "script.js"}


def create_app(bank: Optional[QuizBank] = None, settings: Settings = default_settings) -> FastAPI:
    """
    Фабрика застосунку. Якщо банк не передано, він читається з QCM_FILE
    під час старту; LoadError/ParseError зупиняють запуск.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "qcm_service", None) is None:
            try:
                loaded = QcmRepository(settings.QCM_FILE).load()
            except BankError:
                logger.exception("Cannot load question bank from %s", settings.QCM_FILE)
                raise
            app.state.qcm_service = QcmService(loaded)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.qcm_service = QcmService(bank) if bank is not None else None
    setup_cors(app, settings)

    app.include_router(qcm_router.router, prefix=settings.API_PREFIX)

    @app.exception_handler(RequestValidationError)
    async def invalid_data(request: Request, exc: RequestValidationError):
        logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid data"})

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    static_dir = Path(settings.STATIC_DIR)

    def static_file(name: str) -> FileResponse:
        path = static_dir / name
        if not path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        return FileResponse(path)

    def static_endpoint(name: str):
        async def serve():
            return static_file(name)
        return serve

    for route, name in STATIC_FILES.items():
        app.add_api_route(route, static_endpoint(name), methods=["GET"], include_in_schema=False)

    return app


app = create_app()
