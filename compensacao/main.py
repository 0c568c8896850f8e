from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

import anyio
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .db import Database
from .exceptions import RegistroNaoEncontrado, StoreError, UpstreamError
from .routers import normas_router, tipos_router, modalidades_router, sisema_router, paginas_router
from .services import SisemaWfsService
from .version import read_version

logger = logging.getLogger("uvicorn")

APP_VERSION = read_version()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Monta a aplicação.

    Args:
        settings: configuração; lida do ambiente/.env quando omitida
        database: handle do banco; criado a partir de ``settings.database_url`` quando omitido.
            É liberado (``dispose``) no encerramento da aplicação.
    """
    settings = settings or get_settings()
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Compensação API starting - version=%s environment=%s", APP_VERSION, settings.environment)
        logger.info("📊 Database URL: %s", database.masked_url)
        logger.info("🗺️ WFS SISEMA: %s", settings.wfs_base_url)
        try:
            yield
        finally:
            database.dispose()
            logger.info("Database connections released")

    app = FastAPI(
        title="Compensação Ambiental API",
        description="API pública de normas, tipos e modalidades de compensação ambiental",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    static_dir = Path(__file__).resolve().parent / "static"
    static_dir.mkdir(exist_ok=True)
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # Configurar CORS: uma origem por ambiente; em desenvolvimento sem origem definida, libera todas
    origins = [settings.client_url] if settings.client_url else (["*"] if not settings.is_production else [])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Incluir routers
    app.include_router(normas_router)
    app.include_router(tipos_router)
    app.include_router(modalidades_router)
    app.include_router(sisema_router)
    app.include_router(paginas_router)

    @app.get("/health")
    async def health() -> dict:
        """Basic health check endpoint with status summary."""
        db_ok = await anyio.to_thread.run_sync(database.check_connection)
        wfs_ok = await SisemaWfsService(settings).check_ready()
        status_ = "ok" if (db_ok and wfs_ok) else ("degraded" if (db_ok or wfs_ok) else "down")
        return {
            "status": status_,
            "version": APP_VERSION,
            "db_ok": db_ok,
            "wfs_ok": wfs_ok,
            "time": datetime.now().isoformat(),
        }

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreError)
    async def _store_error(request: Request, exc: StoreError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Parâmetros malformados seguem o mesmo envelope de erro das falhas do banco
        mensagens = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in exc.errors()
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": mensagens})

    @app.exception_handler(RegistroNaoEncontrado)
    async def _not_found(request: Request, exc: RegistroNaoEncontrado) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})

    @app.exception_handler(UpstreamError)
    async def _upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


app = create_app()
