"""Database connection and session management for SQLAlchemy."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, text, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
import logging

logger = logging.getLogger("uvicorn")

# Base class for all models
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite só aplica as FKs (modalidades.tipo_id) com o pragma ligado por conexão
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle explícito do banco de dados: engine com pool de conexões e fábrica de sessões.

    Criado uma única vez na inicialização da aplicação (ver ``create_app``) e
    liberado no encerramento com ``dispose()``.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_options: Any):
        self.url = url
        self.is_sqlite = make_url(url).get_backend_name() == "sqlite"

        options: Dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if self.is_sqlite:
            options["connect_args"] = {"check_same_thread": False}
        else:
            options.update(
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,  # Recycle connections after 30 minutes
            )
        options.update(engine_options)

        logger.info("Connecting to database: %s", self.masked_url)
        self.engine = create_engine(url, **options)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def masked_url(self) -> str:
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except Exception:
            return "(URL format not recognized)"

    def create_all(self) -> None:
        """Cria as tabelas declaradas que ainda não existem (não é migração)."""
        # Garante que todos os modelos estejam registrados no metadata
        from compensacao import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def check_connection(self) -> bool:
        """Verifica a conexão com o banco de dados e lista as tabelas existentes."""
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text("SELECT 1 AS test")).fetchone()
                tables = inspect(conn).get_table_names()
            logger.info("Database connection test successful; tables: %s", tables)
            return row is not None and row[0] == 1
        except Exception as e:
            logger.error(f"Database connection error: {str(e)}")
            return False

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency for FastAPI routes that need database access.

    Usage:
        @router.get("/tipos")
        async def list_tipos(db: Session = Depends(get_db)):
            return TiposRepository(db).list()
    """
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
