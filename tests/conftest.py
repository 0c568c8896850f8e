import pytest
import httpx
from fastapi.testclient import TestClient

from compensacao.config import Settings
from compensacao.db import Database
from compensacao.dependencies import get_sisema_service
from compensacao.main import create_app
from compensacao.services import SisemaWfsService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite:///{tmp_path / 'compensacao.db'}",
        WFS_BASE_URL="http://geoserver.test/ows",
    )


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def wfs_requests():
    """Requisições recebidas pelo GeoServer simulado."""
    return []


@pytest.fixture
def wfs_handler():
    """Resposta padrão do GeoServer simulado; os testes podem substituir."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b'{"type":"FeatureCollection","features":[]}',
            headers={"content-type": "application/json;charset=UTF-8"},
        )
    return handler


@pytest.fixture
def mock_wfs(app, settings, wfs_requests, wfs_handler):
    def recording_handler(request: httpx.Request) -> httpx.Response:
        wfs_requests.append(request)
        return wfs_handler(request)

    transport = httpx.MockTransport(recording_handler)
    app.dependency_overrides[get_sisema_service] = lambda: SisemaWfsService(settings, transport=transport)
    yield transport
    app.dependency_overrides.pop(get_sisema_service, None)
