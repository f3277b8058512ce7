"""공용 테스트 픽스처 (SQLite 인메모리 DB + ASGI 클라이언트)"""
import os

# 앱 설정 로드 전에 테스트 환경변수 지정
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SESSION_EXPIRY_SWEEP_ENABLED"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.main import app
from app.models import Base
from app.models.base import get_db
from app.services import broadcaster


@pytest_asyncio.fixture
async def test_engine():
    """테스트마다 새 인메모리 DB (외래키 제약 활성화)"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db_session(test_session_maker):
    """테스트 데이터 준비/검증용 DB 세션"""
    async with test_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_session_maker):
    """get_db를 테스트 DB로 교체한 비동기 HTTP 클라이언트"""
    async def override_get_db():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def fresh_connection_manager(monkeypatch):
    """테스트 간 옵저버 집합 공유 방지"""
    manager = broadcaster.ConnectionManager()
    monkeypatch.setattr(broadcaster, "manager", manager)
    return manager


@pytest.fixture
def admin_headers():
    """관리자 Bearer 토큰 헤더"""
    token = create_access_token("admin-1")
    return {"Authorization": f"Bearer {token}"}
