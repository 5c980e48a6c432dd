"""
Shared fixtures.

Tests run against an in-memory SQLite database (aiosqlite) with the
same models the app uses; the external collaborators — wallet
validator, push sender, object store — are replaced with fakes that
record how they were called.
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from daiara.core.config import settings
from daiara.core.database import get_db
from daiara.main import create_app
from daiara.models import Base
from daiara.services import screen_service
from daiara.services.push_service import get_push_notifier
from daiara.services.storage_service import get_object_store
from daiara.services.wallet_validator import get_wallet_validator


class FakeValidator:
    def __init__(self, valid: bool = True):
        self.valid = valid
        self.calls: list[str] = []

    async def is_valid(self, wallet_address: str) -> bool:
        self.calls.append(wallet_address)
        return self.valid


class FakeNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[dict] = []

    async def send(self, token, title, body, data) -> None:
        self.sent.append({"token": token, "title": title, "body": body, "data": data})
        if self.fail:
            raise httpx.ConnectError("push service down")


class MemoryObjectStore:
    def __init__(self):
        self.objects: dict[str, bytes] = {}

    async def put(self, key: str, content: bytes) -> str:
        self.objects[key] = content
        return key


def tamper_signature(credential: str) -> str:
    """Flip the first character of the JWS signature segment."""
    header, payload, signature = credential.split(".")
    first = "B" if signature[0] == "A" else "A"
    return f"{header}.{payload}.{first}{signature[1:]}"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def screen(db):
    screen = await screen_service.register_screen(db, push_notification_token="ExponentPushToken[abc123]")
    await db.commit()
    return screen


@pytest.fixture
def validator():
    return FakeValidator()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def rejecting_validator():
    return FakeValidator(valid=False)


@pytest.fixture
def failing_notifier():
    return FakeNotifier(fail=True)


@pytest.fixture
def object_store():
    return MemoryObjectStore()


@pytest.fixture
def tamper():
    return tamper_signature


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {settings.SHARED_AUTH_TOKEN}"}


@pytest.fixture
async def client(session_factory, validator, notifier, object_store):
    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_wallet_validator] = lambda: validator
    app.dependency_overrides[get_push_notifier] = lambda: notifier
    app.dependency_overrides[get_object_store] = lambda: object_store

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
