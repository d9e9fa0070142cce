from typing import List, Tuple

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import (
    INotificationService,
    NotificationDispatcher,
)
from src.depends import get_notification_dispatcher, get_unit_of_work


class RecordingNotificationService(INotificationService):
    """Keeps sent notifications in memory instead of emailing them"""

    def __init__(self):
        self.sent: List[Tuple] = []

    async def send_welcome_email(self, email, first_name, verification_token):
        self.sent.append(("welcome", email, verification_token))

    async def send_verification_success_email(self, email, first_name):
        self.sent.append(("verified", email, None))

    async def send_password_reset_email(self, email, first_name, reset_token):
        self.sent.append(("reset", email, reset_token))

    def tokens(self, kind: str, email: str) -> List[str]:
        return [token for k, e, token in self.sent if k == kind and e == email]


@pytest_asyncio.fixture
async def engine():
    # writers in separate sessions queue on the file lock instead of failing
    engine = create_async_engine(
        "sqlite+aiosqlite:///./test.db", connect_args={"timeout": 30}
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotificationService()


@pytest_asyncio.fixture
def dispatcher(notifier):
    return NotificationDispatcher(notifier)


@pytest_asyncio.fixture
async def client(db_session, dispatcher):
    from config import ApplicationConfig
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await dispatcher.drain()
