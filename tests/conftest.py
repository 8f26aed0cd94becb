"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- A throwaway SQLite database per test (file based, so sessions can race)
- SQLAlchemy engine and session management
- Accounts, tags and pets to act on
- An HTTP client wired to the test database
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pipo.core.authentication import create_access_token, pwd_context
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import Base, SessionFactory, get_session_factory
from pipo.features.auth import models as _auth_models  # noqa: F401
from pipo.features.auth.models import User
from pipo.features.auth.usecases.setup.setup_admin_usecase import PasswordHasher
from pipo.features.pets.dtos import ActivateTagRequest, PetProfileResponse
from pipo.features.pets.routes.tutor import get_photo_storage
from pipo.features.pets.services.photo_storage import LocalPhotoStorage
from pipo.features.pets.usecases import ActivateTagUseCaseImpl
from pipo.features.tags.models import PetTag
from pipo.main import create_app


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine on a fresh SQLite file with every table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pipo.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for each test.

    The session does not auto-commit, allowing use cases to manage their
    own transactions. Uncommitted changes are rolled back afterwards.
    """
    async with AsyncSession(async_engine, expire_on_commit=False) as session:
        yield session
        await session.rollback()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> SessionFactory:
    """A factory opening a new session per call, like the application uses."""
    return async_sessionmaker(async_engine, expire_on_commit=False)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """Provide password hasher instance for tests."""
    return pwd_context


@pytest.fixture
def create_user(
    session_factory: SessionFactory,
) -> Callable[..., Awaitable[AuthenticatedUser]]:
    """Insert an account and return it as the authenticated requester."""

    async def _create(
        email: str,
        role: UserRole = UserRole.TUTOR,
        password: str = "password123",
        name: str | None = None,
    ) -> AuthenticatedUser:
        async with session_factory() as session:
            user = User(
                email=email,
                name=name,
                hashed_password=pwd_context.hash(password),
                role=role,
            )
            session.add(user)
            await session.commit()
            return AuthenticatedUser(user_id=user.id, role=user.role)

    return _create


@pytest_asyncio.fixture
async def admin(create_user) -> AuthenticatedUser:
    return await create_user("admin@pipo.com", role=UserRole.ADMIN)


@pytest_asyncio.fixture
async def tutor(create_user) -> AuthenticatedUser:
    return await create_user("tutor@example.com")


@pytest_asyncio.fixture
async def other_tutor(create_user) -> AuthenticatedUser:
    return await create_user("someone.else@example.com")


@pytest.fixture
def create_tags(session_factory: SessionFactory) -> Callable[..., Awaitable[list[PetTag]]]:
    """Insert unbound tags with the given codes."""

    async def _create(*codes: str) -> list[PetTag]:
        async with session_factory() as session:
            tags = [PetTag(code=code) for code in codes]
            session.add_all(tags)
            await session.commit()
            return tags

    return _create


@pytest.fixture
def register_pet(
    session_factory: SessionFactory,
) -> Callable[..., Awaitable[PetProfileResponse]]:
    """Activate ``code`` for ``owner`` through the real use case."""

    async def _register(
        code: str, owner: AuthenticatedUser, **fields
    ) -> PetProfileResponse:
        fields.setdefault("contact_name", "Ana Souza")
        fields.setdefault("phone", "+5511999999999")
        use_case = ActivateTagUseCaseImpl(get_db_session=session_factory)
        return await use_case.execute(code, ActivateTagRequest(**fields), owner)

    return _register


@pytest.fixture
def app(session_factory: SessionFactory, tmp_path: Path):
    """The application pointed at the test database and a temporary upload dir."""
    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: session_factory
    application.dependency_overrides[get_photo_storage] = lambda: LocalPhotoStorage(
        tmp_path / "uploads", "/uploads/pets"
    )
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def sign_in() -> Callable[[httpx.AsyncClient, AuthenticatedUser | None], None]:
    """Make a client act as a user; None signs out."""

    def _sign_in(client: httpx.AsyncClient, user: AuthenticatedUser | None) -> None:
        client.cookies.clear()
        if user is not None:
            token = create_access_token(
                {"sub": str(user.user_id), "role": user.role.value}
            )
            client.cookies.set("access_token", token)

    return _sign_in
