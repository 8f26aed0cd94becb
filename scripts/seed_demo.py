"""Seed a local database with demo accounts, five tags and one registered pet."""

import asyncio
import logging

from sqlalchemy import func, select

from pipo.core.authentication import get_password_hash
from pipo.core.logging_config import configure_logging
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.core.settings import get_settings
from pipo.db.session import close_db_session, create_all_tables, get_db_session
from pipo.features.auth.models import User
from pipo.features.pets.dtos import ActivateTagRequest
from pipo.features.pets.models import ContactChannel
from pipo.features.pets.usecases import ActivateTagUseCaseImpl
from pipo.features.tags.models import PetTag
from pipo.features.tags.usecases import GenerateTagsUseCaseImpl

logger = logging.getLogger("seed_demo")

ADMIN_EMAIL = "admin@pipo.com"
TUTOR_EMAIL = "tutor@example.com"
DEMO_TAGS = 5


async def ensure_user(email: str, password: str, name: str, role: UserRole) -> User:
    async with get_db_session() as session:
        result = await session.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            user = User(
                email=email,
                name=name,
                hashed_password=get_password_hash(password),
                role=role,
            )
            session.add(user)
            await session.commit()
            logger.info("Created %s %s", role.value, email)
        return user


async def seed() -> None:
    await create_all_tables()

    admin = await ensure_user(ADMIN_EMAIL, "admin123", "PIPO Admin", UserRole.ADMIN)
    tutor = await ensure_user(TUTOR_EMAIL, "tutor123", "Sample Tutor", UserRole.TUTOR)

    async with get_db_session() as session:
        existing = (await session.execute(select(func.count(PetTag.id)))).scalar_one()

    if existing == 0:
        await GenerateTagsUseCaseImpl(get_db_session).execute(
            DEMO_TAGS, AuthenticatedUser(user_id=admin.id, role=admin.role)
        )
        await ActivateTagUseCaseImpl(get_db_session).execute(
            "00001",
            ActivateTagRequest(
                contact_name="Sample Tutor",
                phone="+5511999999999",
                contact_channel=ContactChannel.MESSAGE,
                name="Pipoca",
                species="Dog",
                breed="Mixed",
                sex="Male",
                notes="Friendly and playful",
            ),
            AuthenticatedUser(user_id=tutor.id, role=tutor.role),
        )
    else:
        logger.info("Tags already present, skipping tag seeding")

    base_url = get_settings().public_base_url.rstrip("/")
    print("Test credentials:")
    print(f"  Admin: {ADMIN_EMAIL} / admin123")
    print(f"  Tutor: {TUTOR_EMAIL} / tutor123")
    print("Sample tag URLs:")
    print(f"  {base_url}/pet/00001 (registered)")
    print(f"  {base_url}/pet/00002 (needs activation)")


async def main() -> None:
    configure_logging()
    try:
        await seed()
    finally:
        await close_db_session()


if __name__ == "__main__":
    asyncio.run(main())
