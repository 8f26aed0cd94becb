import asyncio
import getpass
import uuid

from sqlalchemy import select

from pipo.core.authentication import get_password_hash
from pipo.core.schemas import UserRole
from pipo.db.session import close_db_session, create_all_tables, get_db_session
from pipo.features.auth.models import User


async def create_admin(email: str, password: str, name: str | None = None):
    """Creates an admin user."""
    if not email or not password:
        print("Email and password cannot be empty.")
        return

    await create_all_tables()

    try:
        async with get_db_session() as session:
            result = await session.execute(select(User).where(User.email == email))
            if result.scalar_one_or_none():
                print(f"User with email {email} already exists.")
                return

            admin = User(
                id=uuid.uuid4(),
                email=email,
                name=name,
                hashed_password=get_password_hash(password),
                role=UserRole.ADMIN,
                is_active=True,
            )
            session.add(admin)
            await session.commit()
            print(f"Admin {email} created successfully.")
    finally:
        await close_db_session()


def get_user_input():
    """Get email and password from user interactively."""
    email = input("Enter email for admin: ").strip()

    if not email:
        print("Email cannot be empty.")
        return None, None, None

    name = input("Enter display name (optional): ").strip() or None

    password = getpass.getpass("Enter password for admin: ")
    if not password:
        print("Password cannot be empty.")
        return None, None, None

    confirm_password = getpass.getpass("Confirm password: ")
    if password != confirm_password:
        print("Passwords do not match.")
        return None, None, None

    return email, password, name


if __name__ == "__main__":
    print("Create Admin User")
    print("=" * 17)

    email, password, name = get_user_input()
    if not email or not password:
        exit(1)

    asyncio.run(create_admin(email, password, name))
