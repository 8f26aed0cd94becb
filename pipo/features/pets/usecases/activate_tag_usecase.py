"""Use case for activating a tag: binding it to a newly registered pet."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pipo.core.errors import (
    AlreadyActivatedError,
    StorageError,
    TagNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory, utcnow
from pipo.features.pets.dtos import ActivateTagRequest, PetProfileResponse
from pipo.features.pets.models import PetProfile
from pipo.features.pets.usecases.pet_mappers import to_pet_profile
from pipo.features.tags.models import PetTag, PetTagStatus

logger = logging.getLogger(__name__)


def _required(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class ActivateTagUseCaseImpl:
    """Implementation of the activate tag use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(
        self,
        code: str,
        request: ActivateTagRequest,
        user: AuthenticatedUser | None,
    ) -> PetProfileResponse:
        """Bind the tag ``code`` to a new pet owned by ``user``.

        The status flip is a conditional UPDATE on ``status = UNBOUND`` and the
        pet insert is guarded by the UNIQUE ``tag_id``, both in one transaction,
        so of two racing activations exactly one commits.

        Args:
            code: The scanned tag code
            request: Contact details and optional pet details
            user: The signed-in account that will own the pet

        Returns:
            The created pet profile

        Raises:
            UnauthenticatedError: If nobody is signed in
            ValidationError: If contact name or phone is missing or blank
            TagNotFoundError: If no tag has this code
            AlreadyActivatedError: If the tag is already bound (terminal)
            StorageError: If the database call fails
        """
        if user is None:
            raise UnauthenticatedError("Sign in to register this pet tag")

        contact_name = _required(request.contact_name)
        phone = _required(request.phone)
        if contact_name is None or phone is None:
            raise ValidationError("Contact name and phone are required")

        async with self.get_db_session() as session:
            try:
                result = await session.execute(
                    update(PetTag)
                    .where(PetTag.code == code, PetTag.status == PetTagStatus.UNBOUND)
                    .values(status=PetTagStatus.BOUND, bound_at=utcnow())
                    .returning(PetTag.id)
                    .execution_options(synchronize_session=False)
                )
                tag_id = result.scalar_one_or_none()

                if tag_id is None:
                    await session.rollback()
                    existing = await session.execute(
                        select(PetTag.id).where(PetTag.code == code)
                    )
                    if existing.scalar_one_or_none() is None:
                        raise TagNotFoundError()
                    raise AlreadyActivatedError(code)

                pet = PetProfile(
                    owner_id=user.user_id,
                    tag_id=tag_id,
                    contact_name=contact_name,
                    phone=phone,
                    contact_channel=request.contact_channel,
                    secondary_phone=request.secondary_phone or None,
                    name=request.name or None,
                    species=request.species or None,
                    breed=request.breed or None,
                    birth_date=request.birth_date,
                    sex=request.sex or None,
                    notes=request.notes or None,
                )
                session.add(pet)
                await session.commit()

            except (TagNotFoundError, AlreadyActivatedError):
                raise
            except IntegrityError as e:
                await session.rollback()
                raise AlreadyActivatedError(code) from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to activate tag %s", code)
                raise StorageError("Failed to activate pet tag") from e

        logger.info("Tag %s activated by user %s", code, user.user_id)
        return to_pet_profile(pet, code)
