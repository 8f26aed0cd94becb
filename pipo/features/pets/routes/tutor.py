"""Routes for tutors managing the pets they registered."""

from typing import Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile

from pipo.core.authentication import get_current_user
from pipo.core.errors import PipoError, to_http_exception
from pipo.core.schemas import AuthenticatedUser
from pipo.core.settings import get_settings
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.pets.dtos import (
    ListPetsResponse,
    PetProfileResponse,
    PhotoResponse,
    UpdatePetRequest,
)
from pipo.features.pets.patch import PetPatch
from pipo.features.pets.services.photo_storage import LocalPhotoStorage
from pipo.features.pets.usecases import (
    DeletePhotoUseCaseImpl,
    GetMyPetUseCaseImpl,
    ListMyPetsUseCaseImpl,
    UpdatePetUseCaseImpl,
    UploadPhotoUseCaseImpl,
)

router = APIRouter(prefix="/tutor/pets")


class ListMyPetsUseCase(Protocol):
    """Protocol for the list my pets use case."""

    async def execute(self, requester: AuthenticatedUser | None) -> ListPetsResponse:
        """List the requester's pets."""
        ...


class GetMyPetUseCase(Protocol):
    """Protocol for the get my pet use case."""

    async def execute(
        self, pet_id: UUID, requester: AuthenticatedUser | None
    ) -> PetProfileResponse:
        """Get one of the requester's pets."""
        ...


class UpdatePetUseCase(Protocol):
    """Protocol for the update pet use case."""

    async def execute(
        self, pet_id: UUID, patch: PetPatch, requester: AuthenticatedUser | None
    ) -> PetProfileResponse:
        """Apply a partial update to a pet."""
        ...


class UploadPhotoUseCase(Protocol):
    """Protocol for the upload photo use case."""

    async def execute(
        self,
        pet_id: UUID,
        content_type: str | None,
        content: bytes | None,
        requester: AuthenticatedUser | None,
    ) -> PhotoResponse:
        """Store a pet photo."""
        ...


class DeletePhotoUseCase(Protocol):
    """Protocol for the delete photo use case."""

    async def execute(
        self, pet_id: UUID, requester: AuthenticatedUser | None
    ) -> PhotoResponse:
        """Remove a pet photo."""
        ...


def get_photo_storage() -> LocalPhotoStorage:
    """Photo storage configured from settings."""
    settings = get_settings()
    return LocalPhotoStorage(settings.upload_dir, settings.upload_url_prefix)


async def get_list_my_pets_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ListMyPetsUseCase:
    """Dependency injection for the list my pets use case."""
    return ListMyPetsUseCaseImpl(get_db_session=get_db_session)


async def get_get_my_pet_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> GetMyPetUseCase:
    """Dependency injection for the get my pet use case."""
    return GetMyPetUseCaseImpl(get_db_session=get_db_session)


async def get_update_pet_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
    storage: LocalPhotoStorage = Depends(get_photo_storage),
) -> UpdatePetUseCase:
    """Dependency injection for the update pet use case."""
    return UpdatePetUseCaseImpl(get_db_session=get_db_session, storage=storage)


async def get_upload_photo_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
    storage: LocalPhotoStorage = Depends(get_photo_storage),
) -> UploadPhotoUseCase:
    """Dependency injection for the upload photo use case."""
    return UploadPhotoUseCaseImpl(
        get_db_session=get_db_session,
        storage=storage,
        max_bytes=get_settings().max_photo_bytes,
    )


async def get_delete_photo_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
    storage: LocalPhotoStorage = Depends(get_photo_storage),
) -> DeletePhotoUseCase:
    """Dependency injection for the delete photo use case."""
    return DeletePhotoUseCaseImpl(get_db_session=get_db_session, storage=storage)


@router.get("", response_model=ListPetsResponse)
async def list_my_pets(
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListMyPetsUseCase = Depends(get_list_my_pets_use_case),
) -> ListPetsResponse:
    """List the pets registered by the signed-in tutor, newest first."""
    try:
        return await use_case.execute(current_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.get("/{pet_id}", response_model=PetProfileResponse)
async def get_my_pet(
    pet_id: UUID,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetMyPetUseCase = Depends(get_get_my_pet_use_case),
) -> PetProfileResponse:
    """Get one of the signed-in tutor's pets."""
    try:
        return await use_case.execute(pet_id, current_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.patch("/{pet_id}", response_model=PetProfileResponse)
async def update_my_pet(
    pet_id: UUID,
    request: UpdatePetRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdatePetUseCase = Depends(get_update_pet_use_case),
) -> PetProfileResponse:
    """Partially update a pet profile.

    Fields left out of the body are unchanged; fields sent as null are
    cleared. Contact name, phone and channel cannot be cleared. Sending
    ``photo_url: null`` removes the photo; set a new one by uploading it.
    """
    try:
        return await use_case.execute(pet_id, PetPatch.from_model(request), current_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.post("/{pet_id}/photo", response_model=PhotoResponse)
async def upload_pet_photo(
    pet_id: UUID,
    photo: UploadFile = File(...),
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: UploadPhotoUseCase = Depends(get_upload_photo_use_case),
) -> PhotoResponse:
    """Upload a JPEG, PNG, WebP or GIF photo for a pet."""
    content = await photo.read()
    try:
        return await use_case.execute(
            pet_id, photo.content_type, content, current_user
        )
    except PipoError as e:
        raise to_http_exception(e) from e


@router.delete("/{pet_id}/photo", response_model=PhotoResponse)
async def delete_pet_photo(
    pet_id: UUID,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: DeletePhotoUseCase = Depends(get_delete_photo_use_case),
) -> PhotoResponse:
    """Remove a pet's photo."""
    try:
        return await use_case.execute(pet_id, current_user)
    except PipoError as e:
        raise to_http_exception(e) from e
