"""Routes reached by scanning a tag: the public pet page and activation."""

from typing import Protocol
from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pipo.core.authentication import get_optional_user
from pipo.core.errors import PipoError, SignInRequiredError, to_http_exception
from pipo.core.schemas import AuthenticatedUser
from pipo.core.settings import get_settings
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.pets.dtos import (
    ActivateTagRequest,
    PetProfileResponse,
    PetViewResponse,
)
from pipo.features.pets.usecases import ActivateTagUseCaseImpl, ViewPetUseCaseImpl

router = APIRouter()


class ViewPetUseCase(Protocol):
    """Protocol for the view pet use case."""

    async def execute(
        self, code: str, requester: AuthenticatedUser | None
    ) -> PetViewResponse:
        """Resolve what the visitor of a tag page should see."""
        ...


class ActivateTagUseCase(Protocol):
    """Protocol for the activate tag use case."""

    async def execute(
        self,
        code: str,
        request: ActivateTagRequest,
        user: AuthenticatedUser | None,
    ) -> PetProfileResponse:
        """Bind a tag to a new pet profile."""
        ...


async def get_view_pet_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ViewPetUseCase:
    """Dependency injection for the view pet use case."""
    return ViewPetUseCaseImpl(get_db_session=get_db_session)


async def get_activate_tag_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ActivateTagUseCase:
    """Dependency injection for the activate tag use case."""
    return ActivateTagUseCaseImpl(get_db_session=get_db_session)


def sign_in_path(next_path: str) -> str:
    settings = get_settings()
    return f"{settings.login_path}?next={quote(next_path)}"


@router.get("/pets/{code}", response_model=PetViewResponse)
async def view_pet(
    code: str,
    requester: AuthenticatedUser | None = Depends(get_optional_user),
    use_case: ViewPetUseCase = Depends(get_view_pet_use_case),
):
    """Public page of a tag.

    - Bound tag: the pet profile and contact details, plus ``is_owner``
    - Unbound tag, signed in: an activation hint
    - Unbound tag, anonymous: 401 with the sign-in path to come back to
    """
    try:
        return await use_case.execute(code, requester)
    except SignInRequiredError as e:
        location = sign_in_path(e.next_path)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": e.detail, "sign_in_path": location},
            headers={"Location": location},
        )
    except PipoError as e:
        raise to_http_exception(e) from e


@router.post(
    "/pets/{code}/activate",
    response_model=PetProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def activate_tag(
    code: str,
    request: ActivateTagRequest,
    user: AuthenticatedUser | None = Depends(get_optional_user),
    use_case: ActivateTagUseCase = Depends(get_activate_tag_use_case),
) -> PetProfileResponse:
    """Register a pet on an unbound tag.

    The signed-in account becomes the pet's owner. A tag can be activated
    once; later attempts get 409.
    """
    try:
        return await use_case.execute(code, request, user)
    except PipoError as e:
        raise to_http_exception(e) from e
