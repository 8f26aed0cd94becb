"""Pet profile use cases."""

from pipo.features.pets.usecases.activate_tag_usecase import ActivateTagUseCaseImpl
from pipo.features.pets.usecases.delete_photo_usecase import DeletePhotoUseCaseImpl
from pipo.features.pets.usecases.get_my_pet_usecase import GetMyPetUseCaseImpl
from pipo.features.pets.usecases.list_my_pets_usecase import ListMyPetsUseCaseImpl
from pipo.features.pets.usecases.update_pet_usecase import UpdatePetUseCaseImpl
from pipo.features.pets.usecases.upload_photo_usecase import UploadPhotoUseCaseImpl
from pipo.features.pets.usecases.view_pet_usecase import ViewPetUseCaseImpl

__all__ = [
    "ActivateTagUseCaseImpl",
    "DeletePhotoUseCaseImpl",
    "GetMyPetUseCaseImpl",
    "ListMyPetsUseCaseImpl",
    "UpdatePetUseCaseImpl",
    "UploadPhotoUseCaseImpl",
    "ViewPetUseCaseImpl",
]
