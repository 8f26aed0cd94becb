"""Tests for building partial updates from request bodies."""

from pipo.features.pets.dtos import UpdatePetRequest
from pipo.features.pets.models import ContactChannel
from pipo.features.pets.patch import UNSET, PetPatch


class TestPetPatch:
    def test_absent_keys_stay_unset(self):
        patch = PetPatch.from_model(UpdatePetRequest.model_validate({}))

        assert patch.name is UNSET
        assert patch.remove_photo is False
        assert patch.changes() == {}

    def test_null_means_clear(self):
        patch = PetPatch.from_model(
            UpdatePetRequest.model_validate({"photo_url": None, "notes": None})
        )

        assert patch.changes() == {"notes": None}
        assert patch.remove_photo is True
        assert patch.name is UNSET

    def test_photo_is_never_a_value(self):
        patch = PetPatch.from_model(UpdatePetRequest.model_validate({"name": "Rex"}))

        assert "photo_url" not in patch.changes()
        assert "remove_photo" not in patch.changes()

    def test_values_are_kept(self):
        patch = PetPatch.from_model(
            UpdatePetRequest.model_validate(
                {"name": "Pipoca", "contact_channel": "call"}
            )
        )

        assert patch.changes() == {
            "name": "Pipoca",
            "contact_channel": ContactChannel.CALL,
        }

    def test_unset_repr(self):
        assert repr(UNSET) == "UNSET"
