"""Partial updates with an explicit third state per field.

Each field of ``PetPatch`` is either ``UNSET`` (leave unchanged), ``None``
(clear it) or a value (set it). Building the patch from
``model_fields_set`` keeps "key absent" and "key sent as null" apart.

The photo is not a patchable value: uploads set it. A patch can only ask
for the current photo to be removed.
"""

import enum
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel

from pipo.features.pets.models import ContactChannel


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET

T = TypeVar("T")
Maybe = T | None | _Unset


@dataclass(frozen=True)
class PetPatch:
    """The fields an owner may change on a pet profile."""

    name: Maybe[str] = UNSET
    species: Maybe[str] = UNSET
    breed: Maybe[str] = UNSET
    birth_date: Maybe[date] = UNSET
    sex: Maybe[str] = UNSET
    notes: Maybe[str] = UNSET
    contact_name: Maybe[str] = UNSET
    phone: Maybe[str] = UNSET
    contact_channel: Maybe[ContactChannel] = UNSET
    secondary_phone: Maybe[str] = UNSET
    remove_photo: bool = False

    @classmethod
    def from_model(cls, model: BaseModel) -> "PetPatch":
        """Keep only the fields the client actually sent.

        ``photo_url`` sent as null becomes ``remove_photo``.
        """
        sent = model.model_fields_set & _value_fields()
        return cls(
            remove_photo="photo_url" in model.model_fields_set,
            **{name: getattr(model, name) for name in sent},
        )

    def changes(self) -> dict[str, Any]:
        """Fields to write, with ``None`` meaning clear."""
        return {
            name: getattr(self, name)
            for name in sorted(_value_fields())
            if getattr(self, name) is not UNSET
        }


def _value_fields() -> set[str]:
    return {f.name for f in fields(PetPatch) if f.name != "remove_photo"}
