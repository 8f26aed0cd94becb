"""Queries shared by the admin tag use cases."""

from typing import Any

from sqlalchemy import Select, select

from pipo.features.pets.models import PetProfile
from pipo.features.tags.dtos import TagPetSummary, TagSummary
from pipo.features.tags.models import PetTag, PetTagStatus


def tag_summaries_query(status: PetTagStatus | None = None) -> Select[Any]:
    """Tags with their linked pet (if any), newest first."""
    query = (
        select(
            PetTag,
            PetProfile.id.label("pet_id"),
            PetProfile.name.label("pet_name"),
            PetProfile.contact_name.label("contact_name"),
        )
        .outerjoin(PetProfile, PetProfile.tag_id == PetTag.id)
        .order_by(PetTag.created_at.desc(), PetTag.code.desc())
    )
    if status is not None:
        query = query.where(PetTag.status == status)
    return query


def to_tag_summary(row: Any) -> TagSummary:
    """Build a TagSummary from a row of ``tag_summaries_query``."""
    tag: PetTag = row.PetTag
    pet = None
    if row.pet_id is not None:
        pet = TagPetSummary(
            id=str(row.pet_id), name=row.pet_name, contact_name=row.contact_name
        )
    return summarize_tag(tag, pet)


def summarize_tag(tag: PetTag, pet: TagPetSummary | None = None) -> TagSummary:
    return TagSummary(
        id=str(tag.id),
        code=tag.code,
        status=tag.status,
        created_at=tag.created_at,
        bound_at=tag.bound_at,
        pet=pet,
    )
