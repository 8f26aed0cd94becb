"""Bulk export of tags for printing: CSV listing or ZIP of QR images."""

import csv
import io
import logging
import zipfile
from collections.abc import Sequence
from datetime import datetime

from pipo.features.tags.dtos import ExportFormat, TagSummary
from pipo.features.tags.services.tag_renderer import canonical_url, render_tag

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.csv"
MANIFEST_HEADER = ["Code", "Status", "URL", "Created At", "Activated At"]
TABULAR_HEADER = MANIFEST_HEADER + ["Pet Name", "Tutor Name"]


def _date(value: datetime | None) -> str:
    return value.date().isoformat() if value else ""


def _newest_first(tags: Sequence[TagSummary]) -> list[TagSummary]:
    # Same order as the admin listing: created_at desc, code desc on ties
    return sorted(tags, key=lambda t: (t.created_at, t.code), reverse=True)


def _manifest_row(tag: TagSummary, base_url: str) -> list[str]:
    return [
        tag.code,
        tag.status.name,
        canonical_url(tag.code, base_url),
        _date(tag.created_at),
        _date(tag.bound_at),
    ]


def _write_csv(header: list[str], rows: list[list[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def export_tabular(tags: Sequence[TagSummary], base_url: str) -> bytes:
    """One header row plus one row per tag, including the linked pet names."""
    rows = []
    for tag in _newest_first(tags):
        row = _manifest_row(tag, base_url)
        row.append((tag.pet.name or "") if tag.pet else "")
        row.append(tag.pet.contact_name if tag.pet else "")
        rows.append(row)
    return _write_csv(TABULAR_HEADER, rows).encode("utf-8")


def export_archive(tags: Sequence[TagSummary], base_url: str) -> bytes:
    """ZIP with one ``{code}.png`` per tag and a ``manifest.csv``."""
    ordered = _newest_first(tags)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        for tag in ordered:
            archive.writestr(f"{tag.code}.png", render_tag(tag.code, base_url))
        manifest = _write_csv(
            MANIFEST_HEADER, [_manifest_row(tag, base_url) for tag in ordered]
        )
        archive.writestr(MANIFEST_NAME, manifest)

    logger.info("Built tag archive with %d images", len(ordered))
    return buffer.getvalue()


def export_batch(
    tags: Sequence[TagSummary], base_url: str, export_format: ExportFormat
) -> bytes:
    """Export ``tags`` in the requested format."""
    if export_format is ExportFormat.TABULAR:
        return export_tabular(tags, base_url)
    return export_archive(tags, base_url)
