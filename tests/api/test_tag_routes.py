"""HTTP tests for the admin tag routes and tag images."""

import csv
import io
import zipfile

import pytest

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.asyncio
class TestAdminTagRoutes:
    """Provisioning, listing and exporting tags."""

    async def test_generate_list_and_stats(self, client, sign_in, admin):
        # Arrange
        sign_in(client, admin)

        # Act
        generated = await client.post("/api/v1/admin/tags/generate", json={"count": 3})
        listing = await client.get(
            "/api/v1/admin/tags", params={"page": 1, "page_size": 2}
        )
        stats = await client.get("/api/v1/admin/tags/stats")

        # Assert
        assert generated.status_code == 201
        assert [t["code"] for t in generated.json()["tags"]] == [
            "00001",
            "00002",
            "00003",
        ]
        assert listing.status_code == 200
        assert listing.json()["total"] == 3
        assert listing.json()["total_pages"] == 2
        assert len(listing.json()["tags"]) == 2
        assert stats.json() == {
            "total_tags": 3,
            "unbound_tags": 3,
            "bound_tags": 0,
            "total_pets": 0,
        }

    @pytest.mark.parametrize("count", [0, 101])
    async def test_generate_rejects_out_of_range_count(
        self, client, sign_in, admin, count
    ):
        sign_in(client, admin)

        response = await client.post(
            "/api/v1/admin/tags/generate", json={"count": count}
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"page_size": 0}, {"page_size": 101}, {"filter": "lost"}],
    )
    async def test_list_rejects_bad_query(self, client, sign_in, admin, params):
        sign_in(client, admin)

        response = await client.get("/api/v1/admin/tags", params=params)

        assert response.status_code == 422

    async def test_tutor_is_forbidden(self, client, sign_in, tutor):
        sign_in(client, tutor)

        response = await client.post("/api/v1/admin/tags/generate", json={"count": 1})

        assert response.status_code == 403

    async def test_anonymous_is_unauthorized(self, client):
        response = await client.get("/api/v1/admin/tags")

        assert response.status_code == 401

    async def test_export_csv(
        self, client, sign_in, admin, tutor, create_tags, register_pet
    ):
        # Arrange
        await create_tags("00001", "00002")
        await register_pet("00002", tutor, name="Pipoca")
        sign_in(client, admin)

        # Act
        response = await client.get(
            "/api/v1/admin/tags/export", params={"format": "csv", "filter": "bound"}
        )

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][:3] == ["Code", "Status", "URL"]
        assert len(rows) == 2
        assert rows[1][0] == "00002"
        assert "Pipoca" in rows[1]

    async def test_export_zip(self, client, sign_in, admin, create_tags):
        await create_tags("00001", "00002")
        sign_in(client, admin)

        response = await client.get("/api/v1/admin/tags/export", params={"format": "zip"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/zip"
        with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
            names = set(archive.namelist())
        assert names == {"00001.png", "00002.png", "manifest.csv"}

    async def test_get_download_and_delete(self, client, sign_in, admin, create_tags):
        # Arrange
        (tag,) = await create_tags("00001")
        sign_in(client, admin)

        # Act
        fetched = await client.get(f"/api/v1/admin/tags/{tag.id}")
        image = await client.get(f"/api/v1/admin/tags/{tag.id}/qr.png")
        deleted = await client.delete(f"/api/v1/admin/tags/{tag.id}")
        missing = await client.get(f"/api/v1/admin/tags/{tag.id}")

        # Assert
        assert fetched.status_code == 200
        assert fetched.json()["code"] == "00001"
        assert image.status_code == 200
        assert image.content.startswith(PNG_SIGNATURE)
        assert 'filename="pipo-qr-00001.png"' in image.headers["content-disposition"]
        assert deleted.status_code == 200
        assert missing.status_code == 404


@pytest.mark.asyncio
class TestPublicTagImage:
    async def test_tag_image(self, client, create_tags):
        await create_tags("00001")

        response = await client.get("/api/v1/tags/00001/qr.png")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(PNG_SIGNATURE)

    async def test_unknown_tag_image(self, client):
        response = await client.get("/api/v1/tags/00009/qr.png")

        assert response.status_code == 404
