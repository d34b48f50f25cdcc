"""Tests for project endpoints and tech-tag search."""

import pytest
from httpx import AsyncClient

from src.hirehub.models import Company
from tests.helpers import auth_headers

pytestmark = pytest.mark.integration


async def _create(client: AsyncClient, headers: dict, name: str, techs: list[str]) -> dict:
    response = await client.post(
        "/api/v1/projects", json={"name": name, "techs": techs}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def catalog(client: AsyncClient, company_headers) -> dict[str, dict]:
    """Projects P1 {Java, Go}, P2 {Go}, P3 {Rust}."""
    return {
        "P1": await _create(client, company_headers, "P1", ["Java", "Go"]),
        "P2": await _create(client, company_headers, "P2", ["Go"]),
        "P3": await _create(client, company_headers, "P3", ["Rust"]),
    }


class TestCreateProject:
    async def test_create(self, client: AsyncClient, test_company: Company, company_headers):
        data = await _create(client, company_headers, "Billing", ["Go", " Java", "Go"])

        assert data["company_id"] == test_company.id
        assert [tech["name"] for tech in data["techs"]] == ["Go", "Java"]
        assert data["version"] == 1

    async def test_existing_techs_reused(self, client: AsyncClient, company_headers):
        first = await _create(client, company_headers, "A", ["Go"])
        second = await _create(client, company_headers, "B", ["Go"])

        assert first["techs"][0]["id"] == second["techs"][0]["id"]

    async def test_user_cannot_create(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/v1/projects", json={"name": "X", "techs": []}, headers=user_headers
        )
        assert response.status_code == 403


class TestSearchProjects:
    async def test_union_each_project_once(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/projects", params={"tech": ["Java", "Go"]})

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["items"]] == ["P1", "P2"]
        assert data["total_count"] == 2

    async def test_paged(self, client: AsyncClient, catalog):
        response = await client.get(
            "/api/v1/projects",
            params={"tech": ["Java", "Go", "Rust"], "offset": 0, "size": 2},
        )

        data = response.json()
        assert [p["name"] for p in data["items"]] == ["P1", "P2"]
        assert data["total_count"] == 3
        assert data["offset"] == 0
        assert data["size"] == 2

    async def test_names_stripped_like_on_create(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/projects", params={"tech": [" Go", "Rust  ", " "]})

        assert response.status_code == 200
        assert [p["name"] for p in response.json()["items"]] == ["P1", "P2", "P3"]

    async def test_no_tech_matches_nothing(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/projects")

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert response.json()["total_count"] == 0

    async def test_size_over_limit_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/projects", params={"tech": "Go", "size": 1000})
        assert response.status_code == 422

    async def test_negative_offset_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/projects", params={"tech": "Go", "offset": -1})
        assert response.status_code == 422


class TestGetProject:
    async def test_get(self, client: AsyncClient, catalog):
        project_id = catalog["P2"]["id"]
        response = await client.get(f"/api/v1/projects/{project_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "P2"

    async def test_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/projects/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Project 999 not found"

    async def test_techs(self, client: AsyncClient, catalog):
        response = await client.get(f"/api/v1/projects/{catalog['P1']['id']}/techs")

        assert response.status_code == 200
        assert [tech["name"] for tech in response.json()] == ["Java", "Go"]

    async def test_techs_for_missing_project(self, client: AsyncClient):
        response = await client.get("/api/v1/projects/999/techs")
        assert response.status_code == 404


class TestPatchProject:
    async def test_patch_description(self, client: AsyncClient, company_headers, catalog):
        project_id = catalog["P1"]["id"]

        response = await client.patch(
            f"/api/v1/projects/{project_id}",
            json={"description": "Now with Kotlin"},
            headers=company_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["description"] == "Now with Kotlin"
        assert data["name"] == "P1"
        assert data["version"] == 2

    async def test_owner_cannot_be_reassigned(self, client: AsyncClient, company_headers, catalog):
        response = await client.patch(
            f"/api/v1/projects/{catalog['P1']['id']}",
            json={"company_id": 2},
            headers=company_headers,
        )

        assert response.status_code == 422
        assert "company_id" in response.json()["detail"]

    async def test_other_company_forbidden(
        self, client: AsyncClient, other_company: Company, catalog
    ):
        response = await client.patch(
            f"/api/v1/projects/{catalog['P1']['id']}",
            json={"name": "Mine now"},
            headers=auth_headers(other_company),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Project belongs to another company"

    async def test_patch_missing_project(self, client: AsyncClient, company_headers):
        response = await client.patch(
            "/api/v1/projects/999", json={"name": "X"}, headers=company_headers
        )
        assert response.status_code == 404


class TestListings:
    async def test_tech_catalog_alphabetical(self, client: AsyncClient, catalog):
        response = await client.get("/api/v1/projects/techs")

        assert response.status_code == 200
        assert [tech["name"] for tech in response.json()] == ["Go", "Java", "Rust"]

    async def test_my_projects(
        self, client: AsyncClient, company_headers, other_company: Company, catalog
    ):
        await _create(client, auth_headers(other_company), "Elsewhere", ["Go"])

        response = await client.get(
            "/api/v1/companies/me/projects", params={"size": 2}, headers=company_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["items"]] == ["P1", "P2"]
        assert data["total_count"] == 3

    async def test_my_projects_second_page(self, client: AsyncClient, company_headers, catalog):
        response = await client.get(
            "/api/v1/companies/me/projects",
            params={"offset": 2, "size": 2},
            headers=company_headers,
        )

        assert [p["name"] for p in response.json()["items"]] == ["P3"]
