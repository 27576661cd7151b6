"""Tests for the search, company and export endpoints."""

import csv
import io

import pytest

SEARCH_URL = "/api/v1/search"


@pytest.mark.asyncio
async def test_empty_filters_return_everything(client):
    """Results are wrapped in an envelope, in catalog order."""
    response = await client.post(SEARCH_URL, json={})
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == 12
    assert [company["id"] for company in data["results"]] == list(range(1, 13))
    assert data["results"][0]["technologies"][0] == "React"


@pytest.mark.asyncio
async def test_missing_body_means_no_filters(client):
    response = await client.post(SEARCH_URL)
    assert response.status_code == 200
    assert response.json()["total"] == 12


@pytest.mark.asyncio
async def test_structured_filters(client):
    response = await client.post(SEARCH_URL, json={
        "technologiesAnd": ["Python"],
        "technologiesNot": ["Java"],
        "minRevenue": {"value": 80, "unit": "millions"},
    })
    assert response.status_code == 200
    assert [company["id"] for company in response.json()["results"]] == [6, 9]


@pytest.mark.asyncio
async def test_text_search_with_typo(client):
    response = await client.post(SEARCH_URL, json={"search": "Innovaet"})
    assert [company["name"] for company in response.json()["results"]] == ["Innovate Inc."]


@pytest.mark.asyncio
async def test_no_matches_is_not_an_error(client):
    response = await client.post(SEARCH_URL, json={"countries": ["Atlantis"]})
    assert response.status_code == 200
    assert response.json()["results"] == []
    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_invalid_filters_are_rejected(client):
    response = await client.post(SEARCH_URL, json={"techCount": [5, 2]})
    assert response.status_code == 422

    response = await client.post(SEARCH_URL, json={"colour": "blue"})
    assert response.status_code == 422

    response = await client.post(SEARCH_URL, json={"minRevenue": {"value": 1e305, "unit": "billions"}})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_pagination_sorts_by_name(client):
    """Paged results are ordered by name so pages are stable."""
    response = await client.post(f"{SEARCH_URL}?page=2&per_page=5", json={})
    data = response.json()

    assert data["total"] == 12
    assert data["page"] == 2
    assert data["per_page"] == 5
    assert data["pages"] == 3
    assert [company["name"] for company in data["results"]] == [
        "Gamer's Hub",
        "GreenEnergy Solutions",
        "HealthWell",
        "Innovate Inc.",
        "RealEstate Finder",
    ]


@pytest.mark.asyncio
async def test_explicit_sort(client):
    response = await client.post(f"{SEARCH_URL}?sort_by=revenue&sort_order=desc", json={})
    revenues = [company["revenue"] for company in response.json()["results"]]
    assert revenues == sorted(revenues, reverse=True)

    response = await client.post(f"{SEARCH_URL}?sort_by=colour", json={})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_filter_options(client):
    response = await client.get(f"{SEARCH_URL}/options")
    assert response.status_code == 200

    data = response.json()
    assert "React" in data["technologies"]
    assert data["countries"] == sorted(data["countries"])
    assert "Tel Aviv" in data["office_locations"]


@pytest.mark.asyncio
async def test_legacy_route_returns_bare_array(client):
    """The unversioned route accepts the per-item technology shape."""
    response = await client.post("/api/search", json={
        "technologies": [
            {"value": "React", "condition": "AND"},
            {"value": "Node.js", "condition": "NOT"},
        ],
        "minRevenue": 50,
        "minRevenueUnit": "million",
    })
    assert response.status_code == 200

    data = response.json()
    assert isinstance(data, list)
    assert [company["id"] for company in data] == [4, 6]


@pytest.mark.asyncio
async def test_legacy_route_rejects_bad_shape(client):
    response = await client.post("/api/search", json={"techCount": [5, 2]})
    assert response.status_code == 422
    assert response.json()["errors"]


@pytest.mark.asyncio
async def test_get_company(client):
    response = await client.get("/api/v1/companies/9")
    assert response.status_code == 200
    assert response.json()["name"] == "CyberGuard"

    response = await client.get("/api/v1/companies/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_refresh_catalog(client):
    response = await client.post("/api/v1/companies/refresh")
    assert response.status_code == 200
    assert response.json()["total"] == 12


@pytest.mark.asyncio
async def test_export_csv(client):
    response = await client.post(f"{SEARCH_URL}/export?format=csv", json={"countries": ["UK"]})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "techstack_explorer_results.csv" in response.headers["content-disposition"]

    rows = list(csv.DictReader(io.StringIO(response.text)))
    assert [row["name"] for row in rows] == ["FinSecure", "UK Travel Co"]
    assert rows[0]["technologies"] == "Java; .NET; Azure; SQL Server; Intercom"


@pytest.mark.asyncio
async def test_export_json(client):
    response = await client.post(f"{SEARCH_URL}/export?format=json", json={"countries": ["UK"]})
    assert response.status_code == 200
    assert [company["id"] for company in response.json()] == [3, 11]


@pytest.mark.asyncio
async def test_store_unavailable(app):
    """A catalog that cannot load answers 503."""
    from httpx import ASGITransport, AsyncClient

    from techstack.api.deps import get_catalog
    from techstack.services.search.catalog import CompanyCatalog

    async def broken_loader():
        raise ConnectionError("store down")

    app.dependency_overrides[get_catalog] = lambda: CompanyCatalog(loader=broken_loader)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post(SEARCH_URL, json={})

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
