"""End-to-end tests for the /api/articles endpoints."""

from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from feedboard.config import Settings
from feedboard.infrastructure.memory import InMemoryArticleRepository
from feedboard.main import create_app


@pytest_asyncio.fixture
async def repository() -> InMemoryArticleRepository:
    repo = InMemoryArticleRepository()
    await repo.initialize()
    return repo


@pytest_asyncio.fixture
async def client(repository: InMemoryArticleRepository):
    app = create_app(settings=Settings(_env_file=None), repository=repository)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.mark.asyncio
async def test_list_returns_seeded_articles_newest_first(client: AsyncClient):
    response = await client.get("/api/articles")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert len(body["data"]) == 3
    stamps = [datetime.fromisoformat(a["createdAt"].replace("Z", "+00:00")) for a in body["data"]]
    assert stamps == sorted(stamps, reverse=True)
    assert set(body["data"][0]) == {"id", "title", "description", "author", "views", "likes", "createdAt"}


@pytest.mark.asyncio
async def test_create_coerces_views_and_defaults_author(client: AsyncClient):
    response = await client.post("/api/articles", json={"title": "Hi", "views": "3.7"})

    assert response.status_code == 201
    body = response.json()
    assert body["ok"] is True
    assert body["data"]["views"] == 3
    assert body["data"]["likes"] == 0
    assert body["data"]["author"] == "Anónimo"
    assert body["data"]["description"] == ""
    assert body["data"]["id"]


@pytest.mark.asyncio
async def test_create_trims_fields(client: AsyncClient):
    response = await client.post(
        "/api/articles",
        json={"title": "  Nuevo  ", "description": " texto ", "author": " Ana ", "views": -5},
    )

    data = response.json()["data"]
    assert data["title"] == "Nuevo"
    assert data["description"] == "texto"
    assert data["author"] == "Ana"
    assert data["views"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"title": "x"}, {"title": "   "}, {"title": ""}, {}, {"title": 42}])
async def test_create_rejects_invalid_title(client: AsyncClient, payload):
    before = len((await client.get("/api/articles")).json()["data"])

    response = await client.post("/api/articles", json=payload)

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "invalid title"}
    after = len((await client.get("/api/articles")).json()["data"])
    assert after == before


@pytest.mark.asyncio
async def test_create_rejects_non_json_body(client: AsyncClient):
    response = await client.post(
        "/api/articles", content=b"title=Hi", headers={"Content-Type": "text/plain"}
    )
    assert response.status_code == 400
    assert response.json()["ok"] is False


@pytest.mark.asyncio
async def test_later_article_is_listed_first(client: AsyncClient):
    a = (await client.post("/api/articles", json={"title": "Primero"})).json()["data"]
    b = (await client.post("/api/articles", json={"title": "Segundo"})).json()["data"]

    ids = [item["id"] for item in (await client.get("/api/articles")).json()["data"]]
    assert ids.index(b["id"]) < ids.index(a["id"])
    assert ids[0] == b["id"]


@pytest.mark.asyncio
async def test_listing_twice_is_identical(client: AsyncClient):
    first = (await client.get("/api/articles")).json()
    second = (await client.get("/api/articles")).json()
    assert first == second


@pytest.mark.asyncio
async def test_uninitialized_store_maps_to_500():
    app = create_app(settings=Settings(_env_file=None), repository=InMemoryArticleRepository())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        list_response = await http.get("/api/articles")
        create_response = await http.post("/api/articles", json={"title": "Hi"})

    assert list_response.status_code == 500
    assert list_response.json() == {"ok": False, "error": "internal error"}
    assert create_response.status_code == 500


@pytest.mark.asyncio
async def test_other_paths_serve_app_shell(client: AsyncClient):
    response = await client.get("/some/client/route")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Cocina express" in response.text


@pytest.mark.asyncio
async def test_static_assets_are_served(client: AsyncClient):
    response = await client.get("/static/app.js")
    assert response.status_code == 200
    assert "loadFeed" in response.text


@pytest.mark.asyncio
async def test_create_accepts_form_encoded_body(client: AsyncClient):
    response = await client.post("/api/articles", data={"title": " Hola ", "views": "4"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["title"] == "Hola"
    assert data["views"] == 4
    assert data["author"] == "Anónimo"


@pytest.mark.asyncio
async def test_form_encoded_body_with_short_title_is_rejected(client: AsyncClient):
    response = await client.post("/api/articles", data={"title": "x"})

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "invalid title"}


class BrokenArticleRepository(InMemoryArticleRepository):
    """Store whose reads fail with an unexpected error."""

    async def get_all(self):
        raise RuntimeError("disk on fire")


@pytest.mark.asyncio
async def test_unexpected_error_maps_to_500_envelope():
    repository = BrokenArticleRepository()
    await repository.initialize()
    app = create_app(settings=Settings(_env_file=None), repository=repository)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        response = await http.get("/api/articles")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "internal error"}
