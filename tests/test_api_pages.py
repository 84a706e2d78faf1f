"""Tests for page facts API endpoints."""

from typing import Any

import pytest
from aiohttp import web
from justnotes.config import Config
from justnotes.server import create_app


@pytest.fixture
def app(test_config: Config) -> web.Application:
    return create_app(test_config)


class TestGetHome:
    """Tests for GET /api/home."""

    @pytest.mark.asyncio
    async def test__returns_schemes_and_branches(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """List schemes and flat branches."""
        client = await aiohttp_client(app)
        response = await client.get("/api/home")

        assert response.status == 200
        data = await response.json()
        assert data["kind"] == "home"
        assert [s["id"] for s in data["schemes"]] == ["2022", "2021"]
        assert [b["code"] for b in data["branches"]] == ["cse", "ece"]


class TestGetBranchPages:
    """Tests for GET /api/branches/..."""

    @pytest.mark.asyncio
    async def test__branch__returns_facts(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return branch facts with eight semester links."""
        client = await aiohttp_client(app)
        response = await client.get("/api/branches/cse")

        assert response.status == 200
        data = await response.json()
        assert data["kind"] == "branch"
        assert data["short_label"] == "CSE"
        assert len(data["semesters"]) == 8

    @pytest.mark.asyncio
    async def test__semester__returns_cards(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return the three resource-type cards."""
        client = await aiohttp_client(app)
        response = await client.get("/api/branches/cse/3")

        assert response.status == 200
        data = await response.json()
        assert [c["count"] for c in data["cards"]] == [0, 1, 0]

    @pytest.mark.asyncio
    async def test__resource_type__returns_items(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return resources with tags."""
        client = await aiohttp_client(app)
        response = await client.get("/api/branches/cse/3/pyqs")

        assert response.status == 200
        data = await response.json()
        assert data["count"] == 1
        assert data["items"][0]["title"] == "Jan 2023 Paper"
        assert data["items"][0]["tags"] == ["Jan 2023"]

    @pytest.mark.asyncio
    async def test__empty_list__returns_zero_count(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """An empty list is a page, not a 404."""
        client = await aiohttp_client(app)
        response = await client.get("/api/branches/cse/3/notes")

        assert response.status == 200
        data = await response.json()
        assert data["count"] == 0
        assert data["items"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/api/branches/mech",
            "/api/branches/cse/9",
            "/api/branches/cse/3/model-papers",
            "/api/branches/CSE/3/notes",
        ],
    )
    async def test__unknown_segments__returns_404(
        self, aiohttp_client: Any, app: web.Application, path: str
    ) -> None:
        """Return 404 for anything that doesn't resolve."""
        client = await aiohttp_client(app)
        response = await client.get(path)

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Content not found"
        assert data["path"] == path.removeprefix("/api/branches")


class TestGetSchemePages:
    """Tests for GET /api/schemes/..."""

    @pytest.mark.asyncio
    async def test__scheme__returns_branches(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return the scheme's branch directory."""
        client = await aiohttp_client(app)
        response = await client.get("/api/schemes/2022")

        assert response.status == 200
        data = await response.json()
        assert data["label"] == "2022 Scheme"
        assert data["branches"][0]["path"] == "/2022/cse"

    @pytest.mark.asyncio
    async def test__scheme_semester__returns_subjects(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return the subjects of a scheme semester."""
        client = await aiohttp_client(app)
        response = await client.get("/api/schemes/2022/cse/3")

        assert response.status == 200
        data = await response.json()
        assert [s["code"] for s in data["subjects"]] == ["CS301", "CS302"]

    @pytest.mark.asyncio
    async def test__subject__case_insensitive_code(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Resolve subject codes regardless of case."""
        client = await aiohttp_client(app)
        response = await client.get("/api/schemes/2022/cse/3/CS301")

        assert response.status == 200
        data = await response.json()
        assert data["code"] == "CS301"
        assert len(data["breadcrumbs"]) == 5
        assert data["counts"]["model-papers"] == 1

    @pytest.mark.asyncio
    async def test__unknown_subject__returns_404(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return 404 for an unknown subject."""
        client = await aiohttp_client(app)
        response = await client.get("/api/schemes/2022/cse/3/cs999")

        assert response.status == 404
        data = await response.json()
        assert data["path"] == "/2022/cse/3/cs999"


class TestCaching:
    """Tests for ETag handling."""

    @pytest.mark.asyncio
    async def test__etag__returned(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return an ETag and cache headers."""
        client = await aiohttp_client(app)
        response = await client.get("/api/branches/cse")

        assert response.headers["ETag"].startswith('"')
        assert "max-age" in response.headers["Cache-Control"]

    @pytest.mark.asyncio
    async def test__matching_etag__returns_304(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return 304 when If-None-Match matches."""
        client = await aiohttp_client(app)
        first = await client.get("/api/branches/cse")
        etag = first.headers["ETag"]

        response = await client.get("/api/branches/cse", headers={"If-None-Match": etag})

        assert response.status == 304


class TestGetRoutes:
    """Tests for GET /api/routes/{family}."""

    @pytest.mark.asyncio
    async def test__semester__dense_paths(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Enumerate semesters 1-8 per branch."""
        client = await aiohttp_client(app)
        response = await client.get("/api/routes/semester")

        assert response.status == 200
        data = await response.json()
        assert data["family"] == "semester"
        assert len(data["params"]) == 16
        assert data["paths"][0] == "/cse/1"

    @pytest.mark.asyncio
    async def test__sparse__defined_only(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Enumerate only defined semesters with ?sparse."""
        client = await aiohttp_client(app)
        response = await client.get("/api/routes/semester?sparse=1")

        data = await response.json()
        assert data["paths"] == ["/cse/3", "/cse/4"]

    @pytest.mark.asyncio
    async def test__subject__params(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Enumerate subject parameter sets."""
        client = await aiohttp_client(app)
        response = await client.get("/api/routes/subject")

        data = await response.json()
        assert data["params"][0] == {
            "scheme": "2022",
            "branch": "cse",
            "sem": "3",
            "code": "cs301",
        }

    @pytest.mark.asyncio
    async def test__unknown_family__returns_404(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Return 404 for an unknown family."""
        client = await aiohttp_client(app)
        response = await client.get("/api/routes/modules")

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Unknown route family"
