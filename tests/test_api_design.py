"""Tests for design endpoints."""

from httpx import AsyncClient

from paperdream.styling import CARD_REGIONS, DEFAULT_CARD_STYLE


class TestResolveDesign:
    async def test_resolve_empty_design(self, client: AsyncClient) -> None:
        response = await client.post("/api/design/resolve", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["style"] == dict(DEFAULT_CARD_STYLE)
        assert data["fontFamily"] == "'Rajdhani', sans-serif"
        assert data["textSizes"] == {"title": "20px", "body": "14px", "label": "10px"}
        assert data["headerRadius"] == "0"
        assert data["footer"] == {
            "visible": True,
            "backgroundColor": "#f59e0b33",
            "textColor": "#f59e0b",
        }

    async def test_resolve_legacy_design(self, client: AsyncClient, legacy_design) -> None:
        response = await client.post("/api/design/resolve", json=legacy_design)

        data = response.json()
        assert data["style"]["background"] == "#000000"
        assert data["style"]["titleText"] == "#eeeeee"
        assert data["headerRadius"] == "8px"

    async def test_card_style_overrides_legacy(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/design/resolve",
            json={"backgroundColor": "#000000", "cardStyle": {"background": "#ff0000"}},
        )

        assert response.json()["style"]["background"] == "#ff0000"


    async def test_string_false_does_not_hide_footer(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/design/resolve", json={"footer": {"visible": "false"}}
        )

        assert response.json()["footer"]["visible"] is True

    async def test_literal_false_hides_footer(self, client: AsyncClient) -> None:
        response = await client.post("/api/design/resolve", json={"footer": {"visible": False}})

        assert response.json()["footer"]["visible"] is False


class TestDesignOptions:
    async def test_options_list_every_region(self, client: AsyncClient) -> None:
        response = await client.get("/api/design/options")

        assert response.status_code == 200
        data = response.json()
        assert [r["key"] for r in data["regions"]] == list(CARD_REGIONS)
        for region in data["regions"]:
            assert region["default"] == DEFAULT_CARD_STYLE[region["key"]]
            assert region["swatches"]

    async def test_options_fonts_and_sizes(self, client: AsyncClient) -> None:
        data = (await client.get("/api/design/options")).json()

        assert {f["value"] for f in data["fonts"]} == {
            "gothic",
            "mincho",
            "rounded",
            "handwriting",
            "cinzel",
            "orbitron",
        }
        assert data["textSizes"] == ["xs", "small", "medium", "large"]
        assert data["borderRadii"] == ["none", "small", "medium", "large"]
        assert data["defaultDesign"]["fontFamily"] == "gothic"
        assert data["defaultDesign"]["footer"]["visible"] is True
