"""Tests for card API endpoints."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def game(client: AsyncClient) -> dict:
    response = await client.post("/api/games", json={"title": "Demo"})
    return response.json()


class TestCreateCard:
    async def test_create_battle_card(self, client: AsyncClient, game: dict) -> None:
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={
                "name": "Fire Drake",
                "attributes": {"type": "monster", "attack": 7, "hp": 5, "effect": "Burn"},
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["gameId"] == game["id"]
        assert data["kind"] == "battle"
        assert data["attributes"] == {"type": "monster", "attack": 7, "hp": 5, "effect": "Burn"}
        assert data["width"] == 63.0
        assert data["height"] == 88.0

    async def test_create_party_card_by_inference(self, client: AsyncClient, game: dict) -> None:
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={"name": "Sing", "attributes": {"action": "Sing a song"}},
        )

        assert response.status_code == 201
        assert response.json()["kind"] == "party"

    async def test_explicit_kind_overrides_inference(
        self, client: AsyncClient, game: dict
    ) -> None:
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={"name": "Odd", "kind": "party", "attributes": {"effect": "Laugh"}},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["kind"] == "party"
        assert data["attributes"]["difficulty"] == "normal"

    async def test_image_url_defaults_to_front_image(
        self, client: AsyncClient, game: dict
    ) -> None:
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={"name": "Pic", "frontImageUrl": "/uploads/front.png"},
        )

        data = response.json()
        assert data["imageUrl"] == "/uploads/front.png"
        assert data["frontImageUrl"] == "/uploads/front.png"

    async def test_snake_case_input_accepted(self, client: AsyncClient, game: dict) -> None:
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={"name": "Snake", "back_image_url": "/uploads/back.png"},
        )

        assert response.status_code == 201
        assert response.json()["backImageUrl"] == "/uploads/back.png"

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_blank_name_rejected(self, client: AsyncClient, game: dict, name: str) -> None:
        response = await client.post(f"/api/games/{game['id']}/cards", json={"name": name})

        assert response.status_code == 400
        assert response.json()["field"] == "name"

    async def test_missing_name_rejected(self, client: AsyncClient, game: dict) -> None:
        response = await client.post(f"/api/games/{game['id']}/cards", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "missing_required"

    @pytest.mark.parametrize("attack", [11, -1])
    async def test_out_of_range_attack_rejected(
        self, client: AsyncClient, game: dict, attack: int
    ) -> None:
        """Stats outside 0-10 are refused and nothing is stored."""
        response = await client.post(
            f"/api/games/{game['id']}/cards",
            json={"name": "Broken", "attributes": {"attack": attack, "hp": 3}},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "out_of_range"
        assert data["field"] == "attributes.attack"

        cards = (await client.get(f"/api/games/{game['id']}/cards")).json()
        assert cards == []

    async def test_create_card_in_missing_game(self, client: AsyncClient) -> None:
        response = await client.post("/api/games/999/cards", json={"name": "Orphan"})

        assert response.status_code == 404
        assert response.json()["message"] == "Game not found"


class TestEndToEnd:
    async def test_battle_card_round_trip(self, client: AsyncClient) -> None:
        """Create a game and a battle card, then list the game's cards."""
        game = (await client.post("/api/games", json={"title": "Demo"})).json()
        await client.post(
            f"/api/games/{game['id']}/cards",
            json={
                "name": "Cyber Dragon",
                "attributes": {
                    "type": "monster",
                    "attack": 8,
                    "hp": 5,
                    "effect": "Can be summoned without tribute.",
                },
            },
        )

        cards = (await client.get(f"/api/games/{game['id']}/cards")).json()

        assert len(cards) == 1
        assert cards[0]["name"] == "Cyber Dragon"
        assert cards[0]["attributes"]["attack"] == 8
        assert cards[0]["attributes"]["hp"] == 5


class TestReadCards:
    async def test_list_cards_in_order(self, client: AsyncClient, game: dict) -> None:
        for name, order in [("Third", 3), ("First", 1), ("Second", 2)]:
            await client.post(
                f"/api/games/{game['id']}/cards", json={"name": name, "order": order}
            )

        response = await client.get(f"/api/games/{game['id']}/cards")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["First", "Second", "Third"]

    async def test_list_cards_of_missing_game(self, client: AsyncClient) -> None:
        response = await client.get("/api/games/999/cards")

        assert response.status_code == 404

    async def test_get_missing_card(self, client: AsyncClient) -> None:
        response = await client.get("/api/cards/999")

        assert response.status_code == 404
        assert response.json()["message"] == "Card not found"


class TestUpdateCard:
    async def test_update_changes_only_given_fields(
        self, client: AsyncClient, game: dict
    ) -> None:
        card = (
            await client.post(
                f"/api/games/{game['id']}/cards",
                json={"name": "Old", "description": "Keep me", "attributes": {"attack": 2}},
            )
        ).json()

        response = await client.put(f"/api/cards/{card['id']}", json={"name": "New"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "New"
        assert data["description"] == "Keep me"
        assert data["attributes"]["attack"] == 2

    async def test_update_rejects_out_of_range_stat(
        self, client: AsyncClient, game: dict
    ) -> None:
        card = (
            await client.post(
                f"/api/games/{game['id']}/cards",
                json={"name": "Stable", "attributes": {"attack": 2}},
            )
        ).json()

        response = await client.put(
            f"/api/cards/{card['id']}", json={"attributes": {"attack": 11}}
        )

        assert response.status_code == 400
        stored = (await client.get(f"/api/cards/{card['id']}")).json()
        assert stored["attributes"]["attack"] == 2

    async def test_update_blank_name_rejected(self, client: AsyncClient, game: dict) -> None:
        card = (
            await client.post(f"/api/games/{game['id']}/cards", json={"name": "Named"})
        ).json()

        response = await client.put(f"/api/cards/{card['id']}", json={"name": " "})

        assert response.status_code == 400

    async def test_update_missing_card(self, client: AsyncClient) -> None:
        response = await client.put("/api/cards/999", json={"name": "X"})

        assert response.status_code == 404


class TestPartyCardDesign:
    async def test_party_card_without_layout_renders_defaults(
        self, client: AsyncClient, game: dict
    ) -> None:
        card = (
            await client.post(
                f"/api/games/{game['id']}/cards",
                json={"name": "Plain", "kind": "party", "attributes": {"action": "Dance"}},
            )
        ).json()

        spec = (await client.get(f"/api/cards/{card['id']}/render-spec")).json()

        assert spec["style"] == {
            "background": "#1e3a5f",
            "border": "#4a6fa5",
            "titleBg": "rgba(0,0,0,0.3)",
            "titleText": "#ffffff",
            "bodyText": "#ffffff",
            "accent": "#f59e0b",
            "imageFrame": "rgba(255,255,255,0.1)",
        }
        assert spec["footer"]["visible"] is True

    async def test_hiding_footer_only_changes_footer(
        self, client: AsyncClient, game: dict
    ) -> None:
        card = (
            await client.post(
                f"/api/games/{game['id']}/cards",
                json={"name": "Footer", "kind": "party", "attributes": {"action": "Dance"}},
            )
        ).json()
        before = (await client.get(f"/api/cards/{card['id']}/render-spec")).json()

        await client.put(
            f"/api/cards/{card['id']}",
            json={"attributes": {"action": "Dance", "layout": {"footer": {"visible": False}}}},
        )
        after = (await client.get(f"/api/cards/{card['id']}/render-spec")).json()

        assert after["footer"] == {"visible": False, "backgroundColor": None, "textColor": None}
        assert after["style"] == before["style"]
        assert after["fontFamily"] == before["fontFamily"]


    @pytest.mark.parametrize("visible", ["false", 0])
    async def test_saved_non_boolean_visibility_keeps_footer(
        self, client: AsyncClient, game: dict, visible
    ) -> None:
        """Only a literal false hides the footer of a saved card."""
        card = (
            await client.post(
                f"/api/games/{game['id']}/cards",
                json={
                    "name": "Loose",
                    "kind": "party",
                    "attributes": {"layout": {"footer": {"visible": visible}}},
                },
            )
        ).json()

        spec = (await client.get(f"/api/cards/{card['id']}/render-spec")).json()

        assert spec["footer"]["visible"] is True
        assert spec["footer"]["backgroundColor"] == "#f59e0b33"


class TestDeleteCard:
    async def test_delete_card(self, client: AsyncClient, game: dict) -> None:
        card = (
            await client.post(f"/api/games/{game['id']}/cards", json={"name": "Gone"})
        ).json()

        response = await client.delete(f"/api/cards/{card['id']}")

        assert response.status_code == 200
        assert (await client.get(f"/api/cards/{card['id']}")).status_code == 404

    async def test_delete_missing_card(self, client: AsyncClient) -> None:
        response = await client.delete("/api/cards/999")

        assert response.status_code == 404
