from paperdream.db.database import get_session, init_db
from paperdream.db.operations import (
    create_card,
    create_game,
    delete_card,
    delete_game,
    get_card,
    get_cards_by_game,
    get_game,
    get_game_by_title,
    get_games,
    update_card,
    update_game,
)

__all__ = [
    "create_card",
    "create_game",
    "delete_card",
    "delete_game",
    "get_card",
    "get_cards_by_game",
    "get_game",
    "get_game_by_title",
    "get_games",
    "get_session",
    "init_db",
    "update_card",
    "update_game",
]
