from paperdream.api.assistant import router as assistant_router
from paperdream.api.cards import router as cards_router
from paperdream.api.design import router as design_router
from paperdream.api.games import router as games_router
from paperdream.api.health import router as health_router
from paperdream.api.render import router as render_router
from paperdream.api.uploads import router as uploads_router

__all__ = [
    "assistant_router",
    "cards_router",
    "design_router",
    "games_router",
    "health_router",
    "render_router",
    "uploads_router",
]
