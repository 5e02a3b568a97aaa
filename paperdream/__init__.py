"""PaperDream: card game asset editor backend."""
